from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

TAU = 2 * math.pi

GLYPH_RAMP = ".,-~:;=!*#$@"


class ConfigError(ValueError):
    """Raised when the torus/camera/screen parameters cannot produce a frame."""


@dataclass(frozen=True)
class TorusParams:
    screen_width: int = 80
    screen_height: int = 22
    minor_radius: float = 1.0
    major_radius: float = 2.0
    camera_distance: float = 5.0
    aspect_ratio: float = 0.5
    theta_step: float = 0.07
    phi_step: float = 0.02
    glyph_ramp: str = GLYPH_RAMP
    # 8 * sqrt(2) = 11.3, so L maps onto buckets 0..11
    bucket_scale: float = 8.0
    frame_interval: float = 1.0 / 30.0
    focal_length: float = field(init=False)

    def __post_init__(self):
        self.validate()
        # the torus's outer edge (x = R1 + R2, z = 0) lands a quarter screen from center
        k1 = self.screen_width * self.camera_distance / (4.0 * self.outer_radius)
        object.__setattr__(self, "focal_length", k1)

    @property
    def outer_radius(self) -> float:
        return self.major_radius + self.minor_radius

    @property
    def nearest_depth(self) -> float:
        return self.camera_distance - self.outer_radius

    def validate(self) -> None:
        if self.screen_width < 2 or self.screen_height < 2:
            raise ConfigError(
                f"screen must be at least 2x2, got {self.screen_width}x{self.screen_height}"
            )
        for name in ("minor_radius", "major_radius", "camera_distance",
                     "aspect_ratio", "theta_step", "phi_step", "bucket_scale"):
            value = getattr(self, name)
            if not (value > 0 and math.isfinite(value)):
                raise ConfigError(f"{name} must be a positive number, got {value!r}")
        if self.frame_interval < 0:
            raise ConfigError(f"frame_interval must be >= 0, got {self.frame_interval!r}")
        if self.minor_radius >= self.major_radius:
            raise ConfigError(
                f"minor_radius ({self.minor_radius}) must be smaller than "
                f"major_radius ({self.major_radius})"
            )
        if self.nearest_depth <= 0:
            raise ConfigError(
                f"camera_distance ({self.camera_distance}) must exceed "
                f"major_radius + minor_radius ({self.outer_radius})"
            )
        if not self.glyph_ramp:
            raise ConfigError("glyph_ramp must not be empty")


DEFAULT_PARAMS = TorusParams()


def sample_angles(step: float) -> np.ndarray:
    """Angles k * step for every k with k * step < 2*pi.

    The bound is strict, so the last sample falls short of a full turn by
    less than one step.
    """
    count = int(math.ceil(TAU / step))
    angles = np.arange(count, dtype=np.float64) * step
    return angles[angles < TAU]


def sample_surface(theta: np.ndarray, params: TorusParams) -> tuple[np.ndarray, np.ndarray]:
    """Cross-section circle of the tube, before revolving around the central axis."""
    circle_x = params.major_radius + params.minor_radius * np.cos(theta)
    circle_y = params.minor_radius * np.sin(theta)
    return circle_x, circle_y
