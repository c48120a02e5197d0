from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .torus import TorusParams, sample_angles, sample_surface


@dataclass
class ProjectedSamples:
    """Flat per-sample arrays: screen column/row, reciprocal depth, illumination."""

    xp: np.ndarray
    yp: np.ndarray
    ooz: np.ndarray
    lum: np.ndarray

    def __len__(self) -> int:
        return int(self.xp.size)

    def select(self, mask: np.ndarray) -> ProjectedSamples:
        return ProjectedSamples(self.xp[mask], self.yp[mask], self.ooz[mask], self.lum[mask])


def project_torus(A: float, B: float, params: TorusParams) -> ProjectedSamples:
    """Rotate every (theta, phi) surface sample by A and B and project it.

    Rows of the intermediate grids follow theta, columns follow phi; the
    result is flattened in that order.
    """
    cosA, sinA = math.cos(A), math.sin(A)
    cosB, sinB = math.cos(B), math.sin(B)

    theta = sample_angles(params.theta_step)[:, np.newaxis]
    phi = sample_angles(params.phi_step)[np.newaxis, :]
    costheta, sintheta = np.cos(theta), np.sin(theta)
    cosphi, sinphi = np.cos(phi), np.sin(phi)

    circle_x, circle_y = sample_surface(theta, params)

    x = circle_x * (cosB * cosphi + sinA * sinB * sinphi) - circle_y * cosA * sinB
    y = circle_x * (sinB * cosphi - sinA * cosB * sinphi) + circle_y * cosA * cosB
    z = params.camera_distance + cosA * circle_x * sinphi + circle_y * sinA
    ooz = 1.0 / z

    k1 = params.focal_length
    # y is negated: it grows upward in 3D but downward on screen
    xp = np.trunc(params.screen_width // 2 + k1 * x * ooz).astype(np.int64)
    yp = np.trunc(params.screen_height // 2 - k1 * params.aspect_ratio * y * ooz).astype(np.int64)

    lum = (cosphi * costheta * sinB - cosA * costheta * sinphi - sinA * sintheta
           + cosB * (cosA * sintheta - costheta * sinA * sinphi))

    return ProjectedSamples(xp.ravel(), yp.ravel(), ooz.ravel(), lum.ravel())


def visible_mask(samples: ProjectedSamples, width: int, height: int) -> np.ndarray:
    # L <= 0 faces away from the viewer; row 0 and column 0 are never plotted
    return ((samples.lum > 0)
            & (samples.xp > 0) & (samples.xp < width)
            & (samples.yp > 0) & (samples.yp < height))


def cull(samples: ProjectedSamples, width: int, height: int) -> ProjectedSamples:
    return samples.select(visible_mask(samples, width, height))
