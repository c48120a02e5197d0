import math

import numpy as np
import pytest

from torusascii.core.torus import (
    DEFAULT_PARAMS,
    TAU,
    ConfigError,
    TorusParams,
    sample_angles,
    sample_surface,
)


def test_defaults_match_reference_geometry():
    p = DEFAULT_PARAMS
    assert (p.screen_width, p.screen_height) == (80, 22)
    assert (p.minor_radius, p.major_radius, p.camera_distance) == (1.0, 2.0, 5.0)
    assert p.glyph_ramp == ".,-~:;=!*#$@"
    assert p.focal_length == pytest.approx(80 * 5 / (4 * 3))


def test_focal_length_is_derived_not_settable():
    p = TorusParams(screen_width=120)
    assert p.focal_length == pytest.approx(120 * 5 / 12)
    with pytest.raises(TypeError):
        TorusParams(focal_length=3.0)


def test_params_are_frozen():
    with pytest.raises(Exception):
        DEFAULT_PARAMS.minor_radius = 0.5


@pytest.mark.parametrize(
    "kwargs",
    [
        {"camera_distance": 3.0},
        {"camera_distance": 2.5},
        {"minor_radius": 2.0},
        {"minor_radius": 0.0},
        {"major_radius": -1.0},
        {"theta_step": 0.0},
        {"phi_step": float("nan")},
        {"screen_width": 1},
        {"screen_height": 0},
        {"glyph_ramp": ""},
        {"frame_interval": -0.1},
    ],
)
def test_invalid_configuration_fails_fast(kwargs):
    with pytest.raises(ConfigError):
        TorusParams(**kwargs)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        TorusParams(camera_distance=1.0)


def test_sample_angles_strict_upper_bound():
    theta = sample_angles(0.07)
    assert theta[0] == 0.0
    assert theta[-1] < TAU
    assert len(theta) == 90
    assert len(sample_angles(0.02)) == 315


def test_sample_angles_exact_division_excludes_full_turn():
    angles = sample_angles(TAU / 4)
    assert np.allclose(angles, [0.0, math.pi / 2, math.pi, 3 * math.pi / 2])


def test_sample_surface_circle():
    theta = np.array([0.0, math.pi / 2, math.pi])
    cx, cy = sample_surface(theta, DEFAULT_PARAMS)
    assert np.allclose(cx, [3.0, 2.0, 1.0])
    assert np.allclose(cy, [0.0, 1.0, 0.0])
