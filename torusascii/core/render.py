from __future__ import annotations

import numpy as np

from .projection import cull, project_torus
from .raster import FrameBuffer
from .torus import DEFAULT_PARAMS, TorusParams


def render_frame(A: float, B: float, params: TorusParams = DEFAULT_PARAMS) -> np.ndarray:
    """Render one frame of the torus rotated by A and B (radians).

    Returns a (screen_height, screen_width) array of single characters drawn
    from the glyph ramp or blank. Buffers are frame-local, so repeated calls
    with the same arguments return identical grids.
    """
    frame = FrameBuffer(params.screen_width, params.screen_height,
                        params.glyph_ramp, params.bucket_scale)
    samples = cull(project_torus(A, B, params), params.screen_width, params.screen_height)
    frame.plot(samples)
    return frame.glyphs()


def frame_lines(grid: np.ndarray) -> list[str]:
    return ["".join(row) for row in grid]


def frame_to_text(grid: np.ndarray) -> str:
    return "".join(line + "\n" for line in frame_lines(grid))
