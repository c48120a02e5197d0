from __future__ import annotations

import numpy as np

from .projection import ProjectedSamples

BLANK = " "


def luminance_buckets(lum: np.ndarray, scale: float, levels: int) -> np.ndarray:
    buckets = np.floor(np.asarray(lum, dtype=np.float64) * scale).astype(np.int64)
    return np.clip(buckets, 0, levels - 1)


class FrameBuffer:
    """Depth-buffered character grid for a single frame.

    `depth` holds reciprocal depth (0.0 means nothing plotted yet, i.e.
    infinitely far); `buckets` holds the glyph index per cell, -1 for blank.
    """

    def __init__(self, width: int, height: int, ramp: str, bucket_scale: float):
        self.width = int(width)
        self.height = int(height)
        self.ramp = ramp
        self.bucket_scale = float(bucket_scale)
        self._glyphs = np.array(list(ramp) + [BLANK], dtype="<U1")
        self.depth = np.empty((self.height, self.width), dtype=np.float64)
        self.buckets = np.empty((self.height, self.width), dtype=np.int64)
        self.reset()

    def reset(self) -> None:
        self.depth.fill(0.0)
        self.buckets.fill(-1)

    def plot(self, samples: ProjectedSamples) -> int:
        """Depth-test a batch of samples; returns how many cells changed.

        A sample replaces a cell only when its reciprocal depth is strictly
        greater than the stored one. Within a batch the closest sample per
        cell wins regardless of its position in the batch; exact depth ties
        resolve to the brighter glyph.
        """
        if len(samples) == 0:
            return 0
        xp, yp = samples.xp, samples.yp
        if (xp.min() < 0 or xp.max() >= self.width
                or yp.min() < 0 or yp.max() >= self.height):
            raise IndexError("sample outside the frame buffer; cull before plotting")

        cells = yp * self.width + xp
        depth = self.depth.reshape(-1)
        buckets = self.buckets.reshape(-1)

        before = depth.copy()
        np.maximum.at(depth, cells, samples.ooz)
        winners = (samples.ooz > before[cells]) & (samples.ooz == depth[cells])
        if not winners.any():
            return 0

        won_cells = cells[winners]
        won_buckets = luminance_buckets(samples.lum[winners], self.bucket_scale, len(self.ramp))
        buckets[won_cells] = -1
        np.maximum.at(buckets, won_cells, won_buckets)
        return int(np.unique(won_cells).size)

    def glyphs(self) -> np.ndarray:
        # index -1 picks the trailing blank
        return self._glyphs[self.buckets]
