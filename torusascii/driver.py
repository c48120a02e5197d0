from __future__ import annotations

import logging
import sys
import time
from typing import Callable, Optional, TextIO

from torusascii.core.render import render_frame
from torusascii.core.torus import TAU, TorusParams
from torusascii.utils.terminal import emit_frame

logger = logging.getLogger(__name__)

DELTA_A = 0.04
DELTA_B = 0.02
TIMING_LOG_EVERY = 100


class Animator:
    """Owns the rotation angles and runs the render/emit/pace loop.

    The render core never sees this state; each frame gets A and B by value.
    """

    def __init__(
        self,
        params: TorusParams,
        stream: Optional[TextIO] = None,
        speed: float = 1.0,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.params = params
        self.stream = stream if stream is not None else sys.stdout
        self.delta_a = DELTA_A * speed
        self.delta_b = DELTA_B * speed
        self.clock = clock
        self.sleep = sleep
        self.A = 0.0
        self.B = 0.0
        self.frames_rendered = 0

    def advance(self) -> None:
        # wrapped so long runs keep full trig precision
        self.A = (self.A + self.delta_a) % TAU
        self.B = (self.B + self.delta_b) % TAU

    def pause_for(self, elapsed: float) -> float:
        return max(0.0, self.params.frame_interval - elapsed)

    def step(self) -> float:
        """Render, emit and advance once; returns the render+emit duration."""
        started = self.clock()
        grid = render_frame(self.A, self.B, self.params)
        emit_frame(grid, self.stream)
        elapsed = self.clock() - started
        self.frames_rendered += 1
        if self.frames_rendered % TIMING_LOG_EVERY == 0:
            logger.debug("frame %d took %.2f ms", self.frames_rendered, elapsed * 1000.0)
        self.advance()
        return elapsed

    def run(self, frames: Optional[int] = None) -> int:
        """Animate forever, or for `frames` frames. Returns frames rendered."""
        logger.info(
            "animating %dx%d torus R1=%s R2=%s K2=%s (K1=%.2f), interval %.3fs",
            self.params.screen_width, self.params.screen_height,
            self.params.minor_radius, self.params.major_radius,
            self.params.camera_distance, self.params.focal_length,
            self.params.frame_interval,
        )
        start_count = self.frames_rendered
        while frames is None or self.frames_rendered - start_count < frames:
            elapsed = self.step()
            pause = self.pause_for(elapsed)
            if pause > 0:
                self.sleep(pause)
        return self.frames_rendered - start_count
