import io

import numpy as np
import pytest

from torusascii.core.render import frame_to_text, render_frame
from torusascii.core.torus import TAU, TorusParams
from torusascii.driver import DELTA_A, DELTA_B, Animator
from torusascii.utils.terminal import CURSOR_HOME


class FakeClock:
    def __init__(self, tick):
        self.now = 0.0
        self.tick = tick

    def __call__(self):
        self.now += self.tick
        return self.now


def _animator(interval=0.05, tick=0.01, speed=1.0):
    params = TorusParams(screen_width=40, screen_height=12, frame_interval=interval)
    sleeps = []
    stream = io.StringIO()
    animator = Animator(params, stream=stream, speed=speed, clock=FakeClock(tick), sleep=sleeps.append)
    return animator, stream, sleeps


def test_run_emits_homed_frames():
    animator, stream, _ = _animator()
    assert animator.run(frames=3) == 3
    out = stream.getvalue()
    assert out.count(CURSOR_HOME) == 3
    assert out.count("\n") == 3 * 12


def test_first_frame_uses_initial_angles():
    animator, stream, _ = _animator()
    animator.run(frames=1)
    expected = CURSOR_HOME + frame_to_text(render_frame(0.0, 0.0, animator.params))
    assert stream.getvalue() == expected


def test_angles_advance_by_fixed_deltas():
    animator, _, _ = _animator()
    animator.run(frames=5)
    assert animator.A == pytest.approx(5 * DELTA_A)
    assert animator.B == pytest.approx(5 * DELTA_B)


def test_angles_wrap_into_one_turn():
    animator, _, _ = _animator(speed=200.0)
    animator.advance()
    assert 0.0 <= animator.A < TAU
    assert animator.A == pytest.approx((DELTA_A * 200.0) % TAU)
    assert np.sin(animator.A) == pytest.approx(np.sin(DELTA_A * 200.0))


def test_pacing_sleeps_for_remaining_interval():
    animator, _, sleeps = _animator(interval=0.05, tick=0.01)
    animator.run(frames=2)
    assert sleeps == [pytest.approx(0.04), pytest.approx(0.04)]


def test_no_sleep_when_frame_overruns_interval():
    animator, _, sleeps = _animator(interval=0.005, tick=0.01)
    animator.run(frames=2)
    assert sleeps == []
    assert animator.pause_for(1.0) == 0.0


def test_zero_frames_renders_nothing():
    animator, stream, _ = _animator()
    assert animator.run(frames=0) == 0
    assert stream.getvalue() == ""
