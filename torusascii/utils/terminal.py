from __future__ import annotations

import shutil
import sys
from typing import TextIO

import numpy as np

from torusascii.core.render import frame_to_text

CLEAR_SCREEN = "\x1b[2J"
CURSOR_HOME = "\x1b[H"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"


def terminal_frame_size(fallback: tuple[int, int] = (80, 24)) -> tuple[int, int]:
    """(columns, lines - 2) of the attached terminal, leaving room for the prompt."""
    size = shutil.get_terminal_size(fallback)
    return max(2, size.columns), max(2, size.lines - 2)


def emit_frame(grid: np.ndarray, stream: TextIO, home: bool = True) -> None:
    if home:
        stream.write(CURSOR_HOME)
    stream.write(frame_to_text(grid))
    stream.flush()


class TerminalController:
    """Clears the screen and hides the cursor on enter; restores it on exit."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    def __enter__(self) -> TerminalController:
        self.stream.write(CLEAR_SCREEN + CURSOR_HOME + HIDE_CURSOR)
        self.stream.flush()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stream.write(SHOW_CURSOR)
        self.stream.flush()
