from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import Optional, Sequence

from torusascii.core.render import frame_to_text, render_frame
from torusascii.core.torus import ConfigError, TorusParams
from torusascii.driver import Animator
from torusascii.utils.terminal import TerminalController, terminal_frame_size

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="torusascii",
        description="Renders a rotating, shaded ASCII torus in the terminal.",
    )
    parser.add_argument("--width", type=int, default=80, help="Frame width in columns (default: 80).")
    parser.add_argument("--height", type=int, default=22, help="Frame height in rows (default: 22).")
    parser.add_argument(
        "--fit",
        action="store_true",
        help="Size the frame to the current terminal (overrides --width/--height).",
    )
    parser.add_argument("--minor-radius", type=float, default=1.0, help="Tube radius R1 (default: 1).")
    parser.add_argument("--major-radius", type=float, default=2.0, help="Ring radius R2 (default: 2).")
    parser.add_argument(
        "--distance",
        type=float,
        default=5.0,
        help="Camera distance K2; must exceed R1 + R2 (default: 5).",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=1.0,
        help="Multiplier on the per-frame rotation deltas (default: 1).",
    )
    parser.add_argument(
        "--fps",
        type=float,
        default=30.0,
        help="Target frames per second; 0 renders as fast as possible (default: 30).",
    )
    parser.add_argument("--frames", type=int, default=None, help="Stop after N frames (default: run forever).")
    parser.add_argument(
        "--once",
        action="store_true",
        help="Print a single frame without terminal control sequences and exit.",
    )
    parser.add_argument("--angle-a", type=float, default=0.0, help="Rotation A for --once (radians).")
    parser.add_argument("--angle-b", type=float, default=0.0, help="Rotation B for --once (radians).")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level).",
    )
    parser.add_argument(
        "-vv",
        "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level).",
    )
    return parser


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    for name in ("speed", "fps", "angle_a", "angle_b"):
        if not math.isfinite(getattr(args, name)):
            parser.error(f"{name.replace('_', '-')} must be a finite number")
    if args.fps < 0:
        parser.error("fps must not be negative")
    if args.frames is not None and args.frames < 0:
        parser.error("frames must not be negative")
    return args


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def params_from_args(args: argparse.Namespace) -> TorusParams:
    width, height = args.width, args.height
    if args.fit:
        width, height = terminal_frame_size()
        logger.info("fitting frame to terminal: %dx%d", width, height)
    return TorusParams(
        screen_width=width,
        screen_height=height,
        minor_radius=args.minor_radius,
        major_radius=args.major_radius,
        camera_distance=args.distance,
        frame_interval=1.0 / args.fps if args.fps > 0 else 0.0,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(argv)
    setup_logging(verbose=args.verbose, debug=args.debug)

    try:
        params = params_from_args(args)
    except ConfigError as e:
        logger.error("invalid configuration: %s", e)
        return 2

    if args.once:
        sys.stdout.write(frame_to_text(render_frame(args.angle_a, args.angle_b, params)))
        sys.stdout.flush()
        return 0

    animator = Animator(params, stream=sys.stdout, speed=args.speed)
    with TerminalController(sys.stdout):
        try:
            animator.run(frames=args.frames)
        except KeyboardInterrupt:
            pass
    logger.info("animation finished after %d frames", animator.frames_rendered)
    return 0


if __name__ == "__main__":
    sys.exit(main())
