"""Command line entry point.

    termpipes [delay_ms] [--glyphs double|light] [--seed N] [--frames N] [-v]

A missing or unusable delay silently falls back to DEFAULT_DELAY_MS.
"""

import argparse
import logging
import sys

import numpy as np

from termpipes.animation import init_state, run
from termpipes.direction import DEFAULT_GLYPHS, GLYPH_SETS
from termpipes.terminal import TerminalSizeError, terminal_size

logger = logging.getLogger(__name__)

DEFAULT_DELAY_MS = 50

# Largest delay accepted, the range of an unsigned 64-bit integer
MAX_DELAY_MS = 2**64 - 1


def parse_delay(value):
    """Milliseconds from a non-negative integer string, else the default."""
    if value is None:
        return DEFAULT_DELAY_MS
    digits = value[1:] if value.startswith("+") else value
    if not (digits.isascii() and digits.isdigit()) or int(digits) > MAX_DELAY_MS:
        logger.debug("ignoring delay %r, using %d ms", value, DEFAULT_DELAY_MS)
        return DEFAULT_DELAY_MS
    return int(digits)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="termpipes",
        description="A hue-cycling pipe wandering across the terminal",
    )
    parser.add_argument(
        "delay",
        nargs="?",
        default=None,
        help=f"Milliseconds between frames (default: {DEFAULT_DELAY_MS})",
    )
    parser.add_argument(
        "--glyphs",
        choices=list(GLYPH_SETS.keys()),
        default=DEFAULT_GLYPHS,
        help=f"Box-drawing style (default: {DEFAULT_GLYPHS})",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for reproducibility"
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help="Stop after this many frames (default: run forever)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging on stderr"
    )
    return parser


def main(argv=None):
    # Unknown tokens (e.g. a negative delay) are dropped, never reported.
    args, extra = build_parser().parse_known_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )
    if extra:
        logger.debug("ignoring arguments %s", extra)

    delay_ms = parse_delay(args.delay)

    try:
        columns, rows = terminal_size()
    except TerminalSizeError as exc:
        print(f"termpipes: {exc}", file=sys.stderr)
        sys.exit(1)

    logger.debug("grid %dx%d, delay %d ms, glyphs %s", columns, rows, delay_ms, args.glyphs)

    rng = np.random.default_rng(args.seed)
    state = init_state(columns, rows, rng, args.glyphs)

    try:
        run(state, delay_ms, sys.stdout, frames=args.frames)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
