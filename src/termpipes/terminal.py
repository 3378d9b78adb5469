"""Raw ANSI output and the terminal size query."""

import logging
import os
import sys

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[2J"


class TerminalSizeError(RuntimeError):
    """The terminal's character grid could not be determined."""


def terminal_size(fd=None):
    """(columns, rows) of the terminal attached to `fd` (stdout by default)."""
    try:
        if fd is None:
            fd = sys.stdout.fileno()
        columns, rows = os.get_terminal_size(fd)
    except OSError as exc:
        raise TerminalSizeError(f"cannot read terminal size: {exc}") from exc
    if columns <= 0 or rows <= 0:
        raise TerminalSizeError(f"terminal reports {columns}x{rows}")
    return columns, rows


def cell_sequence(row, col, color, glyph):
    """Move to (row, col), 1-based, set a truecolor foreground and draw `glyph`."""
    r, g, b = color
    return f"\x1b[{row};{col}H\x1b[38;2;{r};{g};{b}m{glyph}"


def write(out, text):
    """Write and flush, ignoring a closed or broken stream."""
    try:
        out.write(text)
        out.flush()
    except OSError as exc:
        logger.debug("write failed: %s", exc)


def clear_screen(out):
    write(out, CLEAR_SCREEN)
