"""The pipe: one colored line turning at random across the terminal.

All mutable state lives in a single dict built by init_state(); step()
advances it by one frame and run() drives frames forever.
"""

import logging
import sys
import time

from termpipes.color import advance, random_color
from termpipes.direction import DEFAULT_GLYPHS, Heading, random_direction
from termpipes.terminal import cell_sequence, clear_screen, write
from termpipes.wrap import WrapInt

logger = logging.getLogger(__name__)

# Run length before a turn is drawn uniformly from [0, COUNTDOWN_RANGE)
COUNTDOWN_RANGE = 20

# Longest single time.sleep call, in seconds
MAX_SLEEP = 86400.0


def init_state(width, height, rng, glyphs=DEFAULT_GLYPHS):
    """Random starting position, direction, color and countdown on a width x height grid."""
    state = {
        "heading": Heading(random_direction(rng), glyphs),
        "color": random_color(rng),
        "countdown": int(rng.integers(0, COUNTDOWN_RANGE)),
        "x": WrapInt(int(rng.integers(0, width)), width - 1),
        "y": WrapInt(int(rng.integers(0, height)), height - 1),
        "rng": rng,
    }
    logger.debug(
        "start at (%s, %s) heading %s, color %s, countdown %d",
        state["x"],
        state["y"],
        state["heading"].direction.name,
        state["color"],
        state["countdown"],
    )
    return state


def shift(coord, delta):
    if delta >= 0:
        return coord + delta
    return coord - -delta


def move(state):
    dx, dy = state["heading"].movement_delta()
    state["x"] = shift(state["x"], dx)
    state["y"] = shift(state["y"], dy)


def step(state):
    """Advance one frame and return the escape sequence that draws it."""
    rng = state["rng"]
    heading = state["heading"]

    state["color"] = advance(state["color"])
    move(state)

    if state["countdown"] == 0:
        state["countdown"] = int(rng.integers(0, COUNTDOWN_RANGE))
        glyph = heading.turn_and_glyph(rng)
    else:
        state["countdown"] -= 1
        glyph = heading.straight_glyph()

    return cell_sequence(state["y"].n + 1, state["x"].n + 1, state["color"], glyph)


def pause(seconds):
    """Sleep for `seconds`, split into calls time.sleep can take."""
    while seconds > MAX_SLEEP:
        time.sleep(MAX_SLEEP)
        seconds -= MAX_SLEEP
    time.sleep(seconds)


def run(state, delay_ms, out=None, frames=None):
    """Clear the screen, then draw a frame every `delay_ms` milliseconds.

    Runs until interrupted unless `frames` caps the number of frames.
    """
    if out is None:
        out = sys.stdout
    delay = delay_ms / 1000

    clear_screen(out)
    tick = 0
    while frames is None or tick < frames:
        write(out, step(state))
        pause(delay)
        tick += 1
