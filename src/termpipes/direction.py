"""Travel direction, right-angle turns and the box-drawing glyph for each cell.

Straight runs draw a bar, a turn draws the corner joining the incoming and
outgoing direction, so the trail reads as one connected pipe.
"""

import enum


class Direction(enum.Enum):
    LEFT = "left"
    DOWN = "down"
    UP = "up"
    RIGHT = "right"


# --- Glyph sets ---

GLYPH_SETS = {
    "double": {
        "vertical": "║",
        "horizontal": "═",
        "top_left": "╔",
        "top_right": "╗",
        "bottom_left": "╚",
        "bottom_right": "╝",
    },
    "light": {
        "vertical": "│",
        "horizontal": "─",
        "top_left": "┌",
        "top_right": "┐",
        "bottom_left": "└",
        "bottom_right": "┘",
    },
}

DEFAULT_GLYPHS = "double"


# --- Tables ---

DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}

# Coin flip False picks the first entry, True the second.
TURNS = {
    Direction.UP: (Direction.RIGHT, Direction.LEFT),
    Direction.DOWN: (Direction.RIGHT, Direction.LEFT),
    Direction.LEFT: (Direction.UP, Direction.DOWN),
    Direction.RIGHT: (Direction.UP, Direction.DOWN),
}

CORNERS = {
    (Direction.RIGHT, Direction.DOWN): "top_right",
    (Direction.UP, Direction.LEFT): "top_right",
    (Direction.DOWN, Direction.RIGHT): "bottom_left",
    (Direction.LEFT, Direction.UP): "bottom_left",
    (Direction.DOWN, Direction.LEFT): "bottom_right",
    (Direction.RIGHT, Direction.UP): "bottom_right",
    (Direction.UP, Direction.RIGHT): "top_left",
    (Direction.LEFT, Direction.DOWN): "top_left",
}


def random_direction(rng):
    return list(Direction)[int(rng.integers(0, 4))]


def movement_delta(direction):
    """(dx, dy) for one step; y grows downward."""
    return DELTAS[direction]


def straight_glyph(direction, glyphs=DEFAULT_GLYPHS):
    if direction in (Direction.UP, Direction.DOWN):
        return GLYPH_SETS[glyphs]["vertical"]
    return GLYPH_SETS[glyphs]["horizontal"]


def turn(direction, rng):
    """One of the two directions perpendicular to `direction`, by coin flip."""
    flip = bool(rng.integers(0, 2))
    return TURNS[direction][flip]


def corner_glyph(old, new, glyphs=DEFAULT_GLYPHS):
    try:
        name = CORNERS[(old, new)]
    except KeyError:
        raise ValueError(f"{old.name} -> {new.name} is not a right-angle turn") from None
    return GLYPH_SETS[glyphs][name]


class Heading:
    """The pipe's current direction plus the glyph set it draws with."""

    def __init__(self, direction, glyphs=DEFAULT_GLYPHS):
        if glyphs not in GLYPH_SETS:
            raise ValueError(
                f"Unknown glyph set '{glyphs}'. Choose from: {', '.join(GLYPH_SETS)}"
            )
        self.direction = direction
        self.glyphs = glyphs

    def movement_delta(self):
        return movement_delta(self.direction)

    def straight_glyph(self):
        return straight_glyph(self.direction, self.glyphs)

    def turn_and_glyph(self, rng):
        """Turn 90 degrees and return the corner glyph for the turn."""
        new = turn(self.direction, rng)
        glyph = corner_glyph(self.direction, new, self.glyphs)
        self.direction = new
        return glyph

    def __repr__(self):
        return f"Heading({self.direction.name}, glyphs={self.glyphs!r})"
