"""Integers on a closed range [0, max] that wrap around at both ends.

One WrapInt per screen axis: walking off the right edge lands on column 0,
walking off the top lands on the last row.
"""


class WrapInt:
    """An immutable integer in [0, max] with modular + and -."""

    __slots__ = ("n", "max")

    def __init__(self, n, max):
        if not 0 <= n <= max:
            raise ValueError(f"n={n} outside [0, {max}]")
        object.__setattr__(self, "n", n)
        object.__setattr__(self, "max", max)

    def __setattr__(self, name, value):
        raise AttributeError(f"WrapInt is immutable, cannot set {name}")

    def _delta(self, other):
        if isinstance(other, WrapInt):
            if other.max != self.max:
                raise ValueError(
                    f"cannot combine ranges [0, {self.max}] and [0, {other.max}]"
                )
            return other.n
        if other < 0:
            raise ValueError(f"step must be non-negative, got {other}")
        return other

    def add(self, other):
        return WrapInt((self.n + self._delta(other)) % (self.max + 1), self.max)

    def subtract(self, other):
        return WrapInt((self.n - self._delta(other)) % (self.max + 1), self.max)

    __add__ = add
    __sub__ = subtract

    def __int__(self):
        return self.n

    def __index__(self):
        return self.n

    def __str__(self):
        return str(self.n)

    def __repr__(self):
        return f"WrapInt(n={self.n}, max={self.max})"

    def __eq__(self, other):
        if not isinstance(other, WrapInt):
            return NotImplemented
        return self.n == other.n and self.max == other.max

    def __hash__(self):
        return hash((self.n, self.max))
