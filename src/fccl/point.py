from __future__ import annotations

import operator
from typing import Iterable


class Point(tuple):
    """
    Observed event counts, one non-negative integer per channel.

    Build it from coordinates, ``Point(3, 2)``, or from an iterable,
    ``Point([3, 2])``. Points compare and sort as tuples.
    """

    def __new__(cls, *coords: int | Iterable[int]) -> "Point":
        if len(coords) == 1 and not _is_integer(coords[0]):
            coords = tuple(coords[0])
        values = []
        for c in coords:
            if not _is_integer(c):
                raise ValueError(f"point coordinates must be integers, got {c!r}")
            v = operator.index(c) if not isinstance(c, float) else int(c)
            if v < 0:
                raise ValueError(f"point coordinates must be non-negative, got {v}")
            values.append(v)
        return super().__new__(cls, values)

    @property
    def order(self) -> int:
        return len(self)

    def head(self) -> "Point":
        """Drop the trailing coordinate."""
        return Point(self[:-1])

    def tail(self) -> "Point":
        """Drop the leading coordinate."""
        return Point(self[1:])

    def prepend(self, c: int) -> "Point":
        return Point((c, *self))

    def __str__(self) -> str:
        return "<" + ", ".join(str(c) for c in self) + ">"

    def __repr__(self) -> str:
        return f"Point{tuple(self)!r}"


def _is_integer(c: object) -> bool:
    # integral floats are accepted, counts often come out of numpy as floats
    if isinstance(c, float):
        return c.is_integer()
    try:
        operator.index(c)
    except TypeError:
        return False
    return True
