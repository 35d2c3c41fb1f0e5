"""
Confidence belt over N-dimensional integer points.

A belt of order N stores the span [lo, hi] of its leading coordinate and
one sub-belt of order N-1 per value in that span; a belt of order 1 is the
interval [lo, hi] itself. Inner spans are independent per slice, so the
region is only required to be contiguous along each axis-aligned line
through a slice. Growth happens one unit step at a time, which keeps this
layout valid.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from .errors import DimensionMismatchError, NonAdjacentGrowthError
from .point import Point

Coords = tuple[int, ...]


@dataclass
class Belt:
    """Recursive belt container; see the module docstring for the layout."""

    order: int
    lo: int | None = None
    hi: int | None = None
    sub: deque["Belt"] = field(default_factory=deque)

    def __post_init__(self) -> None:
        if self.order < 1:
            raise ValueError(f"belt order must be >= 1, got {self.order}")
        self.sub = deque(self.sub)
        if (self.lo is None) != (self.hi is None):
            raise ValueError("belt bounds must both be set or both be None")
        if self.lo is None:
            if self.sub:
                raise ValueError("an empty belt cannot hold sub-belts")
            return
        if not 0 <= self.lo <= self.hi:
            raise ValueError(f"invalid belt bounds [{self.lo}, {self.hi}]")
        expected = self.hi - self.lo + 1 if self.order > 1 else 0
        if len(self.sub) != expected:
            raise ValueError(
                f"belt [{self.lo}, {self.hi}] of order {self.order} needs "
                f"{expected} sub-belts, got {len(self.sub)}"
            )
        if any(b.order != self.order - 1 for b in self.sub):
            raise ValueError(
                f"sub-belts of an order {self.order} belt must have order {self.order - 1}"
            )

    @classmethod
    def from_point(cls, point: Sequence[int]) -> "Belt":
        """Degenerate belt holding a single point."""
        coords = tuple(Point(point))
        if not coords:
            raise ValueError("cannot seed a belt from a point without coordinates")
        return cls._seed(coords)

    @classmethod
    def _seed(cls, coords: Coords) -> "Belt":
        sub = deque([cls._seed(coords[1:])]) if len(coords) > 1 else deque()
        return cls(order=len(coords), lo=coords[0], hi=coords[0], sub=sub)

    @property
    def is_empty(self) -> bool:
        return self.lo is None

    @property
    def bounds(self) -> tuple[int, int] | None:
        """Span of the leading coordinate, None for an empty belt."""
        if self.is_empty:
            return None
        return (self.lo, self.hi)

    def _check(self, point: Sequence[int]) -> Coords:
        coords = tuple(Point(point))
        if len(coords) != self.order:
            raise DimensionMismatchError(
                f"point {Point(coords)} not compatible with a belt of order {self.order}"
            )
        return coords

    def _slices(self) -> Iterator[tuple[int, "Belt"]]:
        return zip(range(self.lo, self.hi + 1), self.sub)

    # --- queries -----------------------------------------------------------

    def contains(self, point: Sequence[int]) -> bool:
        return self._contains(self._check(point))

    def __contains__(self, point: object) -> bool:
        return self.contains(point)

    def _contains(self, c: Coords) -> bool:
        if self.is_empty or not self.lo <= c[0] <= self.hi:
            return False
        if self.order == 1:
            return True
        return self.sub[c[0] - self.lo]._contains(c[1:])

    def capacity(self) -> int:
        """Number of points in the belt."""
        if self.is_empty:
            return 0
        if self.order == 1:
            return self.hi - self.lo + 1
        return sum(b.capacity() for b in self.sub)

    def size(self) -> int:
        """Number of points needed to describe the belt's edges."""
        if self.is_empty:
            return 0
        if self.order == 1:
            return 1 if self.lo == self.hi else 2
        return sum(b.size() for b in self.sub)

    def points(self) -> list[Point]:
        """Every point in the belt, in lexicographic order."""
        return [Point(c) for c in self._points()]

    def _points(self) -> list[Coords]:
        if self.is_empty:
            return []
        if self.order == 1:
            return [(n,) for n in range(self.lo, self.hi + 1)]
        return [(x, *c) for x, b in self._slices() for c in b._points()]

    def boundary(self) -> list[Point]:
        """
        Points on the outer edge: the first and last leading slices in full,
        and the edges of every slice in between.
        """
        return [Point(c) for c in self._boundary()]

    delim = boundary

    def _boundary(self) -> list[Coords]:
        if self.is_empty:
            return []
        if self.order == 1:
            if self.lo == self.hi:
                return [(self.lo,)]
            return [(self.lo,), (self.hi,)]
        out: list[Coords] = []
        for x, b in self._slices():
            edge = b._points() if x in (self.lo, self.hi) else b._boundary()
            out.extend((x, *c) for c in edge)
        return out

    def closest(self) -> list[Point]:
        """
        Candidates for the next growth step: every point one unit step
        outside the belt along a single axis. Cost follows the surface of
        the belt, interior points are never visited.
        """
        return [Point(c) for c in self._closest()]

    def _closest(self) -> list[Coords]:
        if self.is_empty:
            return []
        lo, hi = self.lo, self.hi
        if self.order == 1:
            out: list[Coords] = [(lo - 1,)] if lo > 0 else []
            out.append((hi + 1,))
            return out
        out = []
        if lo > 0:
            out.extend((lo - 1, *c) for c in self.sub[0]._points())
        for x, b in self._slices():
            out.extend((x, *c) for c in b._closest())
        out.extend((hi + 1, *c) for c in self.sub[-1]._points())
        return out

    def share(self, other: "Belt") -> bool:
        """True if the two belts have at least one point in common."""
        if not isinstance(other, Belt) or other.order != self.order:
            raise DimensionMismatchError(
                f"cannot intersect a belt of order {self.order} with {other!r}"
            )
        return self._share(other)

    def _share(self, other: "Belt") -> bool:
        if self.is_empty or other.is_empty:
            return False
        lo = max(self.lo, other.lo)
        hi = min(self.hi, other.hi)
        if lo > hi:
            return False
        if self.order == 1:
            return True
        return any(
            self.sub[x - self.lo]._share(other.sub[x - other.lo])
            for x in range(lo, hi + 1)
        )

    # --- growth ------------------------------------------------------------

    def add(self, point: Sequence[int]) -> None:
        """
        Grow the belt by one point. Nothing happens if the point is already
        in the belt. Raises NonAdjacentGrowthError, leaving the belt
        unchanged, if the point is not one unit step away from it.
        """
        coords = self._check(point)
        try:
            self._add(coords)
        except NonAdjacentGrowthError as e:
            raise NonAdjacentGrowthError(
                f"cannot add {Point(coords)}: {e}"
            ) from None

    def _add(self, c: Coords) -> None:
        if self.is_empty:
            seed = Belt._seed(c)
            self.lo, self.hi, self.sub = seed.lo, seed.hi, seed.sub
            return

        x = c[0]
        if self.lo <= x <= self.hi:
            if self.order > 1:
                self.sub[x - self.lo]._add(c[1:])
            return

        if x not in (self.lo - 1, self.hi + 1):
            raise NonAdjacentGrowthError(
                f"coordinate {x} is not adjacent to [{self.lo}, {self.hi}]"
            )
        # a new slice must start next to a point of the slice it extends
        if self.order > 1:
            edge = self.sub[0] if x < self.lo else self.sub[-1]
            if not edge._contains(c[1:]):
                raise NonAdjacentGrowthError(
                    f"{Point(c[1:])} is not in the slice next to coordinate {x}"
                )

        if x < self.lo:
            self.lo = x
            if self.order > 1:
                self.sub.appendleft(Belt._seed(c[1:]))
        else:
            self.hi = x
            if self.order > 1:
                self.sub.append(Belt._seed(c[1:]))
