# tests/test_belt.py
import copy
import itertools

import numpy as np
import pytest

from fccl import Belt, Point
from fccl.errors import DimensionMismatchError, NonAdjacentGrowthError


def _interval(lo, hi):
    """1-D belt [lo, hi] grown one step at a time."""
    belt = Belt.from_point((lo,))
    for n in range(lo + 1, hi + 1):
        belt.add((n,))
    return belt


def _grow(rng, start, steps):
    """Belt grown from `start` by `steps` random admissible candidates."""
    belt = Belt.from_point(start)
    for _ in range(steps):
        candidates = belt.closest()
        belt.add(candidates[int(rng.integers(len(candidates)))])
    return belt


def _square():
    """3x3 block [1,3] x [0,2] grown from its centre."""
    belt = Belt.from_point((2, 1))
    for p in [(2, 0), (2, 2), (1, 1), (1, 0), (1, 2), (3, 1), (3, 0), (3, 2)]:
        belt.add(p)
    return belt


def test_single_point_belt():
    belt = Belt.from_point((4, 1, 3))
    assert belt.order == 3
    assert belt.bounds == (4, 4)
    assert belt.capacity() == 1
    assert belt.size() == 1
    assert belt.points() == [Point(4, 1, 3)]
    assert belt.contains((4, 1, 3))
    assert (4, 1, 2) not in belt


def test_empty_belt():
    belt = Belt(2)
    assert belt.is_empty and belt.bounds is None
    assert belt.capacity() == 0 and belt.size() == 0
    assert belt.points() == [] and belt.closest() == [] and belt.boundary() == []
    assert not belt.contains((0, 0))
    assert not belt.share(Belt.from_point((0, 0)))
    belt.add((3, 5))
    assert belt == Belt.from_point((3, 5))


def test_order_must_be_positive():
    with pytest.raises(ValueError):
        Belt(0)


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(order=1, lo=5, hi=2),
        dict(order=1, lo=3),
        dict(order=2, lo=3, hi=3),
        dict(order=2, lo=1, hi=2, sub=[Belt(1, lo=0, hi=0)]),
        dict(order=2, lo=1, hi=1, sub=[Belt(2, lo=0, hi=0, sub=[Belt(1, lo=0, hi=0)])]),
        dict(order=1, lo=2, hi=3, sub=[Belt(1, lo=0, hi=0)]),
        dict(order=2, sub=[Belt(1, lo=0, hi=0)]),
    ],
)
def test_inconsistent_layout_is_rejected(kwargs):
    with pytest.raises(ValueError):
        Belt(**kwargs)


def test_explicit_layout():
    belt = Belt(2, lo=1, hi=2, sub=[Belt(1, lo=0, hi=0), Belt(1, lo=0, hi=1)])
    assert belt.points() == [Point(1, 0), Point(2, 0), Point(2, 1)]
    assert belt.capacity() == 3


def test_one_dimensional_growth_both_sides():
    belt = Belt.from_point((3,))
    belt.add((4,))
    belt.add((2,))
    assert belt.bounds == (2, 4)
    assert belt.points() == [Point(2), Point(3), Point(4)]
    assert belt.capacity() == 3
    assert belt.size() == 2


def test_add_is_idempotent_for_contained_points():
    belt = _square()
    before = copy.deepcopy(belt)
    for p in before.points():
        belt.add(p)
    assert belt == before


@pytest.mark.parametrize(
    "start, bad",
    [
        ((3,), (5,)),
        ((3,), (0,)),
        ((2, 2), (4, 2)),
        ((2, 2), (2, 4)),
        ((1, 1, 1), (1, 1, 3)),
        ((2, 2), (3, 4)),
        ((2, 2), (1, 0)),
        ((0, 5, 5), (1, 5, 7)),
    ],
)
def test_non_adjacent_growth_raises_and_leaves_belt_unchanged(start, bad):
    belt = Belt.from_point(start)
    before = copy.deepcopy(belt)
    with pytest.raises(NonAdjacentGrowthError):
        belt.add(bad)
    assert belt == before


def test_growth_is_per_slice():
    belt = Belt.from_point((2, 2))
    belt.add((3, 2))
    belt.add((3, 3))
    belt.add((3, 4))
    # slice 2 still only holds 2; 4 is two steps away from it
    with pytest.raises(NonAdjacentGrowthError):
        belt.add((2, 4))
    belt.add((2, 3))
    belt.add((2, 4))
    assert belt.capacity() == 6


def test_dimension_mismatch():
    belt = Belt.from_point((1, 1))
    with pytest.raises(DimensionMismatchError):
        belt.contains((1,))
    with pytest.raises(DimensionMismatchError):
        belt.add((1, 1, 1))
    with pytest.raises(DimensionMismatchError):
        belt.share(Belt.from_point((1,)))


def test_closest_one_dimensional():
    assert _interval(2, 5).closest() == [Point(1), Point(6)]
    assert _interval(0, 2).closest() == [Point(3)]


def test_closest_two_dimensional_is_axis_only():
    belt = Belt.from_point((2, 2))
    assert sorted(belt.closest()) == [Point(1, 2), Point(2, 1), Point(2, 3), Point(3, 2)]
    corner = Belt.from_point((0, 0))
    assert sorted(corner.closest()) == [Point(0, 1), Point(1, 0)]


def test_closest_of_block():
    expected = {
        (0, 0), (0, 1), (0, 2),
        (4, 0), (4, 1), (4, 2),
        (1, 3), (2, 3), (3, 3),
    }
    got = _square().closest()
    assert len(got) == len(set(got))
    assert set(got) == expected


@pytest.mark.parametrize("start", [(2,), (1, 3), (0, 2, 1)])
def test_closest_candidates_are_outside_and_admissible(start):
    rng = np.random.default_rng(11)
    for _ in range(20):
        belt = _grow(rng, start, 15)
        candidates = belt.closest()
        assert len(candidates) == len(set(candidates))
        for p in candidates:
            assert p not in belt
            grown = copy.deepcopy(belt)
            grown.add(p)
            assert grown.capacity() == belt.capacity() + 1


@pytest.mark.parametrize("start", [(3,), (2, 2), (1, 2, 1)])
def test_capacity_matches_points(start):
    rng = np.random.default_rng(5)
    for steps in range(0, 30, 3):
        belt = _grow(rng, start, steps)
        pts = belt.points()
        assert belt.capacity() == len(pts) == len(set(pts)) == steps + 1
        assert pts == sorted(pts)
        assert all(belt.contains(p) for p in pts)


def test_boundary_of_block():
    belt = _square()
    expected = [
        (1, 0), (1, 1), (1, 2),
        (2, 0), (2, 2),
        (3, 0), (3, 1), (3, 2),
    ]
    assert belt.boundary() == [Point(p) for p in expected]
    assert belt.delim() == belt.boundary()
    assert belt.size() == 6


def test_boundary_one_dimensional():
    assert Belt.from_point((4,)).boundary() == [Point(4)]
    assert _interval(2, 5).boundary() == [Point(2), Point(5)]


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((2, 5), (6, 9), False),
        ((2, 6), (6, 9), True),
        ((0, 3), (1, 2), True),
        ((4, 4), (5, 8), False),
    ],
)
def test_share_one_dimensional(a, b, expected):
    assert _interval(*a).share(_interval(*b)) is expected
    assert _interval(*b).share(_interval(*a)) is expected


@pytest.mark.parametrize("start_a, start_b", [((3, 3), (5, 4)), ((2, 1, 2), (3, 2, 3))])
def test_share_matches_brute_force(start_a, start_b):
    rng = np.random.default_rng(2024)
    for steps_a, steps_b in itertools.product([0, 2, 6, 12], repeat=2):
        a = _grow(rng, start_a, steps_a)
        b = _grow(rng, start_b, steps_b)
        expected = bool(set(a.points()) & set(b.points()))
        assert a.share(b) is expected
        assert b.share(a) is expected
        # a belt grown from one of a's points always overlaps a
        c = _grow(rng, a.points()[-1], steps_b)
        assert a.share(c) and c.share(a)


def test_new_slice_must_touch_edge_slice():
    """A new leading slice may only start next to a point of the edge slice."""
    belt = Belt.from_point((3, 3))
    with pytest.raises(NonAdjacentGrowthError):
        belt.add((4, 100))
    with pytest.raises(NonAdjacentGrowthError):
        belt.add((2, 4))
    assert belt.points() == [Point(3, 3)]

    belt.add((4, 3))
    belt.add((4, 4))
    belt.add((5, 4))
    belt.add((2, 3))
    assert belt.points() == [Point(2, 3), Point(3, 3), Point(4, 3), Point(4, 4), Point(5, 4)]
