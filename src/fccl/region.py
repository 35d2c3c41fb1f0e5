"""
Feldman-Cousins acceptance region for N independent Poisson channels.

Starting from the most probable point, points are admitted in ascending
order of log-likelihood ratio until the probability inside the belt
reaches the confidence level. Candidates are the points one unit step
outside the current belt; exact ties are broken with the injected random
generator.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from scipy.stats import poisson as poisson_dist

from .poisson import hood, part, prob
from .belt import Belt
from .config import MAX_STEPS
from .errors import ConvergenceError, DimensionMismatchError
from .point import Point
from .rate import Rate, RateInput
from .utils import get_logger, make_rng

logger = get_logger("region")


class Region:
    """
    Builds confidence belts of a fixed order (number of channels).

    Each call to ``expand`` is independent and returns a fresh Belt; the only
    state kept between calls is the random generator used for tie-breaking.
    """

    def __init__(
        self,
        order: int,
        rng: np.random.Generator | None = None,
        max_steps: int = MAX_STEPS,
    ) -> None:
        if order < 1:
            raise ValueError(f"region order must be >= 1, got {order}")
        self.order = order
        self.rng = rng if rng is not None else make_rng(None)
        self.max_steps = max_steps

    def _rates(self, rates: Sequence[RateInput]) -> list[Rate]:
        if len(rates) != self.order:
            raise DimensionMismatchError(
                f"{len(rates)} rates not compatible with a region of order {self.order}"
            )
        return [Rate.coerce(r) for r in rates]

    def start_point(self, rates: Sequence[RateInput]) -> Point:
        """Expected counts rounded half-up, channel by channel."""
        return Point(int(np.floor(r.total + 0.5)) for r in self._rates(rates))

    def hood(self, point: Sequence[int], rates: Sequence[RateInput]) -> float:
        return hood(point, self._rates(rates))

    def prob(self, point: Sequence[int], rates: Sequence[RateInput]) -> float:
        return prob(point, self._rates(rates))

    def part(
        self, start: Sequence[int], point: Sequence[int], rates: Sequence[RateInput]
    ) -> float:
        return part(start, point, self._rates(rates))

    def step(self, belt: Belt, start: Point, rates: Sequence[RateInput]) -> Point:
        """
        Admit the candidate with the lowest log-likelihood ratio into ``belt``
        and return it.
        """
        rr = self._rates(rates)
        candidates = belt.closest()
        if not candidates:
            raise ConvergenceError(f"belt around {start} has no candidates to grow into")

        scores = np.array([hood(p, rr) for p in candidates], dtype=float)
        ties = np.flatnonzero(scores == scores.min())
        if ties.size == 1:
            best = candidates[int(ties[0])]
        else:
            best = candidates[int(ties[self.rng.integers(ties.size)])]
            logger.debug("tie between %d candidates, picked %s", ties.size, best)

        belt.add(best)
        return best

    def expand(self, cl: float, rates: Sequence[RateInput]) -> Belt:
        """
        Grow a belt around the expected counts until it holds at least ``cl``
        of the probability.

        The mass is accumulated relative to the start point,
        sum_n P(n) / P(start), so every step costs one partial() per channel.
        """
        rr = self._rates(rates)
        if not 0.0 < cl < 1.0:
            raise ValueError(f"confidence level must be in (0, 1), got {cl}")

        start = self.start_point(rr)
        belt = Belt.from_point(start)
        best = prob(start, rr)
        target = cl / best
        total = 1.0
        logger.debug("expanding from %s, P=%.6g, rates %s", start, best, _fmt(rr))

        steps = 0
        while total < target:
            if steps >= self.max_steps:
                raise ConvergenceError(
                    f"no convergence after {steps} points "
                    f"(mass {total * best:.6g} < {cl}) for rates {_fmt(rr)}"
                )
            p = self.step(belt, start, rr)
            total += part(start, p, rr)
            steps += 1
            logger.debug("admitted %s, mass %.6g", p, total * best)

        logger.info(
            "belt at CL=%g for rates %s: %d points, mass %.6g",
            cl,
            _fmt(rr),
            belt.capacity(),
            total * best,
        )
        return belt


def check_coverage(belt: Belt, rates: Sequence[RateInput]) -> float:
    """
    Exact probability content of ``belt`` under ``rates``, summed from the
    Poisson pmf of every point.
    """
    rr = [Rate.coerce(r) for r in rates]
    if len(rr) != belt.order:
        raise DimensionMismatchError(
            f"{len(rr)} rates not compatible with a belt of order {belt.order}"
        )
    pts = np.asarray(belt.points(), dtype=float).reshape(-1, belt.order)
    mu = np.asarray([r.total for r in rr], dtype=float)
    pmf = poisson_dist.pmf(pts, mu)
    return float(np.prod(pmf, axis=1).sum())


def _fmt(rates: Sequence[Rate]) -> str:
    return ", ".join(str(r) for r in rates)
