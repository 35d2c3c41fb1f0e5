"""
Poisson primitives for a single channel, and their products/sums over
independent channels.

For one channel with ``n`` observed events, signal ``s`` and background ``b``:

- llratio(n, s, b): Feldman-Cousins ordering statistic, -2 ln[P(n|s+b) / P(n|s_best+b)]
  with s_best = max(n - b, 0). Minimal for n = s + b.
- poisson(n, mu): exp(-mu) mu^n / n!
- partial(n0, n, mu): poisson(n, mu) / poisson(n0, mu)

Summing probabilities of points around a start point n0 factorises as

    sum_n P(n) = P(n0) * sum_n partial(n0, n)

so the expansion only needs partial() for each admitted point.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .errors import DimensionMismatchError
from .rate import Rate, RateInput


def llratio(n: float, s: float, b: float = 0.0) -> float:
    """Log-likelihood ratio; also correct when n, s or b is zero."""
    ret = 2.0 * (s - max(n - b, 0.0))
    if n > 0:
        ret -= 2.0 * n * (np.log(s + b) - np.log(max(n, b)))
    return float(ret)


def poisson(n: float, mu: float) -> float:
    """
    Poisson probability of ``n`` events given mean ``mu``.

    Evaluated as a product of n factors exp(-mu/n) * mu / k. The factors are
    summed as logs and exponentiated once, so the running value stays bounded
    for large means where the plain product underflows.
    """
    if n > 0:
        if mu <= 0:
            return 0.0
        log_p = np.log(mu) - mu / n
        ret = 0.0
        k = n
        while k > 0:
            ret += log_p - np.log(k)
            k -= 1
        return float(np.exp(ret))
    return float(np.exp(-mu))


def partial(n0: float, n: float, mu: float) -> float:
    """Ratio poisson(n, mu) / poisson(n0, mu) as a telescoping product."""
    ret = 1.0
    k = max(n, n0)
    while k > min(n, n0):
        ret *= mu / k
        k -= 1
    if n >= n0:
        return ret
    # an underflowed forward product inverts to inf
    return 1.0 / ret if ret > 0 else float(np.inf)


def _pairs(point: Sequence[float], rates: Sequence[RateInput]) -> list[tuple[float, Rate]]:
    if len(point) != len(rates):
        raise DimensionMismatchError(
            f"{len(rates)} rates not compatible with a point of {len(point)} channels"
        )
    return [(n, Rate.coerce(r)) for n, r in zip(point, rates)]


def hood(point: Sequence[float], rates: Sequence[RateInput]) -> float:
    """Log-likelihood ratio of a full point: sum over channels."""
    return float(
        np.sum([llratio(n, r.signal, r.background) for n, r in _pairs(point, rates)])
    )


def prob(point: Sequence[float], rates: Sequence[RateInput]) -> float:
    """Poisson probability of a full point: product over channels."""
    return float(np.prod([poisson(n, r.total) for n, r in _pairs(point, rates)]))


def part(
    start: Sequence[float], point: Sequence[float], rates: Sequence[RateInput]
) -> float:
    """prob(point) / prob(start), channel by channel."""
    if len(start) != len(point):
        raise DimensionMismatchError(
            f"points of {len(start)} and {len(point)} channels cannot be compared"
        )
    return float(
        np.prod(
            [partial(n0, n, r.total) for n0, (n, r) in zip(start, _pairs(point, rates))]
        )
    )
