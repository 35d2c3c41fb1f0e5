"""
Parameter scans built on Region.expand.

- rejection_signal: smallest mean signal for which a background-only
  observation falls outside the belt (null hypothesis rejected).
- lnv_scan: whether lepton-number conserving/violating counts can tell a
  Dirac from a Majorana hypothesis, i.e. whether their belts are disjoint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from .belt import Belt
from .config import LNV_CL, LNV_SCALE, REJECT_CL, REJECT_STEP
from .point import Point
from .rate import Rate
from .region import Region
from .utils import get_logger

logger = get_logger("scan")


@dataclass
class Rejection:
    """Minimum signal rejecting the background, and its belt."""

    signal: float
    background: float
    belt: Belt

    @property
    def lower(self) -> Point:
        return self.belt.points()[0]

    @property
    def upper(self) -> Point:
        return self.belt.points()[-1]


def rejection_signal(
    background: float,
    cl: float = REJECT_CL,
    step: float = REJECT_STEP,
    rng: np.random.Generator | None = None,
) -> Rejection:
    """
    Raise the signal from sqrt(background) in increments of ``step`` until the
    background-only count int(background) is no longer in the 1-D belt.
    """
    if background < 0:
        raise ValueError(f"background must be non-negative, got {background}")
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")

    region = Region(1, rng=rng)
    null = Point(int(background))
    rate = Rate(np.sqrt(background), background)
    belt = Belt.from_point(null)
    while belt.contains(null):
        rate.signal += step
        belt = region.expand(cl, [rate])
        logger.debug("signal %.4f: belt %s..%s", rate.signal, *belt.bounds)

    logger.info(
        "background %g rejected at CL=%g for mean signal %.4f", background, cl, rate.signal
    )
    return Rejection(signal=rate.signal, background=background, belt=belt)


@dataclass
class Separation:
    """Dirac and Majorana belts for one signal value."""

    signal: float
    separated: bool
    dirac: Belt
    majorana: Belt


def lnv_scan(
    background: float,
    signals: Iterable[float],
    cl: float = LNV_CL,
    scale: float = LNV_SCALE,
    rng: np.random.Generator | None = None,
) -> list[Separation]:
    """
    Two channels, lepton-number conserving (LNC) and violating (LNV), each
    with the same ``background``.

    Dirac:    LNC ~ s,               LNV ~ s * scale
    Majorana: LNC ~ s (1 + scale)/2, LNV ~ s (1 + scale)/2

    The hypotheses are distinguishable at ``cl`` when their belts share no
    point.
    """
    region = Region(2, rng=rng)
    out: list[Separation] = []
    for s in signals:
        dirac = region.expand(cl, [Rate(s, background), Rate(s * scale, background)])
        mixed = s * (1.0 + scale) / 2.0
        majorana = region.expand(
            cl, [Rate(mixed, background), Rate(mixed, background)]
        )
        separated = not dirac.share(majorana)
        logger.info("signal %g: separated=%s", s, separated)
        out.append(Separation(s, separated, dirac, majorana))
    return out


def format_block(points: Sequence[Sequence[int]]) -> str:
    """Tab-separated rows, one per point, closed by a blank-line separator."""
    rows = ["\t".join(str(c) for c in p) for p in points]
    return "".join(r + "\n" for r in rows) + "\n\n"
