"""
FCCL — Feldman-Cousins confidence belts for Poisson counts:
- Points (event counts per channel) and rates (signal, background)
- Poisson primitives: log-likelihood ratio, probability, partial ratios
- Recursive N-dimensional belt container
- Region expansion by likelihood-ratio ordering
- Rejection and Dirac/Majorana separation scans
"""

from .point import Point
from .rate import Rate
from .poisson import llratio, poisson, partial, hood, prob, part
from .belt import Belt
from .region import Region, check_coverage
from .scan import Rejection, Separation, rejection_signal, lnv_scan, format_block
from .errors import DimensionMismatchError, NonAdjacentGrowthError, ConvergenceError
from .utils import make_rng

__all__ = [
    "Point",
    "Rate",
    "llratio",
    "poisson",
    "partial",
    "hood",
    "prob",
    "part",
    "Belt",
    "Region",
    "check_coverage",
    "Rejection",
    "Separation",
    "rejection_signal",
    "lnv_scan",
    "format_block",
    "DimensionMismatchError",
    "NonAdjacentGrowthError",
    "ConvergenceError",
    "make_rng",
]

__version__ = "2026.10.0"
