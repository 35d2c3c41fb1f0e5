from __future__ import annotations


class DimensionMismatchError(ValueError):
    """A point, rate list or belt does not match the number of channels."""


class NonAdjacentGrowthError(ValueError):
    """A belt was asked to grow by more than one unit step."""


class ConvergenceError(RuntimeError):
    """Belt expansion stopped before the confidence level was reached."""
