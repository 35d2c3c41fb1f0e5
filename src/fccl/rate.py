from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

RateInput = Union["Rate", float, int, Sequence[float]]


@dataclass
class Rate:
    """
    Expected signal and background counts of one channel.

    ``signal`` may be bumped in place between expansions, e.g. when
    scanning for the smallest signal that rejects the background.
    """

    signal: float
    background: float = 0.0

    def __post_init__(self) -> None:
        self.signal = float(self.signal)
        self.background = float(self.background)
        if self.signal < 0 or self.background < 0:
            raise ValueError(f"rates must be non-negative, got {self}")

    @property
    def total(self) -> float:
        """Poisson mean of the channel."""
        return self.signal + self.background

    @classmethod
    def coerce(cls, r: RateInput) -> "Rate":
        """Accept a Rate, a (signal, background) pair or a bare signal."""
        if isinstance(r, Rate):
            return r
        if isinstance(r, (int, float)):
            return cls(r)
        s, b = r
        return cls(s, b)

    def __str__(self) -> str:
        return f"{{{self.signal:g}, {self.background:g}}}"
