from __future__ import annotations

from typing import Any
import numpy as np
import matplotlib.pyplot as plt

from .belt import Belt


def plot_belt(belt: Belt, ax: Any | None = None, candidates: bool = True) -> Any:
    """
    Scatter the points of a 2-D belt; optionally overlay its growth candidates.
    """
    if belt.order != 2:
        raise ValueError(f"only belts of order 2 can be plotted, got {belt.order}")
    if ax is None:
        fig, ax = plt.subplots()
        _ = fig  # silence linters if unused
    pts = np.asarray(belt.points(), dtype=float).reshape(-1, 2)
    ax.scatter(pts[:, 0], pts[:, 1], marker="s", label=f"belt ({len(pts)} points)")
    if candidates:
        adj = np.asarray(belt.closest(), dtype=float).reshape(-1, 2)
        ax.scatter(adj[:, 0], adj[:, 1], marker="x", label="candidates")
    ax.set_xlabel("n_0")
    ax.set_ylabel("n_1")
    ax.legend()
    return ax
