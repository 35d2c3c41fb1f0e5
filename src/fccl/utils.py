from __future__ import annotations

import logging
import sys

import numpy as np


def make_rng(seed: int | None) -> np.random.Generator:
    """Create a PCG64-based Generator, or numpy default if seed is None."""
    return np.random.default_rng(None if seed is None else np.random.PCG64(seed))


def get_logger(name: str) -> logging.Logger:
    """Logger for a module of the package."""
    return logging.getLogger(f"fccl.{name}")


def setup_logging(verbose: int = 0) -> logging.Logger:
    """
    Configure console logging for scripts.

    verbose: 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
    """
    if verbose == 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logger = logging.getLogger("fccl")
    logger.setLevel(level)
    return logger
