"""
Random number sources for sampling.

Materials and the noise generator draw from an explicit
``numpy.random.Generator``. Callers that do not pass one get a generator
private to the current thread, so render threads never share state.
"""

from __future__ import annotations
import logging
import threading
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)

_local = threading.local()


def get_rng(rng: Optional[np.random.Generator] = None) -> np.random.Generator:
    """Return ``rng`` if given, else this thread's default generator."""
    if rng is not None:
        return rng
    default = getattr(_local, 'rng', None)
    if default is None:
        default = np.random.default_rng()
        _local.rng = default
    return default


def seed(value: Optional[int]) -> np.random.Generator:
    """Reseed the calling thread's default generator.

    Args:
        value: Seed passed to ``numpy.random.default_rng`` (None for fresh entropy)

    Returns:
        The new default generator
    """
    logger.debug("Reseeding default generator for thread %s with %r",
                 threading.current_thread().name, value)
    _local.rng = np.random.default_rng(value)
    return _local.rng


def random_double(rng: np.random.Generator, min_val: float = 0.0, max_val: float = 1.0) -> float:
    """Uniform real in [min_val, max_val)."""
    return float(rng.uniform(min_val, max_val))


def random_int(rng: np.random.Generator, min_val: int, max_val: int) -> int:
    """Uniform integer in [min_val, max_val], both ends inclusive."""
    return int(rng.integers(min_val, max_val, endpoint=True))
