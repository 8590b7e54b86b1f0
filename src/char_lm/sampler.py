from __future__ import annotations

import numpy as np

from .distribution import Distribution


def sample(distribution: Distribution, draw: float) -> str:
    """Inverse-CDF lookup of ``draw`` (uniform on [0, 1)) in ``distribution``.

    Returns the character of the first entry whose cumulative probability is
    strictly greater than ``draw``. If rounding left the last cumulative
    probability at or below ``draw``, the last entry's character is returned.
    """

    if not 0.0 <= draw < 1.0:
        raise ValueError(f"draw must be in [0, 1), got {draw}")

    cumulative = distribution.cumulative
    index = int(np.searchsorted(cumulative, draw, side="right"))
    if index >= len(cumulative):
        index = len(cumulative) - 1
    return distribution[index].char


def sample_with(distribution: Distribution, rng: np.random.Generator) -> str:
    return sample(distribution, float(rng.random()))
