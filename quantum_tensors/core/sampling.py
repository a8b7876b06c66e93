"""Weighted random index selection."""

from __future__ import annotations

from typing import Sequence

import numpy as np


def weighted_random_int(
    weights: Sequence[float],
    normalize: bool = True,
    rng: np.random.Generator | None = None,
) -> int:
    """Pick an index with probability proportional to its weight.

    Returns the first index whose cumulative weight exceeds a uniform draw
    (scaled by the total weight when normalize is set), or -1 if the weights
    never exceed it (e.g. unnormalized weights summing below the draw).
    """
    if rng is None:
        rng = np.random.default_rng()
    r = rng.random()
    if normalize:
        r *= float(np.sum(weights))
    cum_sum = 0.0
    for i, w in enumerate(weights):
        cum_sum += w
        if cum_sum > r:
            return i
    return -1
