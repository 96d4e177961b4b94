from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

logger = logging.getLogger(__name__)


def normalize_matrix(pairwise: Sequence[Sequence[float]]) -> np.ndarray:
    """Divide every column of the judgment matrix by its column sum.

    Columns summing to exactly zero are left as they are instead of being
    divided, so a degenerate matrix never raises.
    """
    matrix = np.array(pairwise, dtype=float)
    if matrix.size == 0:
        return matrix.reshape(0, 0)
    column_sums = matrix.sum(axis=0)
    zero_columns = column_sums == 0
    if zero_columns.any():
        logger.warning(
            "Pairwise columns %s sum to zero; leaving them unnormalized",
            np.flatnonzero(zero_columns).tolist(),
        )
    divisors = np.where(zero_columns, 1.0, column_sums)
    return matrix / divisors


def compute_weights(pairwise: Sequence[Sequence[float]]) -> List[float]:
    """Approximate the priority vector as the row means of the normalized matrix."""
    if len(pairwise) == 0:
        return []
    normalized = normalize_matrix(pairwise)
    return normalized.mean(axis=1).tolist()
