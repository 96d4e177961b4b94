from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from mcda.core import ConsistencyResult, Discrepancy

CONSISTENCY_THRESHOLD = 0.1

# Saaty's random index for matrices of size 1..10.
RANDOM_INDEX = (0.0, 0.0, 0.58, 0.90, 1.12, 1.24, 1.32, 1.41, 1.45, 1.49)


def random_index(size: int) -> float:
    if size < 1:
        return 0.0
    if size > len(RANDOM_INDEX):
        return RANDOM_INDEX[-1]
    return RANDOM_INDEX[size - 1]


def check_consistency(
    pairwise: Sequence[Sequence[float]],
    weights: Sequence[float],
) -> ConsistencyResult:
    n_items = len(pairwise)
    if n_items <= 2:
        return ConsistencyResult(ratio=0.0, is_consistent=True)

    matrix = np.array(pairwise, dtype=float)
    weights_array = np.array(weights, dtype=float)
    weighted_sum = matrix.dot(weights_array)

    consistency_vector = np.zeros(n_items, dtype=float)
    nonzero = weights_array != 0
    consistency_vector[nonzero] = weighted_sum[nonzero] / weights_array[nonzero]

    lambda_max = float(consistency_vector.mean())
    ci = (lambda_max - n_items) / (n_items - 1)
    ri = random_index(n_items)
    ratio = 0.0 if ri == 0 else ci / ri
    return ConsistencyResult(
        ratio=ratio,
        is_consistent=ratio < CONSISTENCY_THRESHOLD,
        lambda_max=lambda_max,
        consistency_index=ci,
        random_index=ri,
    )


def max_pairwise_discrepancy(
    pairwise: Sequence[Sequence[float]],
    weights: Sequence[float],
) -> Discrepancy | None:
    if not pairwise or len(pairwise) != len(weights):
        return None
    best: Discrepancy | None = None
    for i in range(len(pairwise)):
        for j in range(i + 1, len(pairwise)):
            actual = pairwise[i][j]
            if actual <= 0 or weights[i] <= 0 or weights[j] <= 0:
                continue
            expected = weights[i] / weights[j]
            deviation = abs(math.log(actual / expected))
            if best is None or deviation > best.deviation:
                best = Discrepancy(row=i, column=j, actual=actual, expected=expected, deviation=deviation)
    return best
