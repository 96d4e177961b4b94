from __future__ import annotations

from typing import List, Mapping, Sequence

import numpy as np

from mcda.core import FinalScore


def compute_final_scores(
    options: Sequence[str],
    criteria: Sequence[str],
    weights: Sequence[float],
    utilities: Mapping[str, Mapping[str, float]],
) -> List[FinalScore]:
    """Weighted sum of utilities per option, in the order of ``options``.

    Missing utilities and missing weights count as zero.
    """
    if not options:
        return []
    weights_array = np.zeros(len(criteria), dtype=float)
    for index, weight in enumerate(list(weights)[: len(criteria)]):
        weights_array[index] = weight or 0.0

    utility_matrix = np.zeros((len(options), len(criteria)), dtype=float)
    for row, option in enumerate(options):
        option_utilities = utilities.get(option, {})
        for column, criterion in enumerate(criteria):
            utility_matrix[row, column] = option_utilities.get(criterion) or 0.0

    totals = utility_matrix.dot(weights_array) if criteria else np.zeros(len(options))
    return [FinalScore(option_id=option, score=float(total)) for option, total in zip(options, totals)]


def rank_scores(scores: Sequence[FinalScore]) -> List[FinalScore]:
    """Highest score first; equal scores keep their original order."""
    return sorted(scores, key=lambda item: item.score, reverse=True)
