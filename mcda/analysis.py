from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Sequence

from mcda.aggregation import compute_final_scores, rank_scores
from mcda.consistency import check_consistency, max_pairwise_discrepancy
from mcda.core import ConsistencyResult, Discrepancy, FinalScore
from mcda.matrix import is_square
from mcda.utility import UtilityFunction, evaluate_utility_grid
from mcda.weights import compute_weights

logger = logging.getLogger(__name__)


@dataclass
class Analysis:
    """Everything derived from one snapshot of the decision inputs.

    ``weights`` and ``consistency`` are ``None`` when the judgment matrix does
    not match the criteria, in which case every score is computed without weights.
    """

    weights: List[float] | None
    consistency: ConsistencyResult | None
    worst_judgment: Discrepancy | None = None
    weight_map: Dict[str, float] = field(default_factory=dict)
    utilities: Dict[str, Dict[str, float]] = field(default_factory=dict)
    scores: List[FinalScore] = field(default_factory=list)
    ranking: List[FinalScore] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return self.weights is not None


def analyze(
    criteria: Sequence[str],
    options: Sequence[str],
    pairwise: Sequence[Sequence[float]],
    functions: Mapping[str, UtilityFunction],
    option_values: Mapping[str, Mapping[str, Any]],
) -> Analysis:
    weights: List[float] | None = None
    consistency: ConsistencyResult | None = None
    worst_judgment: Discrepancy | None = None

    if is_square(pairwise, len(criteria)):
        weights = compute_weights(pairwise)
        consistency = check_consistency(pairwise, weights)
        worst_judgment = max_pairwise_discrepancy(pairwise, weights)
        logger.debug("Weights %s, consistency ratio %.4f", weights, consistency.ratio)
    else:
        logger.info(
            "Judgment matrix does not match %d criteria; skipping weights and consistency",
            len(criteria),
        )

    utilities = evaluate_utility_grid(options, criteria, functions, option_values)
    scores = compute_final_scores(options, criteria, weights or [], utilities)
    return Analysis(
        weights=weights,
        consistency=consistency,
        worst_judgment=worst_judgment,
        weight_map=dict(zip(criteria, weights or [])),
        utilities=utilities,
        scores=scores,
        ranking=rank_scores(scores),
    )
