from mcda.aggregation import compute_final_scores, rank_scores
from mcda.analysis import Analysis, analyze
from mcda.consistency import CONSISTENCY_THRESHOLD, check_consistency, max_pairwise_discrepancy
from mcda.core import ConsistencyResult, Discrepancy, FinalScore
from mcda.expression import ExpressionError, Formula, evaluate_expression, is_valid_expression
from mcda.interpolation import TablePoint, interpolate
from mcda.utility import (
    UTILITY_FUNCTIONS,
    Qualitative,
    QualitativeLevel,
    QuantitativeFormula,
    QuantitativeTable,
    UtilityFunction,
    evaluate_utility,
    evaluate_utility_grid,
)
from mcda.weights import compute_weights, normalize_matrix

__all__ = [
    "Analysis",
    "CONSISTENCY_THRESHOLD",
    "ConsistencyResult",
    "Discrepancy",
    "ExpressionError",
    "FinalScore",
    "Formula",
    "Qualitative",
    "QualitativeLevel",
    "QuantitativeFormula",
    "QuantitativeTable",
    "TablePoint",
    "UTILITY_FUNCTIONS",
    "UtilityFunction",
    "analyze",
    "check_consistency",
    "compute_final_scores",
    "compute_weights",
    "evaluate_expression",
    "evaluate_utility",
    "evaluate_utility_grid",
    "interpolate",
    "is_valid_expression",
    "max_pairwise_discrepancy",
    "normalize_matrix",
    "rank_scores",
]
