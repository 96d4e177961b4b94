from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ConsistencyResult:
    ratio: float
    is_consistent: bool
    lambda_max: float | None = None
    consistency_index: float = 0.0
    random_index: float = 0.0


@dataclass
class FinalScore:
    option_id: str
    score: float


@dataclass
class Discrepancy:
    """Judgment that deviates most from the ratio implied by the weights."""

    row: int
    column: int
    actual: float
    expected: float
    deviation: float
