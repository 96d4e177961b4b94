from __future__ import annotations

import copy
import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Mapping, Sequence, Tuple

from mcda.expression import ExpressionError, Formula
from mcda.interpolation import TablePoint, interpolate

logger = logging.getLogger(__name__)

UTILITY_MIN = 0.0
UTILITY_MAX = 100.0


def clamp_utility(value: float) -> float:
    return max(UTILITY_MIN, min(UTILITY_MAX, value))


def parse_number(raw: Any) -> float | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(value):
        return None
    return value


RECORD_FIELDS = ("criterionType", "mode", "formulaString", "points", "qualitativeLevels")


@dataclass
class QualitativeLevel:
    label: str
    utility: float


@dataclass
class UtilityFunction(ABC):
    """Base of the per-criterion utility functions.

    ``retained`` holds the saved-record fields the active variant does not use
    (a formula's table points, for instance) so they survive a load/save cycle.
    """

    retained: Dict[str, Any] = field(default_factory=dict, kw_only=True, compare=False, repr=False)

    kind = ""
    record_keys: ClassVar[Tuple[str, ...]] = ()

    @abstractmethod
    def raw_utility(self, raw: Any) -> float:
        """Utility before clamping; 0 when ``raw`` cannot be scored."""
        raise NotImplementedError

    @abstractmethod
    def active_fields(self) -> dict:
        raise NotImplementedError

    def to_dict(self) -> dict:
        record = {
            "criterionType": "quantitative",
            "mode": "table",
            "formulaString": "",
            "points": [],
            "qualitativeLevels": [],
        }
        record.update(copy.deepcopy(self.retained))
        record.update(self.active_fields())
        return record

    def __call__(self, raw: Any) -> float:
        return clamp_utility(self.raw_utility(raw))


@dataclass
class Qualitative(UtilityFunction):
    levels: List[QualitativeLevel] = field(default_factory=list)

    kind = "qualitative"
    record_keys = ("criterionType", "qualitativeLevels")

    def __post_init__(self) -> None:
        labels = self.labels()
        duplicates = sorted({label for label in labels if labels.count(label) > 1})
        if duplicates:
            logger.warning("Duplicate qualitative levels %s; the first of each is used", duplicates)

    def labels(self) -> List[str]:
        return [level.label for level in self.levels]

    def add_level(self, label: str, utility: float) -> None:
        if label in self.labels():
            raise ValueError(f"Level {label!r} already exists.")
        self.levels.append(QualitativeLevel(label=label, utility=float(utility)))

    def raw_utility(self, raw: Any) -> float:
        for level in self.levels:
            if level.label == raw:
                return level.utility
        return 0.0

    def active_fields(self) -> dict:
        return {
            "criterionType": "qualitative",
            "qualitativeLevels": [{"label": level.label, "utility": level.utility} for level in self.levels],
        }


@dataclass
class QuantitativeFormula(UtilityFunction):
    formula: str = ""

    kind = "formula"
    record_keys = ("criterionType", "mode", "formulaString")

    def raw_utility(self, raw: Any) -> float:
        value = parse_number(raw)
        if value is None:
            logger.debug("Cannot score non-numeric value %r", raw)
            return 0.0
        try:
            return Formula.parse(self.formula)(value)
        except ExpressionError as exc:
            logger.debug("Formula %r failed at x=%s: %s", self.formula, value, exc)
            return 0.0

    def active_fields(self) -> dict:
        return {"criterionType": "quantitative", "mode": "formula", "formulaString": self.formula}


@dataclass
class QuantitativeTable(UtilityFunction):
    points: List[TablePoint] = field(default_factory=list)

    kind = "table"
    record_keys = ("criterionType", "mode", "points")

    def raw_utility(self, raw: Any) -> float:
        value = parse_number(raw)
        if value is None:
            logger.debug("Cannot score non-numeric value %r", raw)
            return 0.0
        if not self.points:
            return 0.0
        return interpolate(value, self.points)

    def active_fields(self) -> dict:
        return {
            "criterionType": "quantitative",
            "mode": "table",
            "points": [{"x": point.value, "y": point.utility} for point in self.points],
        }


UTILITY_FUNCTIONS = {
    "qualitative": Qualitative,
    "formula": QuantitativeFormula,
    "table": QuantitativeTable,
}


def default_utility_function() -> UtilityFunction:
    return QuantitativeTable(points=[TablePoint(0.0, 0.0), TablePoint(100.0, 100.0)])


def utility_function_from_dict(data: Mapping[str, Any]) -> UtilityFunction:
    if data.get("criterionType") == "qualitative":
        kind = "qualitative"
    else:
        kind = data.get("mode", "table")
    function_class = UTILITY_FUNCTIONS.get(kind, QuantitativeTable)
    retained = {
        key: copy.deepcopy(data[key])
        for key in RECORD_FIELDS
        if key in data and key not in function_class.record_keys
    }
    if function_class is Qualitative:
        levels = [
            QualitativeLevel(label=item.get("label", ""), utility=float(item.get("utility", 0.0)))
            for item in data.get("qualitativeLevels", [])
        ]
        return Qualitative(levels=levels, retained=retained)
    if function_class is QuantitativeFormula:
        return QuantitativeFormula(formula=data.get("formulaString", ""), retained=retained)
    points = [
        TablePoint(value=float(item.get("x", 0.0)), utility=float(item.get("y", 0.0)))
        for item in data.get("points", [])
    ]
    return QuantitativeTable(points=points, retained=retained)


def evaluate_utility(function: UtilityFunction | None, raw: Any) -> float:
    if function is None:
        return 0.0
    return function(raw)


def evaluate_utility_grid(
    options: Sequence[str],
    criteria: Sequence[str],
    functions: Mapping[str, UtilityFunction],
    option_values: Mapping[str, Mapping[str, Any]],
) -> Dict[str, Dict[str, float]]:
    grid: Dict[str, Dict[str, float]] = {}
    for option in options:
        values = option_values.get(option, {})
        grid[option] = {
            criterion: evaluate_utility(functions.get(criterion), values.get(criterion))
            for criterion in criteria
        }
    return grid
