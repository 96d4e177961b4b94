from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Type, TypeVar

from mcda.analysis import Analysis, analyze
from mcda.interpolation import TablePoint
from mcda.matrix import (
    extend_matrix,
    move_in_matrix,
    remove_from_matrix,
    resize_square_matrix,
    set_judgment,
)
from mcda.utility import (
    Qualitative,
    QualitativeLevel,
    QuantitativeFormula,
    QuantitativeTable,
    UtilityFunction,
    default_utility_function,
    utility_function_from_dict,
)


ItemT = TypeVar("ItemT", bound="Item")


@dataclass
class Item:
    id: str
    name: str = ""

    def __post_init__(self) -> None:
        self.name = self.name or self.id

    def to_dict(self) -> dict:
        return {"id": self.id, "content": self.name}

    @classmethod
    def from_dict(cls: Type[ItemT], data: dict) -> ItemT:
        return cls(id=data["id"], name=data.get("content", data.get("displayName", "")))


@dataclass
class Criterion(Item):
    pass


@dataclass
class Option(Item):
    pass


def _clean_id(value: str, kind: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValueError(f"{kind} name cannot be empty.")
    return value


def _position(items: List[Item], item_id: str, kind: str) -> int:
    for index, item in enumerate(items):
        if item.id == item_id:
            return index
    raise KeyError(f"Unknown {kind.lower()}: {item_id}")


@dataclass
class DecisionState:
    """Inputs of one decision, owned by the caller.

    Row and column ``i`` of ``pairwise`` belong to ``criteria[i]``. Every mutator
    keeps the criteria, the matrix, the utility functions and the option values
    aligned in one step.
    """

    objective: str = ""
    criteria: List[Criterion] = field(default_factory=list)
    options: List[Option] = field(default_factory=list)
    pairwise: List[List[float]] = field(default_factory=list)
    utility_functions: Dict[str, UtilityFunction] = field(default_factory=dict)
    option_values: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @property
    def criterion_ids(self) -> List[str]:
        return [criterion.id for criterion in self.criteria]

    @property
    def option_ids(self) -> List[str]:
        return [option.id for option in self.options]

    def criterion_index(self) -> Dict[str, int]:
        return {criterion.id: index for index, criterion in enumerate(self.criteria)}

    def add_criterion(
        self,
        criterion_id: str,
        name: str = "",
        function: UtilityFunction | None = None,
    ) -> Criterion:
        criterion_id = _clean_id(criterion_id, "Criterion")
        if criterion_id in self.criterion_ids:
            raise ValueError("Criterion already exists.")
        criterion = Criterion(id=criterion_id, name=name.strip())
        self.criteria.append(criterion)
        extend_matrix(self.pairwise)
        self.utility_functions[criterion_id] = function or default_utility_function()
        return criterion

    def remove_criterion(self, criterion_id: str) -> None:
        index = _position(self.criteria, criterion_id, "Criterion")
        remove_from_matrix(self.pairwise, index)
        self.criteria.pop(index)
        self.utility_functions.pop(criterion_id, None)
        for values in self.option_values.values():
            values.pop(criterion_id, None)

    def move_criterion(self, criterion_id: str, destination: int) -> None:
        source = _position(self.criteria, criterion_id, "Criterion")
        destination = max(0, min(destination, len(self.criteria) - 1))
        move_in_matrix(self.pairwise, source, destination)
        self.criteria.insert(destination, self.criteria.pop(source))

    def add_option(self, option_id: str, name: str = "") -> Option:
        option_id = _clean_id(option_id, "Option")
        if option_id in self.option_ids:
            raise ValueError("Option already exists.")
        option = Option(id=option_id, name=name.strip())
        self.options.append(option)
        self.option_values.setdefault(option_id, {})
        return option

    def remove_option(self, option_id: str) -> None:
        index = _position(self.options, option_id, "Option")
        self.options.pop(index)
        self.option_values.pop(option_id, None)

    def move_option(self, option_id: str, destination: int) -> None:
        source = _position(self.options, option_id, "Option")
        destination = max(0, min(destination, len(self.options) - 1))
        self.options.insert(destination, self.options.pop(source))

    def judgment(self, row_id: str, column_id: str) -> float:
        index = self.criterion_index()
        return self.pairwise[index[row_id]][index[column_id]]

    def set_judgment(self, row_id: str, column_id: str, value: float) -> None:
        index = self.criterion_index()
        set_judgment(self.pairwise, index[row_id], index[column_id], value)

    def set_utility_function(self, criterion_id: str, function: UtilityFunction) -> None:
        _position(self.criteria, criterion_id, "Criterion")
        self.utility_functions[criterion_id] = function

    def set_option_value(self, option_id: str, criterion_id: str, value: Any) -> None:
        _position(self.options, option_id, "Option")
        _position(self.criteria, criterion_id, "Criterion")
        self.option_values.setdefault(option_id, {})[criterion_id] = value

    def ensure_alignment(self) -> None:
        """Repair a loaded state whose matrix or functions lag behind its criteria."""
        self.pairwise = resize_square_matrix(self.pairwise, len(self.criteria))
        for criterion_id in self.criterion_ids:
            if criterion_id not in self.utility_functions:
                self.utility_functions[criterion_id] = default_utility_function()

    def analyze(self) -> Analysis:
        return analyze(
            self.criterion_ids,
            self.option_ids,
            self.pairwise,
            self.utility_functions,
            self.option_values,
        )

    def to_dict(self) -> dict:
        return {
            "objective": self.objective,
            "criteria": [criterion.to_dict() for criterion in self.criteria],
            "options": [option.to_dict() for option in self.options],
            "pairwiseMatrix": [list(row) for row in self.pairwise],
            "utilityFunctions": {
                criterion_id: function.to_dict()
                for criterion_id, function in self.utility_functions.items()
            },
            "optionValues": {
                option_id: dict(values) for option_id, values in self.option_values.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DecisionState":
        functions = {
            criterion_id: utility_function_from_dict(item)
            for criterion_id, item in (data.get("utilityFunctions") or {}).items()
        }
        return cls(
            objective=data.get("objective") or "",
            criteria=[Criterion.from_dict(item) for item in data.get("criteria") or []],
            options=[Option.from_dict(item) for item in data.get("options") or []],
            pairwise=[[float(value) for value in row] for row in data.get("pairwiseMatrix") or []],
            utility_functions=functions,
            option_values={
                option_id: dict(values)
                for option_id, values in (data.get("optionValues") or {}).items()
            },
        )


def sample_state() -> DecisionState:
    """The decision the tool opens with: choosing a primary/secondary architecture."""
    state = DecisionState(objective="<DESCRIPTION> Decision making to select the best option")
    for name in ("Risk", "SW Effort/Schedule", "HW Costs", "Future Adaptability"):
        state.criteria.append(Criterion(id=name))
    for name in (
        "Dual Primary",
        "Compressed Dual Primary",
        "Compressed Asymmetric Primary",
        "Tele-assisted Secondary",
    ):
        state.add_option(name)
    state.pairwise = [
        [1.0, 9.0, 7.0, 7.0],
        [1 / 9, 1.0, 3.0, 1 / 3],
        [1 / 7, 1 / 3, 1.0, 5.0],
        [1 / 7, 3.0, 1 / 5, 1.0],
    ]
    state.utility_functions = {
        "Risk": Qualitative(
            levels=[
                QualitativeLevel("Low", 100.0),
                QualitativeLevel("Medium", 50.0),
                QualitativeLevel("High", 0.0),
            ]
        ),
        "SW Effort/Schedule": QuantitativeTable(points=[TablePoint(0.0, 0.0), TablePoint(100.0, 100.0)]),
        "HW Costs": QuantitativeFormula(
            formula="100 * (400000 - x) / (400000 - 300000)",
            retained={"points": [{"x": 300000.0, "y": 100.0}, {"x": 400000.0, "y": 0.0}]},
        ),
        "Future Adaptability": QuantitativeTable(points=[TablePoint(0.0, 0.0), TablePoint(100.0, 100.0)]),
    }
    return state
