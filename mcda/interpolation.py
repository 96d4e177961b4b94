from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Iterable, List


@dataclass
class TablePoint:
    value: float
    utility: float


def sort_points(points: Iterable[TablePoint]) -> List[TablePoint]:
    return sorted(points, key=lambda point: point.value)


def interpolate(value: float, points: Iterable[TablePoint]) -> float:
    """Piecewise-linear utility at ``value``, clamped to the end points.

    Points may come in any order; ties keep their input order.
    """
    ordered = sort_points(points)
    if not ordered:
        return 0.0
    if len(ordered) == 1:
        return ordered[0].utility

    first, last = ordered[0], ordered[-1]
    if value <= first.value:
        return first.utility
    if value >= last.value:
        return last.utility

    index = bisect_left([point.value for point in ordered], value)
    p1, p2 = ordered[index - 1], ordered[index]
    if p1.value == p2.value:
        return p1.utility
    return p1.utility + (p2.utility - p1.utility) * (value - p1.value) / (p2.value - p1.value)
