from __future__ import annotations

import math
from typing import List, Sequence

DEFAULT_JUDGMENT = 1.0


def neutral_matrix(size: int) -> List[List[float]]:
    return [[1.0] * size for _ in range(size)]


def resize_square_matrix(
    matrix: Sequence[Sequence[float]], size: int, default: float = DEFAULT_JUDGMENT
) -> List[List[float]]:
    if size <= 0:
        return []
    new_matrix: List[List[float]] = []
    for i in range(size):
        row: List[float] = []
        for j in range(size):
            if i < len(matrix) and j < len(matrix[i]):
                value = float(matrix[i][j])
            else:
                value = 1.0 if i == j else default
            row.append(value)
        new_matrix.append(row)
    return new_matrix


def is_square(matrix: Sequence[Sequence[float]], size: int) -> bool:
    return len(matrix) == size and all(len(row) == size for row in matrix)


def is_reciprocal(matrix: Sequence[Sequence[float]], tolerance: float = 1e-9) -> bool:
    size = len(matrix)
    if not is_square(matrix, size):
        return False
    for i in range(size):
        if abs(matrix[i][i] - 1.0) > tolerance:
            return False
        for j in range(i + 1, size):
            if matrix[j][i] <= 0 or abs(matrix[i][j] - 1.0 / matrix[j][i]) > tolerance:
                return False
    return True


def extend_matrix(matrix: List[List[float]], default: float = DEFAULT_JUDGMENT) -> None:
    """Append a row and column for a new criterion, neutral against all others."""
    for row in matrix:
        row.append(default)
    matrix.append([1.0 / default] * len(matrix) + [1.0])


def remove_from_matrix(matrix: List[List[float]], index: int) -> None:
    """Drop row and column ``index`` wherever they exist.

    A matrix lagging behind its criteria only loses the entries it has.
    """
    if index < len(matrix):
        matrix.pop(index)
    for row in matrix:
        if index < len(row):
            row.pop(index)


def move_in_matrix(matrix: List[List[float]], source: int, destination: int) -> None:
    """Move row and column ``source`` to position ``destination``.

    Rows and columns too short to hold both positions are left in place.
    """
    if max(source, destination) < len(matrix):
        matrix.insert(destination, matrix.pop(source))
    for values in matrix:
        if max(source, destination) < len(values):
            values.insert(destination, values.pop(source))


def set_judgment(matrix: List[List[float]], row: int, column: int, value: float) -> None:
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise ValueError("Pairwise judgment must be a positive number.")
    if row == column:
        if value != 1.0:
            raise ValueError("A criterion compared with itself must be 1.")
        return
    last = max(row, column)
    if last >= len(matrix) or last >= len(matrix[row]) or last >= len(matrix[column]):
        raise ValueError("Judgment matrix does not cover these criteria.")
    matrix[row][column] = value
    matrix[column][row] = 1.0 / value
