"""Dynamic-programming solutions for path and area problems on grids."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate


def _rectangle(grid: Iterable[Sequence], what: str) -> list[list]:
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError(f"{what} must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError(f"{what} rows must all have the same length")
    return rows


def minimum_triangle_path(triangle: Iterable[Sequence[int]]) -> int:
    """Return the smallest top-to-bottom path sum through a number triangle.

    Each step moves to one of the two adjacent entries in the row below.
    """
    rows = [list(row) for row in triangle]
    if not rows:
        raise ValueError("triangle must not be empty")
    best = rows[-1]
    for row in reversed(rows[:-1]):
        if len(row) + 1 != len(best):
            raise ValueError("each triangle row must be one longer than the row above")
        best = [value + min(below) for value, below in zip(row, zip(best, best[1:]))]
    if len(best) != 1:
        raise ValueError("the triangle must start with a single entry")
    return best[0]


def _is_filled(cell: object) -> bool:
    return cell == "1" or cell == 1


def maximal_square(matrix: Iterable[Sequence]) -> int:
    """Return the area of the largest square made only of ``"1"`` cells."""
    rows = _rectangle(matrix, "matrix")
    previous = [0] * (len(rows[0]) + 1)
    side = 0
    for row in rows:
        current = [0]
        for column, cell in enumerate(row, start=1):
            if _is_filled(cell):
                current.append(min(previous[column], current[column - 1],
                                   previous[column - 1]) + 1)
            else:
                current.append(0)
        side = max(side, max(current))
        previous = current
    return side * side


def unique_paths(m: int, n: int) -> int:
    """Return the number of right/down paths across an ``m`` by ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    row = [1] * n
    for _ in range(m - 1):
        row = list(accumulate(row))
    return row[-1]


def unique_paths_with_obstacles(grid: Iterable[Sequence[int]]) -> int:
    """Return the number of right/down paths avoiding cells marked as obstacles."""
    rows = _rectangle(grid, "grid")
    ways = [1] + [0] * (len(rows[0]) - 1)
    for row in rows:
        for column, cell in enumerate(row):
            if cell:
                ways[column] = 0
            elif column:
                ways[column] += ways[column - 1]
    return ways[-1]


def minimum_path_sum(grid: Iterable[Sequence[int]]) -> int:
    """Return the smallest sum along a right/down path from corner to corner."""
    rows = _rectangle(grid, "grid")
    previous: list[int] | None = None
    for row in rows:
        current: list[int] = []
        for column, cell in enumerate(row):
            candidates = []
            if previous is not None:
                candidates.append(previous[column])
            if current:
                candidates.append(current[-1])
            current.append(cell + (min(candidates) if candidates else 0))
        previous = current
    return previous[-1]


def minimum_falling_path_sum(matrix: Iterable[Sequence[int]]) -> int:
    """Return the smallest falling path sum through a square matrix.

    Each step moves down to the same column or a diagonally adjacent one.
    """
    rows = _rectangle(matrix, "matrix")
    if len(rows) != len(rows[0]):
        raise ValueError("matrix must be square")
    previous = rows[0]
    for row in rows[1:]:
        previous = [cell + min(previous[max(column - 1, 0):column + 2])
                    for column, cell in enumerate(row)]
    return min(previous)