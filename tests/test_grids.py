import math
from itertools import combinations

import pytest
from hypothesis import given, strategies as st

from dynaprog.grids import (
    maximal_square,
    minimum_falling_path_sum,
    minimum_path_sum,
    minimum_triangle_path,
    unique_paths,
    unique_paths_with_obstacles,
)


def _all_path_sums(grid):
    rows, cols = len(grid), len(grid[0])
    steps = rows + cols - 2
    for downs in combinations(range(steps), rows - 1):
        r = c = 0
        total = grid[0][0]
        for step in range(steps):
            if step in downs:
                r += 1
            else:
                c += 1
            total += grid[r][c]
        yield total


small_grid = st.integers(1, 4).flatmap(
    lambda cols: st.lists(
        st.lists(st.integers(0, 9), min_size=cols, max_size=cols),
        min_size=1,
        max_size=4,
    )
)


def test_triangle_example():
    assert minimum_triangle_path([[2], [3, 4], [6, 5, 7], [4, 1, 8, 3]]) == 11


def test_triangle_single_entry():
    assert minimum_triangle_path([[-10]]) == -10


def test_triangle_does_not_mutate_input():
    triangle = [[1], [2, 3], [4, 5, 6]]
    minimum_triangle_path(triangle)
    assert triangle == [[1], [2, 3], [4, 5, 6]]


def test_triangle_malformed():
    with pytest.raises(ValueError):
        minimum_triangle_path([[1], [2, 3, 4]])
    with pytest.raises(ValueError):
        minimum_triangle_path([])


@given(st.integers(1, 6), st.integers(-5, 5))
def test_triangle_constant_shift(depth, shift):
    triangle = [[shift] * (row + 1) for row in range(depth)]
    assert minimum_triangle_path(triangle) == shift * depth


def test_maximal_square_source_example():
    matrix = [["1"] * 70 for _ in range(80)]
    assert maximal_square(matrix) == 70 * 70


def test_maximal_square_all_zero():
    assert maximal_square([["0", "0"], ["0", "0"]]) == 0


def test_maximal_square_accepts_integers():
    assert maximal_square([[1, 1], [1, 1]]) == maximal_square([["1", "1"], ["1", "1"]])


@given(st.integers(1, 8), st.integers(1, 8))
def test_maximal_square_full(rows, cols):
    assert maximal_square([["1"] * cols for _ in range(rows)]) == min(rows, cols) ** 2


def test_maximal_square_empty():
    with pytest.raises(ValueError):
        maximal_square([])


@given(st.integers(1, 10), st.integers(1, 10))
def test_unique_paths_matches_binomial(m, n):
    assert unique_paths(m, n) == math.comb(m + n - 2, m - 1)
    assert unique_paths(m, n) == unique_paths(n, m)


def test_unique_paths_invalid():
    with pytest.raises(ValueError):
        unique_paths(0, 3)


@given(st.integers(1, 6), st.integers(1, 6))
def test_obstacle_free_grid_matches_unique_paths(rows, cols):
    grid = [[0] * cols for _ in range(rows)]
    assert unique_paths_with_obstacles(grid) == unique_paths(rows, cols)


def test_blocked_corners():
    assert unique_paths_with_obstacles([[1]]) == 0
    assert unique_paths_with_obstacles([[0, 0], [0, 1]]) == 0


def test_obstacle_reduces_paths():
    free = unique_paths_with_obstacles([[0, 0, 0], [0, 0, 0], [0, 0, 0]])
    blocked = unique_paths_with_obstacles([[0, 0, 0], [0, 1, 0], [0, 0, 0]])
    assert blocked < free
    assert blocked == unique_paths(1, 3) + unique_paths(3, 1)


def test_minimum_path_sum_example():
    assert minimum_path_sum([[1, 3, 1], [1, 5, 1], [4, 2, 1]]) == 7


@given(small_grid)
def test_minimum_path_sum_is_minimum_over_paths(grid):
    assert minimum_path_sum(grid) == min(_all_path_sums(grid))


def test_falling_path_example():
    assert minimum_falling_path_sum([[2, 1, 3], [6, 5, 4], [7, 8, 9]]) == 13


@given(st.integers(1, 5), st.integers(-9, 9))
def test_falling_path_constant(n, value):
    assert minimum_falling_path_sum([[value] * n for _ in range(n)]) == value * n


def test_falling_path_requires_square():
    with pytest.raises(ValueError):
        minimum_falling_path_sum([[1, 2, 3], [4, 5, 6]])