"""Linear recurrences and one-dimensional dynamic-programming problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import pairwise


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def tribonacci(n: int) -> int:
    """Return T(n) with T(0) = 0, T(1) = T(2) = 1 and T(n) the sum of the three before."""
    _require_non_negative(n)
    a, b, c = 0, 1, 1
    for _ in range(n):
        a, b, c = b, c, a + b + c
    return a


def fibonacci(n: int) -> int:
    """Return F(n) with F(0) = 0 and F(1) = F(2) = 1."""
    _require_non_negative(n)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` steps taking one or two at a time."""
    _require_non_negative(n)
    return fibonacci(n + 1)


def _non_negative_values(values: Iterable[int], what: str) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError(f"{what} must not be empty")
    if min(items) < 0:
        raise ValueError(f"{what} must not hold negative values")
    return items


def rob(nums: Iterable[int]) -> int:
    """Return the largest sum of values no two of which are adjacent."""
    values = _non_negative_values(nums, "nums")
    before, best = 0, 0
    for value in values:
        before, best = best, max(best, before + value)
    return best


def delete_and_earn(nums: Iterable[int]) -> int:
    """Return the most points earned when taking a value forbids its neighbours ±1."""
    totals = Counter()
    for value in _non_negative_values(nums, "nums"):
        totals[value] += value

    skipped = taken = 0
    previous: int | None = None
    for value in sorted(totals):
        best = max(skipped, taken)
        if previous is not None and value == previous + 1:
            skipped, taken = best, skipped + totals[value]
        else:
            skipped, taken = best, best + totals[value]
        previous = value
    return max(skipped, taken)


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Return the cheapest way past the top, starting on step 0 or 1."""
    two_back, one_back = 0, 0
    for cost_two_back, cost_one_back in pairwise(cost):
        two_back, one_back = one_back, min(one_back + cost_one_back,
                                           two_back + cost_two_back)
    return one_back