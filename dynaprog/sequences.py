"""Dynamic-programming solutions for subsequence problems over integer sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence


def _require_items(values: Sequence, what: str) -> None:
    if not values:
        raise ValueError(f"{what} must not be empty")


def longest_increasing_subsequence(nums: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence.

    Uses patience sorting: ``tails[k]`` is the smallest possible tail of an
    increasing subsequence of length ``k + 1``.
    """
    _require_items(nums, "nums")
    tails: list[int] = []
    for num in nums:
        position = bisect_left(tails, num)
        if position == len(tails):
            tails.append(num)
        else:
            tails[position] = num
    return len(tails)


def count_longest_increasing_subsequences(nums: Sequence[int]) -> int:
    """Return how many strictly increasing subsequences have the maximum length."""
    _require_items(nums, "nums")
    lengths: list[int] = []
    counts: list[int] = []
    for index, num in enumerate(nums):
        best, ways = 0, 1
        for length, count, previous in zip(lengths, counts, nums[:index]):
            if previous >= num:
                continue
            if length > best:
                best, ways = length, count
            elif length == best:
                ways += count
        lengths.append(best + 1)
        counts.append(ways)

    longest = max(lengths)
    return sum(count for length, count in zip(lengths, counts) if length == longest)


def longest_arithmetic_subsequence(nums: Sequence[int]) -> int:
    """Return the length of the longest arithmetic subsequence.

    Sequences with fewer than two elements yield their own length.
    """
    if len(nums) < 2:
        return len(nums)
    # ends[i][d] is the longest arithmetic run with step d ending at nums[i].
    ends: list[dict[int, int]] = []
    best = 0
    for index, current in enumerate(nums):
        runs: dict[int, int] = {}
        for previous, previous_runs in zip(nums[:index], ends):
            step = current - previous
            length = previous_runs.get(step, 1) + 1
            if length > runs.get(step, 0):
                runs[step] = length
            best = max(best, runs[step])
        ends.append(runs)
    return best


def longest_subsequence_with_difference(arr: Iterable[int], difference: int) -> int:
    """Return the longest subsequence whose neighbours differ by ``difference``.

    An empty input yields 0.
    """
    ending_at: dict[int, int] = {}
    best = 0
    for value in arr:
        length = ending_at.get(value - difference, 0) + 1
        ending_at[value] = length
        best = max(best, length)
    return best


def longest_obstacle_course(obstacles: Sequence[int]) -> list[int]:
    """For each position, return the longest non-decreasing course ending there."""
    tails: list[int] = []
    result: list[int] = []
    for height in obstacles:
        position = bisect_right(tails, height)
        result.append(position + 1)
        if position == len(tails):
            tails.append(height)
        else:
            tails[position] = height
    return result


def max_envelopes(envelopes: Iterable[Sequence[int]]) -> int:
    """Return how many envelopes can be nested, both sides strictly smaller."""
    ordered = sorted(((width, height) for width, height in envelopes),
                     key=lambda envelope: (envelope[0], -envelope[1]))
    if len(ordered) < 2:
        return len(ordered)
    # Equal widths are ordered by descending height, so a strictly increasing
    # run of heights can never take two envelopes of the same width.
    return longest_increasing_subsequence([height for _, height in ordered])


def longest_pair_chain(pairs: Iterable[Sequence[int]]) -> int:
    """Return the longest chain of pairs where each start exceeds the previous end."""
    ordered = sorted(((left, right) for left, right in pairs),
                     key=lambda pair: pair[1])
    _require_items(ordered, "pairs")
    chain_end = ordered[0][1]
    length = 1
    for left, right in ordered[1:]:
        if left > chain_end:
            chain_end = right
            length += 1
    return length