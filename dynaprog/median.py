"""Median of two sorted sequences by binary search over a partition."""

from __future__ import annotations

from collections.abc import Iterable
from math import inf


def median_of_sorted(nums1: Iterable[float], nums2: Iterable[float]) -> float:
    """Return the median of the union of two ascending sequences.

    Runs in logarithmic time in the length of the shorter sequence.
    """
    short, long_ = sorted((list(nums1), list(nums2)), key=len)
    total = len(short) + len(long_)
    if total == 0:
        raise ValueError("at least one value is required")

    half = (total + 1) // 2
    low, high = 0, len(short)
    while low <= high:
        cut_short = (low + high) // 2
        cut_long = half - cut_short
        left_short = short[cut_short - 1] if cut_short else -inf
        right_short = short[cut_short] if cut_short < len(short) else inf
        left_long = long_[cut_long - 1] if cut_long else -inf
        right_long = long_[cut_long] if cut_long < len(long_) else inf

        if left_short > right_long:
            high = cut_short - 1
        elif left_long > right_short:
            low = cut_short + 1
        else:
            left_max = max(left_short, left_long)
            if total % 2:
                return float(left_max)
            return (left_max + min(right_short, right_long)) / 2
    raise ValueError("both sequences must be sorted in ascending order")