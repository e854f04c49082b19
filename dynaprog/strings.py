"""Dynamic-programming solutions for problems over strings."""

from __future__ import annotations

from collections.abc import Iterable


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Return the length of the longest common subsequence of two strings."""
    previous = [0] * (len(text2) + 1)
    for char1 in text1:
        current = [0]
        for column, char2 in enumerate(text2, start=1):
            if char1 == char2:
                current.append(previous[column - 1] + 1)
            else:
                current.append(max(previous[column], current[column - 1]))
        previous = current
    return previous[-1]


def count_distinct_subsequences(s: str, t: str) -> int:
    """Return how many distinct subsequences of ``s`` spell out ``t``."""
    # ways[j] counts the subsequences of the processed prefix of s equal to t[:j].
    ways = [1] + [0] * len(t)
    for char in s:
        for column in range(len(t), 0, -1):
            if t[column - 1] == char:
                ways[column] += ways[column - 1]
    return ways[-1]


def word_break(s: str, words: Iterable[str]) -> bool:
    """Return whether ``s`` can be split into a sequence of the given words."""
    vocabulary = list(words)
    reachable = [True] + [False] * len(s)
    for end in range(1, len(s) + 1):
        reachable[end] = any(
            len(word) <= end
            and reachable[end - len(word)]
            and s.startswith(word, end - len(word))
            for word in vocabulary
        )
    return reachable[-1]


def longest_palindromic_substring(s: str) -> str:
    """Return the longest palindromic substring, the leftmost one on ties.

    Uses Manacher's algorithm over the string interleaved with separators.
    """
    padded: list[str | None] = [None]
    for char in s:
        padded.extend((char, None))
    size = len(padded)

    radii = [0] * size
    center = right = 0
    for position in range(size):
        radius = min(radii[2 * center - position], right - position) if position < right else 0
        while (
            position - radius - 1 >= 0
            and position + radius + 1 < size
            and padded[position - radius - 1] == padded[position + radius + 1]
        ):
            radius += 1
        radii[position] = radius
        if position + radius > right:
            center, right = position, position + radius

    best = max(range(size), key=radii.__getitem__)
    radius = radii[best]
    # A maximal span in the padded string starts and ends on separators.
    return s[(best - radius) // 2:(best + radius) // 2]


def longest_palindromic_subsequence(s: str) -> int:
    """Return the length of the longest palindromic subsequence of ``s``."""
    size = len(s)
    if size == 0:
        return 0
    # table[i][j] is the answer for s[i:j + 1].
    table = [[0] * size for _ in range(size)]
    for start in range(size - 1, -1, -1):
        row, below = table[start], table[start + 1] if start + 1 < size else None
        row[start] = 1
        for end in range(start + 1, size):
            if s[start] == s[end]:
                inner = below[end - 1] if end - start > 1 else 0
                row[end] = inner + 2
            else:
                row[end] = max(below[end], row[end - 1])
    return table[0][size - 1]


def minimum_delete_sum(s1: str, s2: str) -> int:
    """Return the smallest total of character codes deleted to make both strings equal."""
    previous = [0]
    for char in s2:
        previous.append(previous[-1] + ord(char))
    for char1 in s1:
        current = [previous[0] + ord(char1)]
        for column, char2 in enumerate(s2, start=1):
            if char1 == char2:
                current.append(previous[column - 1])
            else:
                current.append(min(previous[column] + ord(char1),
                                   current[column - 1] + ord(char2)))
        previous = current
    return previous[-1]


def edit_distance(word1: str, word2: str) -> int:
    """Return the Levenshtein distance between two words."""
    previous = list(range(len(word2) + 1))
    for row, char1 in enumerate(word1, start=1):
        current = [row]
        for column, char2 in enumerate(word2, start=1):
            if char1 == char2:
                current.append(previous[column - 1])
            else:
                current.append(1 + min(previous[column], current[column - 1],
                                       previous[column - 1]))
        previous = current
    return previous[-1]