# dynaprog

A small library of dynamic-programming algorithms. Every function is pure: it takes its inputs and returns a value. It never changes the lists you pass in. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To install the test tools as well and run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dynaprog.sequences`

- `longest_increasing_subsequence(nums)`: the length of the longest strictly increasing subsequence. Raises `ValueError` for an empty sequence.
- `count_longest_increasing_subsequences(nums)`: how many strictly increasing subsequences have the maximum length. Raises `ValueError` for an empty sequence.
- `longest_arithmetic_subsequence(nums)`: the length of the longest arithmetic subsequence. A sequence with fewer than two items gives its own length.
- `longest_subsequence_with_difference(arr, difference)`: the length of the longest subsequence in which each neighbour differs by `difference`. An empty input gives 0.
- `longest_obstacle_course(obstacles)`: a list that gives, for each position, the length of the longest non-decreasing course that ends there.
- `max_envelopes(envelopes)`: the most `(width, height)` envelopes that can nest inside each other, with both sides strictly smaller at each step.
- `longest_pair_chain(pairs)`: the longest chain of `(a, b)` pairs in which each pair starts after the previous one ends. Raises `ValueError` when there are no pairs.

### `dynaprog.strings`

- `longest_common_subsequence(text1, text2)`: the length of the longest common subsequence.
- `count_distinct_subsequences(s, t)`: the number of ways `t` occurs as a subsequence of `s`.
- `word_break(s, words)`: whether `s` can be split into a sequence of words taken from `words`. A word may be used more than once.
- `longest_palindromic_substring(s)`: the longest palindromic substring. On a tie it returns the leftmost one.
- `longest_palindromic_subsequence(s)`: the length of the longest palindromic subsequence.
- `minimum_delete_sum(s1, s2)`: the smallest total of character codes to delete so that the two strings become equal.
- `edit_distance(word1, word2)`: the Levenshtein distance.

### `dynaprog.grids`

Grids are given as rows. An empty grid, or a grid whose rows differ in length, raises `ValueError`.

- `minimum_triangle_path(triangle)`: the smallest top-to-bottom path sum through a number triangle.
- `maximal_square(matrix)`: the area of the largest square of filled cells. A cell counts as filled when it is `"1"` or `1`.
- `unique_paths(m, n)`: the number of right/down paths across an `m` by `n` grid. Both sizes must be positive.
- `unique_paths_with_obstacles(grid)`: the same count, avoiding cells with a true value.
- `minimum_path_sum(grid)`: the smallest sum along a right/down path from the top-left corner to the bottom-right corner.
- `minimum_falling_path_sum(matrix)`: the smallest falling path sum through a square matrix, moving down straight or one column to either side at each step.

### `dynaprog.recurrences`

- `fibonacci(n)`: F(0) = 0, F(1) = 1, and each later term is the sum of the two before it.
- `tribonacci(n)`: T(0) = 0, T(1) = T(2) = 1, and each later term is the sum of the three before it.
- `climb_stairs(n)`: the number of ways to climb `n` steps taking one or two at a time.
- `rob(nums)`: the largest sum of values no two of which are adjacent (the house robber problem).
- `delete_and_earn(nums)`: the most points you can earn when taking a value forbids the values one above and one below it.
- `min_cost_climbing_stairs(cost)`: the cheapest way past the top step, starting on step 0 or step 1.

A negative `n` raises `ValueError`. `rob` and `delete_and_earn` raise `ValueError` for an empty input or for a negative value.

### `dynaprog.median`

- `median_of_sorted(nums1, nums2)`: the median of two ascending sequences taken together, returned as a float. It runs in time logarithmic in the length of the shorter sequence. It raises `ValueError` when both sequences are empty or when the search finds that the input is not sorted.

## Example

```python
from dynaprog.sequences import longest_increasing_subsequence
from dynaprog.strings import edit_distance
from dynaprog.median import median_of_sorted

longest_increasing_subsequence([1, 3, 6, 7, 9, 4, 10, 5, 6])  # 6
edit_distance("horse", "ros")                                 # 3
median_of_sorted([1, 2, 3, 4, 5, 7, 8], [6])                  # 4.5
```

## What it does not do

The package is a library of functions and nothing more. It has no command-line tool. It does not print the intermediate tables or reconstruct the subsequences and paths. It returns only the lengths, counts, sums or strings listed above.