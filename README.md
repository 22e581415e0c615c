# arraykit

A small library of well-known array algorithms over lists of integers, with
an `arraykit` command for the two-sum and hourglass tasks. It has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `arraykit.sums`

- `two_sum(nums, target)`: the original indices of two values adding up to
  `target`, the index of the smaller value first; `[]` if there is no pair.
- `max_area(heights)`: the largest area of water held between two walls.
- `max_profit(prices)`: the best profit from one buy and a later sell.
- `three_sum(nums)`: every distinct ascending triple summing to zero.
- `three_sum_closest(nums, target)`: returns an exact triple sum at once.
  Otherwise it keeps a triple sum whenever its signed distance to `target`
  drops below that of the triple examined just before it. With fewer than
  three values it returns `NO_CLOSEST_SUM` (999999999). An empty input raises
  `ValueError`.
- `four_sum(nums, target)`: every distinct ascending quadruple summing to
  `target`.

### `arraykit.searching`

- `search_range(nums, target)`: `(first, last)` index of `target`, or
  `(-1, -1)`.
- `search_insert(nums, target)`: the index of `target` in a sorted list, or
  the index where it would be inserted.
- `first_missing_positive(nums)`: the smallest positive integer that does not
  appear in `nums`. An empty input raises `ValueError`.
- `median_of_sorted(first, second)`: the median of two sorted sequences as a
  float. It raises `ValueError` when both are empty.

### `arraykit.inplace`

These functions change the list you pass in.

- `remove_duplicates(nums)`: compacts a sorted list so that its first `k`
  items are unique, and returns `k`.
- `remove_element(nums, value)`: moves the items not equal to `value` to the
  front, and returns how many there are.
- `next_permutation(nums)`: rearranges the list into the next lexicographic
  permutation. The last permutation wraps around to ascending order.
- `merge_sorted_into(target, count, other)`: merges sorted `other` into the
  first `count` sorted items of `target`. `target` must have room for
  `count + len(other)` items. Otherwise the function raises `ValueError`.

### `arraykit.combinatorics`

- `combination_sum(candidates, target)`: the distinct combinations of
  positive candidates that add up to `target`. Any candidate may be repeated.
  A non-positive candidate raises `ValueError`.
- `permutations(nums)`: every ordering of `nums`, generated by successive
  swaps.

### `arraykit.ranking`

- `three_largest(nums)`: the three largest values, largest first. The slots
  start at zero, so values that are not positive never appear.
- `k_largest(nums, k)`: the `k` largest values in ascending order. A `k`
  outside `0..len(nums)` raises `ValueError`.
- `largest(nums)`: the largest value, or 0 if no value is positive.
- `concatenate(first, second)`, `reversed_list(nums)`.

### `arraykit.terrain`

- `trapped_water(heights)`: how much rain water an elevation profile holds.
- `min_jumps(nums)`: the fewest jumps from the first to the last index, where
  `nums[i]` is the longest jump allowed from index `i`.

### `arraykit.grid`

- `parse_grid(text, rows=6, cols=6)`: reads whitespace-separated integers
  into a list of rows.
- `format_grid(grid)`: one row per line, values separated by spaces.
- `max_hourglass_sum(grid)`: the largest hourglass sum, never less than 0.
  The grid must be rectangular and at least 3 by 3.

## Examples

```python
from arraykit.sums import max_area, max_profit
from arraykit.terrain import trapped_water, min_jumps

max_area([1, 8, 6, 2, 5, 4, 8, 3, 7])                  # 49
max_profit([7, 1, 5, 3, 6, 4])                         # 5
trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])    # 6
min_jumps([2, 3, 1, 1, 4])                             # 2
```

```python
from arraykit.grid import parse_grid, max_hourglass_sum

text = "1 1 1 0 0 0\n0 1 0 0 0 0\n1 1 1 0 0 0\n0 0 0 0 0 0\n0 0 0 0 0 0\n0 0 0 0 0 0"
max_hourglass_sum(parse_grid(text))                    # 7
```

## Command line

The `arraykit` command reads its input from standard input and prints the
answer. It supports two commands:

- `two-sum` reads a count, a target and then that many values. It prints the
  two indices separated by a space, or an empty line if there is no pair.
- `hourglass` reads a 6×6 grid and prints its largest hourglass sum.

```
echo "4 9 2 7 11 15" | arraykit two-sum     # 0 1
arraykit --help
```

If the input is malformed, the command writes an error to standard error and
exits with status 1.

The command covers only these two tasks. Use the other algorithms from
Python.