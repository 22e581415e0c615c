import itertools
import math

import pytest

from arraykit.combinatorics import combination_sum, permutations


def test_combination_sum_classic_example():
    result = combination_sum([2, 3, 6, 7], 7)
    assert sorted(tuple(sorted(c)) for c in result) == [(2, 2, 3), (7,)]


@pytest.mark.parametrize(
    "candidates, target",
    [([2, 3, 5], 8), ([1, 2], 4), ([3, 4, 5], 11), ([7], 21)],
)
def test_combination_sum_results_add_up(candidates, target):
    result = combination_sum(candidates, target)
    assert result
    for combo in result:
        assert sum(combo) == target
        assert set(combo) <= set(candidates)


def test_combination_sum_has_no_duplicates():
    result = combination_sum([2, 3, 5], 8)
    assert len({tuple(c) for c in result}) == len(result)


def test_combination_sum_no_solution():
    assert combination_sum([4, 6], 5) == []


def test_combination_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum([0, 1], 3)


def test_permutations_first_is_input_order():
    result = permutations([1, 2, 3])
    assert result[0] == [1, 2, 3]


@pytest.mark.parametrize("nums", [[1], [1, 2], [4, 5, 6], [1, 2, 3, 4]])
def test_permutations_cover_all_orderings(nums):
    result = permutations(nums)
    assert len(result) == math.factorial(len(nums))
    assert sorted(map(tuple, result)) == sorted(itertools.permutations(nums))


def test_permutations_leave_input_unchanged():
    nums = [3, 1, 2]
    permutations(nums)
    assert nums == [3, 1, 2]


def test_permutations_of_empty():
    assert permutations([]) == [[]]