import itertools

import pytest

from arraykit.inplace import (
    merge_sorted_into,
    next_permutation,
    remove_duplicates,
    remove_element,
)


def test_remove_duplicates_prefix_is_unique():
    nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    original = list(nums)
    k = remove_duplicates(nums)
    assert nums[:k] == sorted(set(original))
    assert len(nums) == len(original)


def test_remove_duplicates_empty():
    assert remove_duplicates([]) == 0


def test_remove_duplicates_all_same():
    nums = [5, 5, 5]
    assert remove_duplicates(nums) == 1
    assert nums[0] == 5


def test_remove_element_prefix():
    nums = [0, 1, 2, 2, 3, 0, 4, 2]
    original = list(nums)
    k = remove_element(nums, 2)
    assert k == len(original) - original.count(2)
    assert 2 not in nums[:k]
    assert sorted(nums[:k]) == sorted(v for v in original if v != 2)


def test_remove_element_keeps_order():
    nums = [3, 1, 3, 2]
    k = remove_element(nums, 3)
    assert nums[:k] == [1, 2]


def test_remove_element_absent_value():
    nums = [1, 2, 3]
    assert remove_element(nums, 9) == 3
    assert nums == [1, 2, 3]


def test_next_permutation_example():
    nums = [1, 2, 3]
    next_permutation(nums)
    assert nums == [1, 3, 2]


def test_next_permutation_wraps_around():
    nums = [3, 2, 1]
    next_permutation(nums)
    assert nums == [1, 2, 3]


def test_next_permutation_walks_lexicographic_order():
    start = [1, 2, 3, 4]
    nums = list(start)
    for expected in list(itertools.permutations(start))[1:]:
        next_permutation(nums)
        assert tuple(nums) == expected
    next_permutation(nums)
    assert nums == start


def test_next_permutation_with_duplicates():
    nums = [1, 1, 5]
    next_permutation(nums)
    assert nums == [1, 5, 1]


def test_merge_sorted_into():
    target = [1, 2, 3, 0, 0, 0]
    other = [2, 5, 6]
    merge_sorted_into(target, 3, other)
    assert target == sorted([1, 2, 3] + other)


def test_merge_sorted_into_empty_prefix():
    target = [0, 0]
    merge_sorted_into(target, 0, [4, 7])
    assert target == [4, 7]


def test_merge_sorted_into_nothing_to_add():
    target = [1, 4]
    merge_sorted_into(target, 2, [])
    assert target == [1, 4]


def test_merge_sorted_into_without_room_raises():
    with pytest.raises(ValueError):
        merge_sorted_into([1, 2], 2, [3])