"""Algorithms that rearrange a list in place."""

from collections.abc import MutableSequence, Sequence


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact sorted ``nums`` so its first ``k`` items are unique; return ``k``."""
    if not nums:
        return 0
    last = 0
    for value in nums:
        if value != nums[last]:
            last += 1
            nums[last] = value
    return last + 1


def remove_element(nums: MutableSequence[int], value: int) -> int:
    """Move the items not equal to ``value`` to the front; return their count."""
    kept = 0
    for item in list(nums):
        if item != value:
            nums[kept] = item
            kept += 1
    return kept


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` into the next lexicographic permutation.

    The last permutation wraps around to the first (ascending) one.
    """
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]),
        None,
    )
    if pivot is None:
        nums.reverse()
        return
    swap = next(i for i in range(len(nums) - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[swap] = nums[swap], nums[pivot]
    nums[pivot + 1 :] = nums[pivot + 1 :][::-1]


def merge_sorted_into(target: MutableSequence[int], count: int, other: Sequence[int]) -> None:
    """Merge sorted ``other`` into the first ``count`` sorted items of ``target``.

    ``target`` must have room for ``count + len(other)`` items.
    """
    if count < 0 or len(target) < count + len(other):
        raise ValueError("target has no room for the merged values")
    i, j, k = count - 1, len(other) - 1, count + len(other) - 1
    while i >= 0 and j >= 0:
        if target[i] > other[j]:
            target[k] = target[i]
            i -= 1
        else:
            target[k] = other[j]
            j -= 1
        k -= 1
    while j >= 0:
        target[k] = other[j]
        j -= 1
        k -= 1