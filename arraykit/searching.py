"""Searching in sorted and unsorted integer sequences."""

import heapq
from collections.abc import Sequence


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of ``target``, or ``(-1, -1)``."""
    positions = [index for index, value in enumerate(nums) if value == target]
    if not positions:
        return (-1, -1)
    return (positions[0], positions[-1])


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or where it would go."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if target < nums[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return low


def first_missing_positive(nums: Sequence[int]) -> int:
    """Return the smallest positive integer absent from ``nums``."""
    if not nums:
        raise ValueError("first_missing_positive needs at least one value")
    present = {value for value in nums if value > 0}
    candidate = 1
    while candidate in present:
        candidate += 1
    return candidate


def median_of_sorted(first: Sequence[int], second: Sequence[int]) -> float:
    """Return the median of the union of two sorted sequences."""
    merged = list(heapq.merge(first, second))
    if not merged:
        raise ValueError("median of two empty sequences is undefined")
    size = len(merged)
    if size % 2 == 0:
        return (merged[(size - 1) // 2] + merged[(size + 1) // 2]) / 2
    return float(merged[size // 2])