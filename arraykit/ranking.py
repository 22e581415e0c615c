"""Picking out the largest values and simple list reshaping."""

from collections.abc import Sequence


def three_largest(nums: Sequence[int]) -> tuple[int, int, int]:
    """Return the three largest values, largest first.

    Slots start at zero, so values that are not positive never displace them.
    """
    first = second = third = 0
    for value in nums:
        if first < value:
            first, second, third = value, first, second
        elif second < value:
            second, third = value, second
        elif third < value:
            third = value
    return (first, second, third)


def k_largest(nums: Sequence[int], k: int) -> list[int]:
    """Return the ``k`` largest values in ascending order."""
    if k < 0 or k > len(nums):
        raise ValueError(f"k must be between 0 and {len(nums)}, got {k}")
    ordered = sorted(nums)
    return ordered[len(ordered) - k :]


def largest(nums: Sequence[int]) -> int:
    """Return the largest value, or 0 if no value is positive."""
    return max([0, *nums])


def concatenate(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the items of ``first`` followed by those of ``second``."""
    return [*first, *second]


def reversed_list(nums: Sequence[int]) -> list[int]:
    """Return the items of ``nums`` in reverse order."""
    return list(reversed(nums))