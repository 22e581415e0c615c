"""Pair, triple and quadruple sum problems over integer sequences."""

from collections.abc import Sequence

NO_CLOSEST_SUM = 999999999
"""Value reported by :func:`three_sum_closest` when no candidate triple was seen."""


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the original indices of two values adding up to ``target``.

    The values are paired up after sorting, so the first index belongs to the
    smaller value. An empty list means no such pair exists.
    """
    indexed = sorted((value, index) for index, value in enumerate(nums))
    left, right = 0, len(indexed) - 1
    while left < right:
        total = indexed[left][0] + indexed[right][0]
        if total == target:
            return [indexed[left][1], indexed[right][1]]
        if total < target:
            left += 1
        else:
            right -= 1
    return []


def max_area(heights: Sequence[int]) -> int:
    """Return the largest area of water held between two of the walls."""
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(heights[left], heights[right]))
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sell."""
    best = 0
    lowest = None
    for price in prices:
        if lowest is not None and price > lowest:
            best = max(best, price - lowest)
        lowest = price if lowest is None else min(lowest, price)
    return best


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct ascending triple of values that sums to zero."""
    values = sorted(nums)
    result: list[list[int]] = []
    for i in range(len(values) - 1):
        if i > 0 and values[i] == values[i - 1]:
            continue
        left, right = i + 1, len(values) - 1
        while left < right:
            total = values[i] + values[left] + values[right]
            if total == 0:
                result.append([values[i], values[left], values[right]])
                while left < right and values[left] == values[left + 1]:
                    left += 1
                while left < right and values[right] == values[right - 1]:
                    right -= 1
                left += 1
                right -= 1
            elif total < 0:
                left += 1
            else:
                right -= 1
    return result


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Return a triple sum near ``target``; an exact match is returned at once.

    A triple sum is kept whenever its signed distance to ``target`` drops
    below that of the triple examined just before it. With fewer than three
    values :data:`NO_CLOSEST_SUM` is returned.
    """
    if not nums:
        raise ValueError("three_sum_closest needs at least one value")
    values = sorted(nums)
    previous_difference = 0
    closest = NO_CLOSEST_SUM
    for i in range(len(values) - 1):
        if i > 0 and values[i] == values[i - 1]:
            continue
        left, right = i + 1, len(values) - 1
        while left < right:
            total = values[i] + values[left] + values[right]
            difference = target - total
            if difference == 0:
                return total
            if difference > 0:
                left += 1
            else:
                right -= 1
            if difference < previous_difference:
                closest = total
            previous_difference = difference
    return closest


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct ascending quadruple of values summing to ``target``."""
    values = sorted(nums)
    count = len(values)
    result: list[list[int]] = []
    for i in range(count - 3):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, count - 2):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            left, right = j + 1, count - 1
            while left < right:
                total = values[i] + values[j] + values[left] + values[right]
                if total == target:
                    result.append([values[i], values[j], values[left], values[right]])
                    while left < right and values[left] == values[left + 1]:
                        left += 1
                    while left < right and values[right] == values[right - 1]:
                        right -= 1
                    left += 1
                    right -= 1
                elif total < target:
                    left += 1
                else:
                    right -= 1
    return result