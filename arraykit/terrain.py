"""Problems over elevation profiles and jump lengths."""

from collections.abc import Sequence
from itertools import accumulate


def trapped_water(heights: Sequence[int]) -> int:
    """Return how much rain water the elevation profile holds."""
    if not heights:
        return 0
    prefix_max = accumulate(heights, max)
    suffix_max = list(accumulate(reversed(heights), max))[::-1]
    return sum(
        min(left, right) - height
        for left, right, height in zip(prefix_max, suffix_max, heights)
    )


def min_jumps(nums: Sequence[int]) -> int:
    """Return the fewest jumps from the first to the last index.

    ``nums[i]`` is the longest jump allowed from index ``i``.
    """
    last = len(nums) - 1
    if last <= 0:
        return 0
    reach = jumps = current_end = 0
    for index, length in enumerate(nums[:last]):
        reach = max(reach, index + length)
        if index == current_end:
            jumps += 1
            current_end = reach
            if current_end >= last:
                break
    return jumps