"""Combination and permutation enumeration."""

from collections.abc import Iterator, Sequence


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return the distinct combinations of ``candidates`` that add up to ``target``.

    Each candidate may be used any number of times. A combination keeps the
    order in which its values appear in ``candidates``. Combinations are listed
    in the order they are first found.
    """
    values = list(candidates)
    if any(value <= 0 for value in values):
        raise ValueError("combination_sum needs positive candidates")

    seen: set[tuple[int, ...]] = set()
    found: list[list[int]] = []
    combo: list[int] = []

    def walk(index: int, remaining: int) -> None:
        if index == len(values) or remaining < 0:
            return
        if remaining == 0:
            key = tuple(combo)
            if key not in seen:
                seen.add(key)
                found.append(list(combo))
            return
        combo.append(values[index])
        walk(index + 1, remaining - values[index])
        walk(index, remaining - values[index])
        combo.pop()
        walk(index + 1, remaining)

    walk(0, target)
    return found


def permutations(nums: Sequence[int]) -> list[list[int]]:
    """Return every ordering of ``nums``, generated by successive swaps."""
    work = list(nums)

    def walk(index: int) -> Iterator[list[int]]:
        if index == len(work):
            yield list(work)
            return
        for i in range(index, len(work)):
            work[index], work[i] = work[i], work[index]
            yield from walk(index + 1)
            work[index], work[i] = work[i], work[index]

    return list(walk(0))