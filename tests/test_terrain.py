import pytest

from arraykit.terrain import min_jumps, trapped_water


def test_trapped_water_classic_example():
    assert trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


@pytest.mark.parametrize("heights", [[1, 2, 3, 4], [5, 4, 3], [2, 2, 2]])
def test_trapped_water_holds_nothing_on_monotone_profiles(heights):
    assert trapped_water(heights) == 0


def test_trapped_water_is_symmetric():
    heights = [4, 2, 0, 3, 2, 5, 1, 3]
    assert trapped_water(heights) == trapped_water(heights[::-1])


def test_trapped_water_fills_a_basin_to_the_lower_wall():
    assert trapped_water([3, 0, 0, 5]) == 3 * 2


def test_trapped_water_empty():
    assert trapped_water([]) == 0


def test_min_jumps_classic_example():
    assert min_jumps([2, 3, 1, 1, 4]) == 2


def test_min_jumps_single_element():
    assert min_jumps([7]) == 0


@pytest.mark.parametrize("length", [2, 5, 9])
def test_min_jumps_unit_steps(length):
    assert min_jumps([1] * length) == length - 1


def test_min_jumps_one_long_jump():
    nums = [10, 1, 1, 1, 1]
    assert min_jumps(nums) == 1