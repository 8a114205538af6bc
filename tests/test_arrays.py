import pytest

from algokata.arrays import (
    buy_choco,
    can_jump,
    find_min_arrow_shots,
    h_index,
    move_zeroes,
    plus_one,
    remove_duplicates,
    remove_element,
    subarray_sum,
    trap,
)


@pytest.mark.parametrize(
    "nums", [[1, 1, 2], [0, 0, 1, 1, 1, 2, 2, 3, 3, 4], [5], [-3, -3, -3], [1, 2, 3]]
)
def test_remove_duplicates_keeps_unique_prefix(nums):
    original = list(nums)
    count = remove_duplicates(nums)
    assert count == len(set(original))
    assert nums[:count] == sorted(set(original))
    assert len(nums) == len(original)


def test_remove_duplicates_empty():
    nums = []
    assert remove_duplicates(nums) == len(nums)


@pytest.mark.parametrize(
    "nums, val",
    [([3, 2, 2, 3], 3), ([0, 1, 2, 2, 3, 0, 4, 2], 2), ([], 1), ([7, 7], 7), ([1, 2], 9)],
)
def test_remove_element_keeps_others_in_order(nums, val):
    original = list(nums)
    count = remove_element(nums, val)
    kept = [value for value in original if value != val]
    assert count == len(kept)
    assert nums[:count] == kept


def test_buy_choco_exact_money():
    assert buy_choco([1, 2, 2], 3) == 0


def test_buy_choco_leftover_is_money_minus_cheapest_pair():
    prices = [9, 4, 1, 6]
    assert buy_choco(prices, 20) == 20 - 1 - 4
    assert prices == [9, 4, 1, 6]


def test_buy_choco_too_expensive_keeps_money():
    assert buy_choco([3, 2, 3], 3) == 3


def test_buy_choco_needs_two_prices():
    with pytest.raises(ValueError):
        buy_choco([1], 5)


def test_h_index_example():
    assert h_index([3, 0, 6, 1, 5]) == 3


@pytest.mark.parametrize(
    "citations", [[1, 3, 1], [0, 0, 0], [100], [10, 8, 5, 4, 3], [4, 4, 4, 4]]
)
def test_h_index_definition(citations):
    h = h_index(citations)
    assert sum(c >= h for c in citations) >= h
    assert sum(c >= h + 1 for c in citations) < h + 1


@pytest.mark.parametrize(
    "nums", [[0, 1, 0, 3, 12], [0], [1, 2, 3], [0, 0, 5], [4, 0, 0, 0]]
)
def test_move_zeroes(nums):
    original = list(nums)
    move_zeroes(nums)
    nonzero = [value for value in original if value != 0]
    assert nums[: len(nonzero)] == nonzero
    assert nums[len(nonzero):] == [0] * (len(original) - len(nonzero))


def test_trap_example():
    assert trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


@pytest.mark.parametrize("height", [[], [1, 2, 3, 4], [5, 3, 1], [2]])
def test_trap_holds_nothing_without_a_basin(height):
    assert trap(height) == 0


@pytest.mark.parametrize("height", [[4, 2, 0, 3, 2, 5], [3, 0, 2, 0, 4], [1, 0, 1]])
def test_trap_is_mirror_symmetric(height):
    assert trap(height) == trap(height[::-1])
    assert trap(height) > 0


def test_find_min_arrow_shots_example():
    assert find_min_arrow_shots([[10, 16], [2, 8], [1, 6], [7, 12]]) == 2


def test_find_min_arrow_shots_disjoint_balloons():
    points = [[1, 2], [3, 4], [5, 6], [7, 8]]
    assert find_min_arrow_shots(points) == len(points)


def test_find_min_arrow_shots_duplicates_need_no_more_arrows():
    points = [[1, 6], [2, 8], [7, 12], [10, 16]]
    assert find_min_arrow_shots(points + points) == find_min_arrow_shots(points)


def test_find_min_arrow_shots_empty():
    with pytest.raises(ValueError):
        find_min_arrow_shots([])


@pytest.mark.parametrize("size", [1, 2, 5])
def test_can_jump_single_steps_reach_end(size):
    assert can_jump([1] * size)


def test_can_jump_blocked_by_zero():
    assert not can_jump([3, 2, 1, 0, 4])
    assert can_jump([2, 3, 1, 1, 4])


@pytest.mark.parametrize("size", [1, 3, 6])
def test_subarray_sum_all_zeros(size):
    assert subarray_sum([0] * size, 0) == size * (size + 1) // 2


def test_subarray_sum_positive_whole_total():
    nums = [2, 7, 4, 9]
    assert subarray_sum(nums, sum(nums)) == 1
    assert subarray_sum(nums, sum(nums) + 1) == 0


@pytest.mark.parametrize("digits", [[1, 2, 3], [4, 3, 2, 1], [0], [9], [9, 9, 9], [1, 9]])
def test_plus_one_increments_number(digits):
    original = list(digits)
    result = plus_one(digits)
    as_int = lambda ds: int("".join(map(str, ds)))
    assert as_int(result) == as_int(original) + 1
    assert digits == original
    assert all(0 <= d <= 9 for d in result)