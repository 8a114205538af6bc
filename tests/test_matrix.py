import copy

import pytest

from algokata.matrix import rotate, set_zeroes


def test_rotate_three_by_three():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert rotate(matrix) is None
    assert matrix == [[7, 4, 1], [8, 5, 2], [9, 6, 3]]


@pytest.mark.parametrize(
    "original",
    [
        [[1]],
        [[1, 2], [3, 4]],
        [[5, 1, 9, 11], [2, 4, 8, 10], [13, 3, 6, 7], [15, 14, 12, 16]],
    ],
)
def test_rotate_four_times_is_identity(original):
    matrix = copy.deepcopy(original)
    for _ in range(4):
        rotate(matrix)
    assert matrix == original


@pytest.mark.parametrize(
    "original",
    [[[1, 2], [3, 4]], [[5, 1, 9, 11], [2, 4, 8, 10], [13, 3, 6, 7], [15, 14, 12, 16]]],
)
def test_rotate_twice_is_half_turn(original):
    matrix = copy.deepcopy(original)
    rotate(matrix)
    rotate(matrix)
    assert matrix == [row[::-1] for row in original[::-1]]


def test_set_zeroes_without_zero_is_unchanged():
    original = [[1, 2], [3, 4], [5, 6]]
    matrix = copy.deepcopy(original)
    assert set_zeroes(matrix) is None
    assert matrix == original


def test_set_zeroes_centre():
    matrix = [[1, 1, 1], [1, 0, 1], [1, 1, 1]]
    set_zeroes(matrix)
    assert matrix == [[1, 0, 1], [0, 0, 0], [1, 0, 1]]


@pytest.mark.parametrize(
    "original",
    [
        [[0, 1, 2, 0], [3, 4, 5, 2], [1, 3, 1, 5]],
        [[1, 2, 3], [0, 5, 6], [7, 8, 9]],
        [[1, 2], [3, 4], [5, 0]],
    ],
)
def test_set_zeroes_invariant(original):
    matrix = copy.deepcopy(original)
    set_zeroes(matrix)
    zero_rows = {i for i, row in enumerate(original) if 0 in row}
    zero_cols = {j for row in original for j, v in enumerate(row) if v == 0}
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if i in zero_rows or j in zero_cols:
                assert value == 0
            else:
                assert value == original[i][j]