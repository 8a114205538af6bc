"""In-place exercises on square and rectangular matrices."""

from __future__ import annotations

from itertools import combinations


def rotate(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    matrix.reverse()
    for i, j in combinations(range(len(matrix)), 2):
        matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in zero_rows or j in zero_cols:
                row[j] = 0