"""Routines over rectangular integer matrices given as lists of rows."""

from __future__ import annotations

import bisect
import heapq
from collections.abc import Sequence


def _count_ones(row: Sequence[int]) -> int:
    # Rows hold all their ones before their zeros.
    return bisect.bisect_left(row, True, key=lambda value: value != 1)


def k_weakest_rows(mat: Sequence[Sequence[int]], k: int) -> list[int]:
    """Return the indices of the ``k`` rows with fewest leading ones, weakest first.

    Ties are broken by the lower row index.
    """
    if not 0 <= k <= len(mat):
        raise ValueError("k must be between 0 and the number of rows")
    strengths = ((_count_ones(row), index) for index, row in enumerate(mat))
    return [index for _, index in heapq.nsmallest(k, strengths)]


def count_negatives(grid: Sequence[Sequence[int]]) -> int:
    """Count negative values in a grid whose rows are sorted non-increasingly."""
    return sum(
        len(row) - bisect.bisect_left(row, True, key=lambda value: value < 0)
        for row in grid
    )


def rotate_image(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    matrix[:] = [list(column)[::-1] for column in zip(*matrix)]


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero every row and column that holds a zero, in place."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            for j in zero_cols:
                row[j] = 0


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` occurs in a matrix whose rows are sorted ascending."""
    for row in matrix:
        index = bisect.bisect_left(row, target)
        if index < len(row) and row[index] == target:
            return True
    return False