"""Searching and walking two-dimensional grids."""

from __future__ import annotations

from collections.abc import Sequence


def search_sorted_matrix(
    matrix: Sequence[Sequence[int]], target: int
) -> tuple[int, int] | None:
    """Find ``target`` in a matrix whose rows and columns both ascend.

    The walk starts at the top-right corner: values to the left are
    smaller, values below are larger. Returns ``(row, col)`` or ``None``.
    """
    if not matrix or not matrix[0]:
        return None
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if target > value:
            row += 1
        elif target < value:
            col -= 1
        else:
            return row, col
    return None


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of ``matrix`` in clockwise spiral order.

    Only rings that are at least two cells tall and two cells wide are
    walked; a leftover middle row, column or cell is not included.
    """
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    top, left, bottom, right = 0, 0, rows - 1, cols - 1
    order: list[int] = []

    while top < bottom and left < right:
        order.extend(matrix[top][left : right + 1])
        order.extend(matrix[r][right] for r in range(top + 1, bottom + 1))
        order.extend(matrix[bottom][c] for c in range(right - 1, left - 1, -1))
        order.extend(matrix[r][left] for r in range(bottom - 1, top, -1))
        top += 1
        left += 1
        bottom -= 1
        right -= 1

    return order