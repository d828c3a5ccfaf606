"""Backtracking searches: grid paths, queens, permutations, subsets, sudoku."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from functools import cache

Board = list[list[int]]


def _check_dimensions(rows: int, cols: int) -> None:
    if rows < 1 or cols < 1:
        raise ValueError("grid must have at least one row and one column")


def grid_paths(rows: int, cols: int) -> Iterator[Board]:
    """Yield a 0/1 board marking each right/down path from top-left to bottom-right.

    Moves to the right are tried before moves down.
    """
    _check_dimensions(rows, cols)
    board = [[0] * cols for _ in range(rows)]

    def walk(row: int, col: int) -> Iterator[Board]:
        if row == rows - 1 and col == cols - 1:
            board[row][col] = 1
            yield [line[:] for line in board]
            board[row][col] = 0
            return
        if row == rows or col == cols:
            return
        board[row][col] = 1
        yield from walk(row, col + 1)
        yield from walk(row + 1, col)
        board[row][col] = 0

    yield from walk(0, 0)


def count_grid_paths(rows: int, cols: int) -> int:
    """Count right/down paths across the grid; a path is counted one step early."""
    _check_dimensions(rows, cols)

    @cache
    def count(row: int, col: int) -> int:
        if (row == rows - 2 and col == cols - 1) or (row == rows - 1 and col == cols - 2):
            return 1
        if row == rows or col == cols:
            return 0
        return count(row, col + 1) + count(row + 1, col)

    return count(0, 0)


def is_safe_queen(board: Sequence[Sequence[int]], row: int, col: int) -> bool:
    """Whether a queen at (row, col) is unattacked by queens in its row or above it."""
    if any(board[row]):
        return False
    if any(board[r][col] for r in range(row + 1)):
        return False
    up_left = zip(range(row, -1, -1), range(col, -1, -1))
    if any(board[r][c] for r, c in up_left):
        return False
    up_right = zip(range(row, -1, -1), range(col, len(board[0])))
    return not any(board[r][c] for r, c in up_right)


def n_queens(n: int) -> Iterator[Board]:
    """Yield every placement of ``n`` non-attacking queens on an n-by-n board."""
    board = [[0] * n for _ in range(n)]

    def place(row: int) -> Iterator[Board]:
        if row >= n:
            yield [line[:] for line in board]
            return
        for col in range(n):
            if is_safe_queen(board, row, col):
                board[row][col] = 1
                yield from place(row + 1)
                board[row][col] = 0

    yield from place(0)


def permutations(text: str) -> Iterator[str]:
    """Yield every ordering of the characters of ``text``, repeats included."""

    def permute(rest: str, prefix: str) -> Iterator[str]:
        if not rest:
            yield prefix
            return
        for i, char in enumerate(rest):
            yield from permute(rest[:i] + rest[i + 1 :], prefix + char)

    yield from permute(text, "")


def subsets(text: str) -> Iterator[str]:
    """Yield every subsequence of ``text``, choices that keep a character first."""

    def choose(rest: str, prefix: str) -> Iterator[str]:
        if not rest:
            yield prefix
            return
        yield from choose(rest[1:], prefix + rest[0])
        yield from choose(rest[1:], prefix)

    yield from choose(text, "")


def is_valid_placement(board: Sequence[Sequence[int]], row: int, col: int, num: int) -> bool:
    """Whether ``num`` is absent from the cell's column, row and 3x3 box."""
    if any(line[col] == num for line in board):
        return False
    if num in board[row]:
        return False
    top, left = row // 3 * 3, col // 3 * 3
    return all(num not in line[left : left + 3] for line in board[top : top + 3])


def solve_sudoku(board: Sequence[Sequence[int]]) -> Iterator[Board]:
    """Yield every completion of a 9x9 sudoku whose empty cells hold 0.

    The given board is left unchanged.
    """
    grid = [list(line) for line in board]
    empty = [
        (r, c) for r, line in enumerate(grid) for c, value in enumerate(line) if value == 0
    ]

    def fill(position: int) -> Iterator[Board]:
        if position == len(empty):
            yield [line[:] for line in grid]
            return
        r, c = empty[position]
        for num in range(1, 10):
            if is_valid_placement(grid, r, c, num):
                grid[r][c] = num
                yield from fill(position + 1)
                grid[r][c] = 0

    yield from fill(0)


def sudoku_solvable(board: Sequence[Sequence[int]]) -> bool:
    """Whether the sudoku has at least one completion."""
    return next(solve_sudoku(board), None) is not None