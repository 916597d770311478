"""Classic backtracking searches."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache
from itertools import permutations as _permutations
from typing import Any, MutableSequence

_DIGITS = "123456789"
_MAZE_MOVES = (("D", 1, 0), ("L", 0, -1), ("U", -1, 0), ("R", 0, 1))


@lru_cache(maxsize=None)
def _stair_paths(n: int) -> tuple[str, ...]:
    if n == 0:
        return ("",)
    if n < 0:
        return ()
    return tuple(step + path for step in "123" for path in _stair_paths(n - int(step)))


def stair_paths(n: int) -> list[str]:
    """Return every way to climb ``n`` stairs in steps of 1, 2 or 3."""
    return list(_stair_paths(n))


def subset_sums(arr: Iterable[int]) -> list[int]:
    """Return the sum of every subset, excluding each element before including it."""
    values = list(arr)
    sums: list[int] = []

    def walk(index: int, total: int) -> None:
        if index == len(values):
            sums.append(total)
            return
        walk(index + 1, total)
        walk(index + 1, total + values[index])

    walk(0, 0)
    return sums


def subsets(nums: Sequence[Any]) -> list[list[Any]]:
    """Return every subset, including each element before excluding it."""
    result: list[list[Any]] = []
    chosen: list[Any] = []

    def walk(index: int) -> None:
        if index == len(nums):
            result.append(list(chosen))
            return
        chosen.append(nums[index])
        walk(index + 1)
        chosen.pop()
        walk(index + 1)

    walk(0)
    return result


def unique_subsets(nums: Iterable[Any]) -> list[list[Any]]:
    """Return each distinct subset of a multiset once, in sorted order."""
    values = sorted(nums)
    result: list[list[Any]] = []
    chosen: list[Any] = []

    def walk(start: int) -> None:
        result.append(list(chosen))
        for i in range(start, len(values)):
            if i != start and values[i - 1] == values[i]:
                continue
            chosen.append(values[i])
            walk(i + 1)
            chosen.pop()

    walk(0)
    return result


def permutations(nums: Sequence[Any]) -> list[list[Any]]:
    """Return every ordering of ``nums`` by position."""
    return [list(p) for p in _permutations(nums)]


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens as rows of ``.`` and ``Q``."""
    boards: list[list[str]] = []
    columns: list[int] = []
    used_cols: set[int] = set()
    used_diag: set[int] = set()
    used_anti: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            boards.append(["." * c + "Q" + "." * (n - c - 1) for c in columns])
            return
        for col in range(n):
            if col in used_cols or row - col in used_diag or row + col in used_anti:
                continue
            columns.append(col)
            used_cols.add(col)
            used_diag.add(row - col)
            used_anti.add(row + col)
            place(row + 1)
            columns.pop()
            used_cols.discard(col)
            used_diag.discard(row - col)
            used_anti.discard(row + col)

    place(0)
    return boards


def _fits(board: Sequence[Sequence[str]], x: int, y: int, digit: str) -> bool:
    if any(board[i][y] == digit or board[x][i] == digit for i in range(9)):
        return False
    bx, by = x // 3 * 3, y // 3 * 3
    return all(board[bx + i][by + j] != digit for i in range(3) for j in range(3))


def solve_sudoku(board: MutableSequence[MutableSequence[str]]) -> bool:
    """Fill the ``.`` cells of a 9x9 board in place.

    Returns True when solved; on failure the board is left as it was.
    """
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("sudoku board must be 9x9")
    empties = [(x, y) for x in range(9) for y in range(9) if board[x][y] == "."]

    def fill(k: int) -> bool:
        if k == len(empties):
            return True
        x, y = empties[k]
        for digit in _DIGITS:
            if _fits(board, x, y, digit):
                board[x][y] = digit
                if fill(k + 1):
                    return True
        board[x][y] = "."
        return False

    return fill(0)


def rat_in_maze_paths(matrix: Sequence[Sequence[int]]) -> list[str]:
    """Return every path of ``D``/``L``/``U``/``R`` moves from the top-left to the
    bottom-right cell of a square maze, moving only through non-zero cells."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("maze must be square")
    if n == 0 or not matrix[0][0]:
        return []
    paths: list[str] = []
    visited: set[tuple[int, int]] = set()
    moves: list[str] = []

    def walk(x: int, y: int) -> None:
        if x == n - 1 and y == n - 1:
            paths.append("".join(moves))
            return
        visited.add((x, y))
        for letter, dx, dy in _MAZE_MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < n and 0 <= ny < n and matrix[nx][ny] and (nx, ny) not in visited:
                moves.append(letter)
                walk(nx, ny)
                moves.pop()
        visited.discard((x, y))

    walk(0, 0)
    return paths