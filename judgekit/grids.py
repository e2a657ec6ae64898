"""Grid problems: chessboard repainting, equal-corner squares, fractal stars, bingo, candies."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby, product

_BOARD = 8
_BINGO = 5
_BINGO_LINES_NEEDED = 3


def _require_rectangle(rows: Sequence[str], what: str) -> tuple[int, int]:
    if not rows or not rows[0]:
        raise ValueError(f"{what} must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError(f"{what} rows must all have the same length")
    return len(rows), width


def min_repaint(board: Sequence[str]) -> int:
    """Fewest squares to repaint so some 8x8 cut of ``board`` is a chessboard."""
    rows = [str(row) for row in board]
    height, width = _require_rectangle(rows, "board")
    if height < _BOARD or width < _BOARD:
        raise ValueError("board must be at least 8 by 8")

    best = _BOARD * _BOARD
    for top, left in product(range(height - _BOARD + 1), range(width - _BOARD + 1)):
        black_start = 0
        for x, row in enumerate(rows[top : top + _BOARD]):
            for y, cell in enumerate(row[left : left + _BOARD]):
                expected = "B" if (x + y) % 2 == 0 else "W"
                if cell != expected:
                    black_start += 1
        white_start = sum(
            1
            for x, row in enumerate(rows[top : top + _BOARD])
            for y, cell in enumerate(row[left : left + _BOARD])
            if cell != ("W" if (x + y) % 2 == 0 else "B")
        )
        best = min(best, black_start, white_start)
    return best


def largest_square(rows: Sequence[str]) -> int:
    """Area of the largest axis-aligned square whose four corners hold the same digit."""
    grid = [str(row) for row in rows]
    height, width = _require_rectangle(grid, "grid")

    side = 1
    for i, j in product(range(height), range(width)):
        corner = grid[i][j]
        for k in range(1, min(height - i, width - j)):
            if grid[i][j + k] == corner == grid[i + k][j] == grid[i + k][j + k]:
                side = max(side, k + 1)
    return side * side


def _is_blank(i: int, j: int, size: int) -> bool:
    step = size
    while step:
        if (i // step) % 3 == 1 and (j // step) % 3 == 1:
            return True
        step //= 3
    return False


def star_pattern(size: int) -> list[str]:
    """Rows of the recursive star carpet of side ``size`` (a power of 3)."""
    if size < 1:
        raise ValueError("size must be positive")
    return [
        "".join(" " if _is_blank(i, j, size) else "*" for j in range(size))
        for i in range(size)
    ]


def _bingo_lines() -> list[frozenset[tuple[int, int]]]:
    cells = range(_BINGO)
    lines = [frozenset((r, c) for c in cells) for r in cells]
    lines += [frozenset((r, c) for r in cells) for c in cells]
    lines.append(frozenset((k, k) for k in cells))
    lines.append(frozenset((k, _BINGO - 1 - k) for k in cells))
    return lines


def bingo_turn(board: Sequence[Sequence[int]], calls: Iterable[int]) -> int:
    """Number of calls after which the 5x5 board first shows three complete lines."""
    if len(board) != _BINGO or any(len(row) != _BINGO for row in board):
        raise ValueError("bingo board must be 5 by 5")

    positions: dict[int, list[tuple[int, int]]] = {}
    for r, row in enumerate(board):
        for c, value in enumerate(row):
            positions.setdefault(value, []).append((r, c))

    lines = _bingo_lines()
    marked: set[tuple[int, int]] = set()
    for turn, call in enumerate(calls, start=1):
        marked.update(positions.get(call, ()))
        if sum(1 for line in lines if line <= marked) >= _BINGO_LINES_NEEDED:
            return turn
    raise ValueError("the calls never complete three lines")


def _longest_run(line: Iterable[str]) -> int:
    return max(sum(1 for _ in group) for _, group in groupby(line))


def max_candies(grid: Sequence[str]) -> int:
    """Longest same-coloured row or column run reachable with one adjacent swap."""
    cells = [list(row) for row in grid]
    size = len(cells)
    if not size or any(len(row) != size for row in cells):
        raise ValueError("candy grid must be square and non-empty")

    def column(c: int) -> list[str]:
        return [row[c] for row in cells]

    best = max(
        max(_longest_run(row) for row in cells),
        max(_longest_run(column(c)) for c in range(size)),
    )
    for r, c in product(range(size), repeat=2):
        for dr, dc in ((1, 0), (0, 1)):
            r2, c2 = r + dr, c + dc
            if r2 >= size or c2 >= size or cells[r][c] == cells[r2][c2]:
                continue
            cells[r][c], cells[r2][c2] = cells[r2][c2], cells[r][c]
            best = max(
                best,
                *(_longest_run(cells[row]) for row in {r, r2}),
                *(_longest_run(column(col)) for col in {c, c2}),
            )
            cells[r][c], cells[r2][c2] = cells[r2][c2], cells[r][c]
    return best