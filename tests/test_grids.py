import pytest

from judgekit.grids import (
    bingo_turn,
    largest_square,
    max_candies,
    min_repaint,
    star_pattern,
)


def _chessboard(height, width, first="B"):
    other = "W" if first == "B" else "B"
    return [
        "".join(first if (x + y) % 2 == 0 else other for y in range(width))
        for x in range(height)
    ]


def _flip(board, row, col):
    rows = list(board)
    cell = rows[row][col]
    rows[row] = rows[row][:col] + ("W" if cell == "B" else "B") + rows[row][col + 1 :]
    return rows


@pytest.mark.parametrize("first", ["B", "W"])
def test_min_repaint_perfect_board_needs_nothing(first):
    assert min_repaint(_chessboard(8, 8, first)) == 0


def test_min_repaint_single_wrong_square():
    assert min_repaint(_flip(_chessboard(8, 8), 3, 4)) == 1


def test_min_repaint_finds_clean_window_in_larger_board():
    board = _flip(_chessboard(10, 9), 0, 0)
    assert min_repaint(board) == 0


def test_min_repaint_never_exceeds_half_the_board():
    board = ["B" * 12] * 11
    result = min_repaint(board)
    assert result <= 32
    assert result == min_repaint(["W" * 12] * 11)


def test_min_repaint_too_small():
    with pytest.raises(ValueError):
        min_repaint(_chessboard(7, 8))


def test_largest_square_whole_grid():
    assert largest_square(["11", "11"]) == 4


def test_largest_square_no_match_is_single_cell():
    assert largest_square(["12", "34"]) == 1


def test_largest_square_result_is_perfect_square():
    result = largest_square(["42101", "22100", "22101"])
    side = int(result**0.5)
    assert side * side == result
    assert 1 <= side <= 3


def test_largest_square_rejects_ragged_rows():
    with pytest.raises(ValueError):
        largest_square(["123", "12"])


def test_largest_square_rejects_empty():
    with pytest.raises(ValueError):
        largest_square([])


def test_star_pattern_three():
    assert star_pattern(3) == ["***", "* *", "***"]


def test_star_pattern_nine_shape():
    rows = star_pattern(9)
    assert len(rows) == 9
    assert all(len(row) == 9 for row in rows)
    assert rows == rows[::-1]
    assert all(row == row[::-1] for row in rows)
    assert [row[3:6] for row in rows[3:6]] == ["   "] * 3


def test_star_pattern_is_self_similar():
    small = star_pattern(3)
    big = star_pattern(9)
    assert [row[:3] for row in big[:3]] == small
    assert [row[6:] for row in big[6:]] == small


def test_star_pattern_rejects_zero():
    with pytest.raises(ValueError):
        star_pattern(0)


_BOARD = [[r * 5 + c + 1 for c in range(5)] for r in range(5)]


def test_bingo_three_rows():
    calls = list(range(1, 16)) + list(range(16, 26))
    assert bingo_turn(_BOARD, calls) == len(range(1, 16))


def test_bingo_columns():
    calls = [r * 5 + c + 1 for c in range(3) for r in range(5)]
    assert bingo_turn(_BOARD, calls + [25, 24]) == len(calls)


def test_bingo_diagonals_and_row():
    diagonal = [1, 7, 13, 19, 25]
    anti = [5, 9, 17, 21]
    row = [2, 3, 4]
    calls = diagonal + anti + row
    assert bingo_turn(_BOARD, calls + [6, 8]) == len(calls)


def test_bingo_never_completes():
    with pytest.raises(ValueError):
        bingo_turn(_BOARD, [1, 2, 3])


def test_bingo_rejects_bad_board():
    with pytest.raises(ValueError):
        bingo_turn([[1, 2], [3, 4]], [1])


def test_max_candies_uniform_grid():
    grid = ["CCC", "CCC", "CCC"]
    assert max_candies(grid) == len(grid)


def test_max_candies_swap_completes_row():
    grid = ["AAB", "CDA", "EFG"]
    assert max_candies(grid) == len(grid)


def test_max_candies_no_gain():
    assert max_candies(["AB", "CD"]) == 1


def test_max_candies_bounds():
    grid = ["CPZY", "PCYZ", "ZYPC", "YZCP"]
    assert 1 <= max_candies(grid) <= len(grid)


def test_max_candies_rejects_non_square():
    with pytest.raises(ValueError):
        max_candies(["AB", "CD", "EF"])