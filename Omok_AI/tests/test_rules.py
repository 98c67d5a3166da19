"""Win detection, line scanning, and draw checks."""

import pytest

from Omok_AI.Board import Board, BLACK, WHITE, EMPTY
from Omok_AI.engine import rules


def checkerboard_pairs(row, col):
    # Horizontal runs of two, vertical runs of one, diagonal runs of at most two.
    return BLACK if ((col // 2) + row) % 2 == 0 else WHITE


@pytest.mark.parametrize("drow, dcol", rules.DIRECTIONS)
def test_five_in_any_direction_returns_exact_run(drow, dcol):
    b = Board(size=15)
    start = (5, 5)
    stones = [(start[0] + drow * i, start[1] + dcol * i) for i in range(5)]
    for row, col in stones:
        b.place(row, col, BLACK)
    last = stones[-1]
    line = rules.winning_line(b, *last, BLACK)
    assert line is not None
    assert sorted(line) == sorted(stones)


@pytest.mark.parametrize("drow, dcol", rules.DIRECTIONS)
def test_four_is_not_a_win(drow, dcol):
    b = Board(size=15)
    stones = [(5 + drow * i, 5 + dcol * i) for i in range(4)]
    for row, col in stones:
        b.place(row, col, WHITE)
    assert rules.winning_line(b, *stones[-1], WHITE) is None
    assert not rules.is_win_after_move(b, *stones[-1], WHITE)


def test_anchor_in_middle_of_run_detects_win():
    b = Board(size=15)
    for col in (3, 4, 6, 7):
        b.place(7, col, BLACK)
    b.place(7, 5, BLACK)
    assert sorted(rules.winning_line(b, 7, 5)) == [(7, c) for c in range(3, 8)]


def test_run_broken_by_opponent_is_not_a_win():
    b = Board(size=15)
    for col in (0, 1, 3, 4, 5):
        b.place(0, col, BLACK)
    b.place(0, 2, WHITE)
    for col in (0, 1, 3, 4, 5):
        assert rules.winning_line(b, 0, col, BLACK) is None


def test_overline_counts_as_win():
    b = Board(size=15)
    for col in range(6):
        b.place(2, col, WHITE)
    assert rules.is_win_after_move(b, 2, 5, WHITE)


def test_win_detector_ignores_other_color():
    b = Board(size=15)
    for col in range(5):
        b.place(0, col, BLACK)
    assert rules.winning_line(b, 0, 4, WHITE) is None


def test_full_board_without_five_is_draw():
    b = Board(size=15)
    for row in range(15):
        for col in range(15):
            b.place(row, col, checkerboard_pairs(row, col))
    assert b.is_full()
    for row in range(15):
        for col in range(15):
            assert rules.winning_line(b, row, col) is None
    assert rules.is_draw(b, None)


def test_partial_board_is_not_draw():
    b = Board(size=15)
    b.place(7, 7, BLACK)
    assert not rules.is_draw(b, None)


def test_all_lines_covers_rows_columns_and_long_diagonals():
    b = Board(size=15)
    lines = list(rules.all_lines(b))
    # 15 rows, 15 columns, 21 diagonals and 21 anti-diagonals of length >= 5
    assert len(lines) == 72
    assert all(len(line) >= 5 for line in lines)


def test_all_lines_diagonal_contents():
    b = Board(size=5)
    b.place(0, 0, BLACK)
    b.place(4, 4, BLACK)
    b.place(0, 4, WHITE)
    b.place(4, 0, WHITE)
    lines = list(rules.all_lines(b))
    assert [BLACK, EMPTY, EMPTY, EMPTY, BLACK] in lines
    assert [WHITE, EMPTY, EMPTY, EMPTY, WHITE] in lines


@pytest.mark.parametrize(
    "line, expected",
    [
        ([EMPTY, BLACK, BLACK, BLACK, EMPTY], [(3, True, True)]),
        ([BLACK, BLACK, BLACK, EMPTY, EMPTY], [(3, False, True)]),
        ([WHITE, BLACK, BLACK, WHITE, EMPTY], [(2, False, False)]),
        ([BLACK, EMPTY, BLACK, BLACK, WHITE], [(1, False, True), (2, True, False)]),
        ([EMPTY, EMPTY, EMPTY], []),
    ],
)
def test_scan_runs_classifies_open_ends(line, expected):
    assert list(rules.scan_runs(line, BLACK)) == expected
