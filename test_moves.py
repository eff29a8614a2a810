"""
Tests for the move engine: legality, flip sets and applying moves.
"""
import pytest

from reversi.game.board import Board, Cell, Player
from reversi.game.errors import CellOccupiedError, MoveError, NoCaptureError, OutOfRangeError
from reversi.game.moves import (
    apply_move,
    check_move,
    find_flips,
    get_valid_moves,
    has_any_valid_move,
    is_valid_move,
    scan_direction,
)


def board_from_rows(*rows):
    """Pad the given top rows with empty rows."""
    rows = list(rows) + ["........"] * (8 - len(rows))
    return Board.from_string("\n".join(rows))


STAR = board_from_rows(
    "........",
    "........",
    "..B.B.B.",
    "...WWW..",
    "..BW.WB.",
    "...WWW..",
    "..B.B.B.",
)


def test_valid_moves_initial():
    """Black's valid moves in the initial position."""
    expected_moves = [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert get_valid_moves(Board(), Player.BLACK) == expected_moves
    assert get_valid_moves(Board(), Player.WHITE) == [(2, 4), (3, 5), (4, 2), (5, 3)]


def test_single_flip():
    """Black bracketing one white stone flips it."""
    board = Board()
    flips = apply_move(board, 2, 3, Player.BLACK)

    assert flips == [(3, 3)]
    assert board.get(2, 3) == Cell.BLACK
    assert board.get(3, 3) == Cell.BLACK
    assert board.count_colors() == (4, 1)


def test_all_eight_directions():
    flips = find_flips(STAR, 4, 4, Player.BLACK)
    assert sorted(flips) == [
        (3, 3), (3, 4), (3, 5),
        (4, 3), (4, 5),
        (5, 3), (5, 4), (5, 5),
    ]

    board = STAR.copy()
    apply_move(board, 4, 4, Player.BLACK)
    assert board.count_colors() == (17, 0)


def test_long_run_flips_every_stone():
    board = board_from_rows(".WWWWWWB")
    flips = check_move(board, 0, 0, Player.BLACK)
    assert flips == [(0, c) for c in range(1, 7)]


def test_run_off_board_contributes_nothing():
    board = board_from_rows("WWWWWWW.")
    assert scan_direction(board, 0, 7, 0, -1, Player.BLACK) == []
    with pytest.raises(NoCaptureError):
        check_move(board, 0, 7, Player.BLACK)


def test_run_ending_in_empty_contributes_nothing():
    board = board_from_rows(".WW.B...")
    assert find_flips(board, 0, 0, Player.BLACK) == []


def test_own_stone_first_contributes_nothing():
    # (2, 4) touches black (3, 4) directly; the diagonal through (3, 3) ends in empty
    assert find_flips(Board(), 2, 4, Player.BLACK) == []


def test_only_bracketed_directions_flip():
    board = board_from_rows("BW.WW...")
    flips = find_flips(board, 0, 2, Player.BLACK)
    assert flips == [(0, 1)]


def test_rejects_occupied_cell():
    board = Board()
    with pytest.raises(CellOccupiedError) as exc_info:
        check_move(board, 3, 3, Player.BLACK)
    assert (exc_info.value.row, exc_info.value.col) == (3, 3)


def test_rejects_out_of_range_first():
    for row, col in [(-1, 3), (3, 8), (8, 8)]:
        with pytest.raises(OutOfRangeError):
            check_move(Board(), row, col, Player.BLACK)
    assert not is_valid_move(Board(), 8, 0, Player.BLACK)


def test_rejects_move_without_capture():
    with pytest.raises(NoCaptureError):
        check_move(Board(), 0, 0, Player.BLACK)
    with pytest.raises(NoCaptureError):
        check_move(Board(), 2, 2, Player.BLACK)


def test_move_errors_are_value_errors():
    assert issubclass(NoCaptureError, MoveError)
    assert issubclass(MoveError, ValueError)


def test_rejected_move_leaves_board_unchanged():
    board = Board()
    before = board.copy()
    for row, col in [(3, 3), (0, 0), (9, 1)]:
        with pytest.raises(MoveError):
            apply_move(board, row, col, Player.BLACK)
    assert board == before


def test_has_any_valid_move():
    assert has_any_valid_move(Board(), Player.BLACK)
    assert has_any_valid_move(Board(), Player.WHITE)

    # White cannot bracket a lone black corner stone
    board = board_from_rows("BW......")
    assert has_any_valid_move(board, Player.BLACK)
    assert not has_any_valid_move(board, Player.WHITE)
    assert get_valid_moves(board, Player.WHITE) == []


def test_full_board_has_no_moves():
    board = Board.from_string("\n".join(["BWBWBWBW"] * 8))
    assert not has_any_valid_move(board, Player.BLACK)
    assert not has_any_valid_move(board, Player.WHITE)
