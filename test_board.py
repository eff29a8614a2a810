"""
Tests for the Reversi board model.
"""
import numpy as np
import pytest

from reversi.game.board import Board, Cell, Player
from reversi.game.errors import OutOfRangeError


def test_initial_board():
    """Test the initial board setup."""
    board = Board()

    assert board.get(3, 3) == Cell.WHITE
    assert board.get(4, 4) == Cell.WHITE
    assert board.get(3, 4) == Cell.BLACK
    assert board.get(4, 3) == Cell.BLACK
    assert board.count_colors() == (2, 2)
    assert board.count_empty() == 60, "Should have 60 empty squares initially"


def test_get_out_of_range():
    """Coordinates outside [0, 8) are rejected."""
    board = Board()
    for row, col in [(-1, 0), (0, -1), (8, 0), (0, 8), (10, 10)]:
        with pytest.raises(OutOfRangeError):
            board.get(row, col)
    with pytest.raises(OutOfRangeError):
        board.set(8, 8, Cell.BLACK)


def test_set_and_count():
    board = Board()
    board.set(0, 0, Cell.BLACK)
    board.set(3, 3, Cell.BLACK)

    assert board.get(0, 0) == Cell.BLACK
    assert board.count_colors() == (4, 1)
    assert sum(board.count_colors()) + board.count_empty() == Board.BOARD_SIZE


def test_from_string_round_trip():
    text = "\n".join([
        "B.......",
        "........",
        "........",
        "...WB...",
        "...BW...",
        "........",
        "........",
        ".......W",
    ])
    board = Board.from_string(text)

    assert board.get(0, 0) == Cell.BLACK
    assert board.get(7, 7) == Cell.WHITE
    assert board.count_colors() == (3, 3)
    assert board.to_string() == text


def test_from_string_rejects_bad_input():
    with pytest.raises(ValueError):
        Board.from_string("........\n........")
    with pytest.raises(ValueError):
        Board.from_string("\n".join(["X......."] + ["........"] * 7))


def test_copy_is_independent():
    board = Board()
    clone = board.copy()
    clone.set(0, 0, Cell.WHITE)

    assert board.get(0, 0) == Cell.EMPTY
    assert board != clone
    assert board == Board()


def test_board_state_snapshot_is_read_only():
    board = Board()
    state = board.get_board_state()

    assert state.shape == (8, 8), "Board should be 8x8"
    assert np.sum(state == Cell.EMPTY) == 60
    with pytest.raises(ValueError):
        state[0, 0] = Cell.BLACK
    assert board.get(0, 0) == Cell.EMPTY


def test_player_helpers():
    assert Player.BLACK.opponent is Player.WHITE
    assert Player.WHITE.opponent is Player.BLACK
    assert Player.BLACK.cell is Cell.BLACK
    assert Player.WHITE.symbol == 'W'


def test_empty_cells_row_major():
    board = Board.from_string("\n".join(["BBBBBBBB"] * 7 + ["WWWWWW.."]))
    assert board.empty_cells() == [(7, 6), (7, 7)]
