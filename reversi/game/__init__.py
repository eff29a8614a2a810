"""
Reversi game module.
This package contains the core game logic for Reversi.
"""

from .board import Board, Cell, Player
from .errors import (
    CellOccupiedError,
    GameOverError,
    MoveError,
    NoCaptureError,
    OutOfRangeError,
    ReversiError,
)
from .game import GameState, Outcome, ReversiGame, Status, begin_turn, play_move
from .moves import apply_move, check_move, find_flips, get_valid_moves, has_any_valid_move

__all__ = [
    'Board', 'Cell', 'Player',
    'ReversiError', 'MoveError', 'OutOfRangeError', 'CellOccupiedError',
    'NoCaptureError', 'GameOverError',
    'GameState', 'Outcome', 'ReversiGame', 'Status', 'begin_turn', 'play_move',
    'apply_move', 'check_move', 'find_flips', 'get_valid_moves', 'has_any_valid_move',
]
