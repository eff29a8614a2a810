"""
Move engine for Reversi.
Decides whether a placement is legal and which opponent stones it flips.
"""
from typing import List, Tuple

from .board import Board, Cell, Player
from .errors import CellOccupiedError, NoCaptureError, OutOfRangeError

Position = Tuple[int, int]

# Directions as (row step, col step): N, S, W, E, NW, NE, SW, SE
DIRECTIONS = [
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
]


def scan_direction(board: Board, row: int, col: int, dr: int, dc: int,
                   player: Player) -> List[Position]:
    """
    Collect the opponent stones bracketed from (row, col) along one direction.

    Args:
        board: Board to inspect
        row: Row of the placement
        col: Column of the placement
        dr: Row step
        dc: Column step
        player: The player placing the stone

    Returns:
        Positions that would flip along this direction (empty if none)
    """
    opponent = player.opponent.cell
    run = []
    r, c = row + dr, col + dc
    while Board.in_bounds(r, c):
        cell = board.get(r, c)
        if cell == opponent:
            run.append((r, c))
        elif cell == player.cell:
            return run
        else:
            break
        r += dr
        c += dc
    return []


def find_flips(board: Board, row: int, col: int, player: Player) -> List[Position]:
    """
    Union of the flip sets over all eight directions.

    A non-empty result means the move is legal. Off-board or occupied
    targets have no flips.
    """
    if not Board.in_bounds(row, col) or board.get(row, col) != Cell.EMPTY:
        return []

    flips = []
    for dr, dc in DIRECTIONS:
        flips.extend(scan_direction(board, row, col, dr, dc, player))
    return flips


def check_move(board: Board, row: int, col: int, player: Player) -> List[Position]:
    """
    Validate a move and return its flip set.

    Raises:
        OutOfRangeError: coordinate outside the board
        CellOccupiedError: target cell already holds a stone
        NoCaptureError: no direction brackets an opponent run
    """
    if not Board.in_bounds(row, col):
        raise OutOfRangeError(row, col)
    if board.get(row, col) != Cell.EMPTY:
        raise CellOccupiedError(row, col)

    flips = find_flips(board, row, col, player)
    if not flips:
        raise NoCaptureError(row, col)
    return flips


def is_valid_move(board: Board, row: int, col: int, player: Player) -> bool:
    """Check if a move is valid."""
    return bool(find_flips(board, row, col, player))


def get_valid_moves(board: Board, player: Player) -> List[Position]:
    """
    Get all valid moves for the given player.

    Returns:
        List of (row, col) tuples in row-major order
    """
    return [
        (row, col) for row, col in board.empty_cells()
        if find_flips(board, row, col, player)
    ]


def has_any_valid_move(board: Board, player: Player) -> bool:
    """Check if the player has at least one valid move."""
    return any(
        find_flips(board, row, col, player) for row, col in board.empty_cells()
    )


def apply_move(board: Board, row: int, col: int, player: Player) -> List[Position]:
    """
    Place a stone and flip every bracketed opponent stone.

    The board is left untouched when the move is rejected.

    Returns:
        The flipped positions
    """
    flips = check_move(board, row, col, player)
    board.set(row, col, player.cell)
    for r, c in flips:
        board.set(r, c, player.cell)
    return flips
