"""
Exceptions raised by the Reversi engine.
"""


class ReversiError(Exception):
    """Base class for all engine errors."""


class MoveError(ReversiError, ValueError):
    """A move was rejected. The game state is left unchanged."""

    def __init__(self, row: int, col: int, message: str):
        super().__init__(f"{message}: ({row}, {col})")
        self.row = row
        self.col = col


class OutOfRangeError(MoveError):
    def __init__(self, row: int, col: int):
        super().__init__(row, col, "Coordinate outside the board")


class CellOccupiedError(MoveError):
    def __init__(self, row: int, col: int):
        super().__init__(row, col, "Cell is already occupied")


class NoCaptureError(MoveError):
    def __init__(self, row: int, col: int):
        super().__init__(row, col, "Move does not capture any stone")


class GameOverError(ReversiError):
    """Raised when a transition is attempted on a finished game."""
