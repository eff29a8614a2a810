"""
Board module for Reversi.
Holds the 8x8 grid of cells and answers cell queries. No game rules live here.
"""
from enum import IntEnum
from typing import List, Tuple
import numpy as np

from .errors import OutOfRangeError


class Cell(IntEnum):
    """State of a single board cell."""
    EMPTY = 0
    BLACK = 1
    WHITE = 2


class Player(IntEnum):
    """The side to move. Values match the corresponding Cell."""
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> 'Player':
        return Player.WHITE if self is Player.BLACK else Player.BLACK

    @property
    def cell(self) -> Cell:
        return Cell(int(self))

    @property
    def symbol(self) -> str:
        return CELL_SYMBOLS[self.cell]


# Glyphs used when a board is written as text
CELL_SYMBOLS = {Cell.EMPTY: '.', Cell.BLACK: 'B', Cell.WHITE: 'W'}
SYMBOL_CELLS = {symbol: cell for cell, symbol in CELL_SYMBOLS.items()}


class Board:
    """
    Represents the Reversi game board as an 8x8 numpy array of Cell values.
    """

    # Board dimensions
    SIZE = 8
    BOARD_SIZE = SIZE * SIZE

    def __init__(self):
        """Initialize a board in the standard starting position."""
        self._grid = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
        self._grid[3, 3] = Cell.WHITE
        self._grid[4, 4] = Cell.WHITE
        self._grid[3, 4] = Cell.BLACK
        self._grid[4, 3] = Cell.BLACK

    @classmethod
    def from_string(cls, text: str) -> 'Board':
        """
        Build a board from eight lines of '.', 'B' and 'W'.

        Whitespace around and inside lines is ignored, so both
        "..BW...." and ". . B W . . . ." are accepted.

        Args:
            text: Board description, top row first

        Returns:
            A new Board holding exactly the given cells
        """
        rows = [line.replace(' ', '') for line in text.strip().splitlines()]
        rows = [row for row in rows if row]
        if len(rows) != cls.SIZE or any(len(row) != cls.SIZE for row in rows):
            raise ValueError(f"Expected {cls.SIZE} rows of {cls.SIZE} cells")

        board = cls()
        for i, row in enumerate(rows):
            for j, symbol in enumerate(row):
                if symbol not in SYMBOL_CELLS:
                    raise ValueError(f"Unknown cell symbol {symbol!r} at ({i}, {j})")
                board._grid[i, j] = SYMBOL_CELLS[symbol]
        return board

    def to_string(self) -> str:
        """Eight lines of '.', 'B' and 'W', top row first."""
        return "\n".join(
            ''.join(CELL_SYMBOLS[Cell(int(value))] for value in row)
            for row in self._grid
        )

    @classmethod
    def in_bounds(cls, row: int, col: int) -> bool:
        return 0 <= row < cls.SIZE and 0 <= col < cls.SIZE

    def get(self, row: int, col: int) -> Cell:
        """Return the cell at (row, col)."""
        if not self.in_bounds(row, col):
            raise OutOfRangeError(row, col)
        return Cell(int(self._grid[row, col]))

    def set(self, row: int, col: int, cell: Cell) -> None:
        """
        Overwrite the cell at (row, col).

        Only the move engine's apply step calls this; legality is its concern.
        """
        if not self.in_bounds(row, col):
            raise OutOfRangeError(row, col)
        self._grid[row, col] = Cell(cell)

    def count_colors(self) -> Tuple[int, int]:
        """
        Count the stones of each colour.

        Returns:
            Tuple of (black_count, white_count)
        """
        black_count = int(np.count_nonzero(self._grid == Cell.BLACK))
        white_count = int(np.count_nonzero(self._grid == Cell.WHITE))
        return black_count, white_count

    def count_empty(self) -> int:
        return int(np.count_nonzero(self._grid == Cell.EMPTY))

    def empty_cells(self) -> List[Tuple[int, int]]:
        """All empty (row, col) positions in row-major order."""
        rows, cols = np.nonzero(self._grid == Cell.EMPTY)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board.__new__(Board)
        new_board._grid = self._grid.copy()
        return new_board

    def get_board_state(self) -> np.ndarray:
        """
        Get a read-only snapshot of the board.

        Returns:
            8x8 numpy array of Cell values
        """
        snapshot = self._grid.copy()
        snapshot.flags.writeable = False
        return snapshot

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    def __repr__(self) -> str:
        black, white = self.count_colors()
        return f"Board(black={black}, white={white})"
