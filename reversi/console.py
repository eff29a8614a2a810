"""
Console collaborator for Reversi.
Maps letter coordinates to board positions and formats boards and results
as text. The engine itself knows nothing about this layout.
"""
from typing import Callable, Optional, Tuple

from .game import Board, Cell, GameState, Outcome, Player, get_valid_moves
from .game.board import CELL_SYMBOLS

LETTERS = 'abcdefgh'


def parse_move(text: str) -> Optional[Tuple[int, int]]:
    """
    Parse a two-letter move such as "cd" into (row, col).

    Both letters run from 'a' to 'h'. Returns None for anything else.
    """
    if len(text) != 2:
        return None
    row, col = LETTERS.find(text[0]), LETTERS.find(text[1])
    if row < 0 or col < 0:
        return None
    return row, col


def format_move(row: int, col: int) -> str:
    return f"{LETTERS[row]}{LETTERS[col]}"


def render_board(board: Board) -> str:
    """Column letters on top, row letters on the left."""
    lines = ["  " + LETTERS[:Board.SIZE]]
    for i, row in enumerate(board.get_board_state()):
        cells = ''.join(CELL_SYMBOLS[Cell(int(value))] for value in row)
        lines.append(f"{LETTERS[i]} {cells}")
    return "\n".join(lines)


def format_outcome(outcome: Outcome) -> str:
    if outcome.winner is Player.BLACK:
        return f"Black wins by {outcome.margin} points!"
    if outcome.winner is Player.WHITE:
        return f"White wins by {outcome.margin} points!"
    return "Draw!"


class ConsolePlayer:
    """Reads moves typed as two letters (row then column)."""

    def __init__(self,
                 input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print,
                 show_valid_moves: bool = False):
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.show_valid_moves = show_valid_moves

    def __call__(self, state: GameState) -> Tuple[int, int]:
        return self.get_move(state)

    def get_move(self, state: GameState) -> Tuple[int, int]:
        """Prompt until the text parses. EOFError propagates to the caller."""
        symbol = state.current_player.symbol
        if self.show_valid_moves:
            moves = get_valid_moves(state.board, state.current_player)
            self.output_fn("Valid moves: " + ' '.join(format_move(r, c) for r, c in moves))

        while True:
            text = self.input_fn(f"Enter move for colour {symbol} (RowCol): ")
            move = parse_move(text.strip())
            if move is not None:
                return move
            self.output_fn("Invalid move. Try again.")
            self.output_fn(render_board(state.board))
