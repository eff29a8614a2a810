"""
Reversi game module.
Handles turn order, passes and game termination.
"""
import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from .board import Board, Player
from .errors import GameOverError, MoveError
from .moves import Position, apply_move, get_valid_moves, has_any_valid_move

logger = logging.getLogger(__name__)

# Recorded in the move history for a forced pass
PASS = (-1, -1)


class Status(Enum):
    TO_MOVE = "to_move"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Outcome:
    """Final stone counts and the result derived from them."""
    black_count: int
    white_count: int

    @property
    def winner(self) -> Optional[Player]:
        """Player.BLACK, Player.WHITE, or None for a draw."""
        if self.black_count > self.white_count:
            return Player.BLACK
        if self.white_count > self.black_count:
            return Player.WHITE
        return None

    @property
    def margin(self) -> int:
        return abs(self.black_count - self.white_count)

    @property
    def is_draw(self) -> bool:
        return self.winner is None


@dataclass
class GameState:
    """
    Everything one game owns.

    Transition functions never mutate a GameState; they return a new one.
    """
    board: Board = field(default_factory=Board)
    current_player: Player = Player.BLACK
    pass_count: int = 0
    turn: int = 0
    outcome: Optional[Outcome] = None
    move_history: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def status(self) -> Status:
        return Status.GAME_OVER if self.outcome is not None else Status.TO_MOVE

    @property
    def is_game_over(self) -> bool:
        return self.outcome is not None

    def copy(self) -> 'GameState':
        return replace(self, board=self.board.copy(), move_history=list(self.move_history))


def compute_outcome(board: Board) -> Outcome:
    """Compare stone counts. The larger count wins by the difference."""
    black_count, white_count = board.count_colors()
    return Outcome(black_count, white_count)


def begin_turn(state: GameState) -> GameState:
    """
    Resolve the start of a turn for the current player.

    If the player has a legal move the pass counter is reset and the
    returned state waits for a move. Otherwise the player passes; a second
    consecutive pass ends the game.
    """
    if state.is_game_over:
        raise GameOverError("The game is already over")

    player = state.current_player
    if has_any_valid_move(state.board, player):
        if state.pass_count == 0:
            return state
        return replace(state, pass_count=0)

    new_state = state.copy()
    new_state.pass_count += 1
    new_state.turn += 1
    new_state.move_history.append({'player': player, 'move': PASS, 'flipped': []})
    logger.debug("%s has no valid move and passes", player.name)

    if new_state.pass_count >= 2:
        new_state.outcome = compute_outcome(new_state.board)
        logger.info(
            "Game over after %d turns: black=%d white=%d",
            new_state.turn, new_state.outcome.black_count, new_state.outcome.white_count
        )
    else:
        new_state.current_player = player.opponent
    return new_state


def play_move(state: GameState, row: int, col: int) -> GameState:
    """
    Place a stone for the current player.

    Raises:
        MoveError: the move is illegal; ``state`` is unchanged
        GameOverError: the game has already finished
    """
    if state.is_game_over:
        raise GameOverError("The game is already over")

    player = state.current_player
    board = state.board.copy()
    flipped = apply_move(board, row, col, player)

    logger.debug("%s plays (%d, %d), flipping %d", player.name, row, col, len(flipped))
    return replace(
        state,
        board=board,
        current_player=player.opponent,
        pass_count=0,
        turn=state.turn + 1,
        move_history=state.move_history + [
            {'player': player, 'move': (row, col), 'flipped': flipped}
        ],
    )


MoveProvider = Callable[[GameState], Tuple[int, int]]


class ReversiGame:
    """
    Main game class for Reversi that owns one GameState and drives the loop.
    """

    def __init__(self, state: Optional[GameState] = None):
        """
        Initialize a new Reversi game.

        Args:
            state: Position to start from (default: the standard opening)
        """
        self.state = state if state is not None else GameState()

    def advance(self) -> bool:
        """
        Resolve passes for the current player.

        Returns:
            True if the current player now has to move, False if the turn
            was passed or the game ended
        """
        previous_turn = self.state.turn
        self.state = begin_turn(self.state)
        return self.state.turn == previous_turn

    def make_move(self, row: int, col: int) -> List[Position]:
        """
        Make a move for the current player.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            The flipped positions

        Raises:
            MoveError: the move was rejected and nothing changed
        """
        self.state = play_move(self.state, row, col)
        return self.state.move_history[-1]['flipped']

    def run(self,
            get_move: MoveProvider,
            on_move: Optional[Callable[[GameState], None]] = None,
            on_pass: Optional[Callable[[Player], None]] = None,
            on_reject: Optional[Callable[[MoveError], None]] = None) -> Outcome:
        """
        Play the game to the end.

        Args:
            get_move: Called once per turn that needs a move; returns (row, col)
            on_move: Called with the new state after every accepted move
            on_pass: Called with the player who had to pass
            on_reject: Called with the error when a move is rejected

        Returns:
            The final Outcome
        """
        while not self.is_game_over():
            player = self.state.current_player
            if not self.advance():
                if on_pass is not None:
                    on_pass(player)
                continue

            row, col = get_move(self.state)
            try:
                self.make_move(row, col)
            except MoveError as e:
                logger.debug("Rejected move for %s: %s", player.name, e)
                if on_reject is not None:
                    on_reject(e)
                continue

            if on_move is not None:
                on_move(self.state)

        return self.state.outcome

    def get_valid_moves(self) -> List[Position]:
        """Get all valid moves for the current player."""
        return get_valid_moves(self.state.board, self.state.current_player)

    def is_game_over(self) -> bool:
        return self.state.is_game_over

    def get_outcome(self) -> Optional[Outcome]:
        return self.state.outcome

    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            Player.BLACK, Player.WHITE, or None for a draw or a running game
        """
        return self.state.outcome.winner if self.state.outcome else None

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).
        """
        return self.state.board.count_colors()

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a read-only numpy array.
        """
        return self.state.board.get_board_state()

    def get_current_player(self) -> Player:
        return self.state.current_player

    def get_pass_count(self) -> int:
        return self.state.pass_count

    def get_turn(self) -> int:
        return self.state.turn

    def get_move_history(self) -> List[Dict[str, Any]]:
        """
        Get the move history.

        Returns:
            List of dictionaries with player, move and flipped positions;
            passes are recorded with move (-1, -1)
        """
        return list(self.state.move_history)
