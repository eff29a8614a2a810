"""
Play a two-player Reversi game in the terminal.

Moves are typed as two letters, row then column, e.g. "cd".
"""
import argparse
import logging

from reversi.config import load_config
from reversi.console import ConsolePlayer, format_outcome, render_board
from reversi.game import ReversiGame
from reversi.logger import setup_logger

logger = logging.getLogger(__name__)


def play(game: ReversiGame, player: ConsolePlayer, output_fn=print):
    """
    Run ``game`` to the end, reading every move from ``player``.

    Returns:
        The final Outcome
    """
    def on_move(state):
        output_fn(render_board(state.board))

    def on_pass(passed):
        output_fn(f"{passed.symbol} player has no valid move.")

    def on_reject(error):
        logger.debug("Rejected: %s", error)
        output_fn("Invalid move. Try again.")
        output_fn(render_board(game.state.board))

    output_fn(render_board(game.state.board))
    outcome = game.run(player, on_move=on_move, on_pass=on_pass, on_reject=on_reject)
    output_fn(format_outcome(outcome))
    return outcome


def main():
    parser = argparse.ArgumentParser(description='Play Reversi in the terminal')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--show-moves', action='store_true',
                        help='List the legal moves before each prompt')
    args = parser.parse_args()

    config = load_config(args.config)
    if args.show_moves:
        config.play.show_valid_moves = True

    run_logger = setup_logger(config)
    try:
        play(ReversiGame(), ConsolePlayer(show_valid_moves=config.play.show_valid_moves))
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted.")
    finally:
        run_logger.close()


if __name__ == "__main__":
    main()
