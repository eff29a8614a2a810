"""
Script for running tournaments between automated Reversi players.
"""
import os
import argparse
from datetime import datetime

from reversi.arena import Arena, RandomPlayer
from reversi.config import load_config
from reversi.logger import setup_logger


def main():
    parser = argparse.ArgumentParser(description='Run a tournament between Reversi players')

    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--players', type=int, default=2,
                        help='Number of random players')
    parser.add_argument('--rounds', type=int, default=None,
                        help='Number of rounds to play (default: arena.num_games)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Base random seed (default: arena.seed)')
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Directory to save tournament results')
    parser.add_argument('--verbose', action='store_true',
                        help='Log every move of every game')

    args = parser.parse_args()

    config = load_config(args.config)
    if args.rounds is not None:
        config.arena.num_games = args.rounds
    if args.seed is not None:
        config.arena.seed = args.seed
    if args.output_dir is not None:
        config.arena.output_dir = args.output_dir
    if args.verbose:
        config.arena.verbose = True

    run_logger = setup_logger(config)

    arena = Arena()
    base_seed = config.arena.seed
    for i in range(args.players):
        seed = None if base_seed is None else base_seed + i
        arena.add_player(RandomPlayer(f"random_{i + 1}", seed=seed))

    print(f"Starting tournament with {config.arena.num_games} rounds...")
    results = arena.run_tournament(rounds=config.arena.num_games,
                                   verbose=config.arena.verbose)
    run_logger.log_metrics({
        'games': results['games_played'],
        'duration': results['duration']
    }, step=config.arena.num_games)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    results_file = os.path.join(config.arena.output_dir, f'tournament_{timestamp}.json')
    arena.save_results(results, results_file)

    print(f"\nTournament completed! Results saved to {results_file}")
    print("\nFinal Leaderboard:")
    print(arena.format_leaderboard())
    run_logger.close()


if __name__ == '__main__':
    main()
