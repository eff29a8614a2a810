"""
Arena for running games between automated move providers.
"""
import os
import random
import json
import time
import logging
from datetime import datetime
from typing import List, Dict, Tuple, Optional, Any
from tqdm import tqdm

from ..game import GameState, Outcome, Player, ReversiGame, get_valid_moves
from ..console import format_move, format_outcome, render_board

logger = logging.getLogger(__name__)


class RandomPlayer:
    """Plays a uniformly random legal move."""

    def __init__(self, player_id: str, seed: Optional[int] = None):
        """
        Initialize a random player.

        Args:
            player_id: Unique identifier for the player
            seed: Seed for the player's own random generator
        """
        self.player_id = player_id
        self.seed = seed
        self.rng = random.Random(seed)

    def get_move(self, state: GameState) -> Tuple[int, int]:
        """Get the next move for the current game state."""
        valid_moves = get_valid_moves(state.board, state.current_player)
        return self.rng.choice(valid_moves)

    def reset(self):
        """Restart the random sequence."""
        self.rng = random.Random(self.seed)


class Arena:
    """Arena for running round-robin tournaments between players."""

    def __init__(self):
        self.players: Dict[str, Any] = {}
        self.stats: Dict[str, Dict[str, int]] = {}

    def add_player(self, player):
        """Add a player to the arena."""
        self.players[player.player_id] = player
        self.stats.setdefault(player.player_id, self._empty_stats())

    @staticmethod
    def _empty_stats() -> Dict[str, int]:
        return {
            'games_played': 0,
            'wins': 0,
            'losses': 0,
            'draws': 0,
            'margin': 0
        }

    def reset_stats(self):
        """Clear the per-player tallies."""
        self.stats = {player_id: self._empty_stats() for player_id in self.players}

    def play_game(self, black_id: str, white_id: str, verbose: bool = False) -> Outcome:
        """
        Play a single game between two players.

        Args:
            black_id: ID of the player moving first
            white_id: ID of the second player
            verbose: Whether to log the board after every move

        Returns:
            The final Outcome
        """
        if black_id not in self.players or white_id not in self.players:
            raise ValueError(f"One or both players not found: {black_id}, {white_id}")

        sides = {Player.BLACK: self.players[black_id], Player.WHITE: self.players[white_id]}

        def get_move(state: GameState) -> Tuple[int, int]:
            return sides[state.current_player].get_move(state)

        def on_move(state: GameState):
            if verbose:
                last = state.move_history[-1]
                logger.info("%s plays %s\n%s", last['player'].name,
                            format_move(*last['move']), render_board(state.board))

        game = ReversiGame()
        outcome = game.run(get_move, on_move=on_move)

        if verbose:
            logger.info("%s (Black) vs %s (White): %s", black_id, white_id, format_outcome(outcome))

        self._record(black_id, white_id, outcome)
        return outcome

    def _record(self, black_id: str, white_id: str, outcome: Outcome):
        """Update per-player tallies after a game."""
        for player_id, side in ((black_id, Player.BLACK), (white_id, Player.WHITE)):
            stats = self.stats[player_id]
            stats['games_played'] += 1
            if outcome.winner is None:
                stats['draws'] += 1
            elif outcome.winner is side:
                stats['wins'] += 1
                stats['margin'] += outcome.margin
            else:
                stats['losses'] += 1
                stats['margin'] -= outcome.margin

    def run_tournament(self, rounds: int = 1, verbose: bool = False,
                       show_progress: bool = True) -> Dict:
        """
        Run a round-robin tournament between all players.

        Args:
            rounds: Number of rounds (each pair plays this many times)
            verbose: Whether to log every game
            show_progress: Whether to show a progress bar

        Returns:
            Dictionary with tournament results
        """
        player_ids = list(self.players.keys())
        num_players = len(player_ids)

        if num_players < 2:
            raise ValueError("Need at least 2 players for a tournament")

        # Each tournament reports its own leaderboard
        self.reset_stats()
        for player in self.players.values():
            player.reset()

        results = {
            'games_played': 0,
            'matchups': {},
            'start_time': time.time(),
            'end_time': None,
            'games': []
        }

        pairings = []
        for i in range(num_players):
            for j in range(i + 1, num_players):
                p1, p2 = player_ids[i], player_ids[j]
                results['matchups'][f"{p1}_vs_{p2}"] = {
                    'player1': p1,
                    'player2': p2,
                    'games_played': 0,
                    'wins1': 0,
                    'wins2': 0,
                    'draws': 0
                }
                pairings.append((p1, p2))

        with tqdm(total=rounds * len(pairings), desc="Games", disable=not show_progress) as progress:
            for round_num in range(rounds):
                for p1, p2 in pairings:
                    # Alternate who goes first
                    black, white = (p1, p2) if round_num % 2 == 0 else (p2, p1)
                    outcome = self.play_game(black, white, verbose=verbose)

                    matchup = results['matchups'][f"{p1}_vs_{p2}"]
                    matchup['games_played'] += 1
                    results['games_played'] += 1

                    winner_id = None
                    if outcome.winner is Player.BLACK:
                        winner_id = black
                    elif outcome.winner is Player.WHITE:
                        winner_id = white

                    if winner_id is None:
                        matchup['draws'] += 1
                    elif winner_id == p1:
                        matchup['wins1'] += 1
                    else:
                        matchup['wins2'] += 1

                    results['games'].append({
                        'round': round_num + 1,
                        'black': black,
                        'white': white,
                        'black_count': outcome.black_count,
                        'white_count': outcome.white_count,
                        'winner': winner_id
                    })
                    progress.update(1)

        results['end_time'] = time.time()
        results['duration'] = results['end_time'] - results['start_time']
        results['leaderboard'] = self.get_leaderboard()
        return results

    def get_leaderboard(self) -> List[Dict]:
        """Players sorted by points (win 1, draw 0.5), then total margin."""
        leaderboard = []
        for player_id, stats in self.stats.items():
            leaderboard.append({
                'player_id': player_id,
                'points': stats['wins'] + 0.5 * stats['draws'],
                **stats
            })
        leaderboard.sort(key=lambda x: (x['points'], x['margin']), reverse=True)
        return leaderboard

    def format_leaderboard(self) -> str:
        lines = [
            "Rank  Player ID               Points  Games  Margin",
            "----  ---------------------  ------  -----  ------",
        ]
        for i, entry in enumerate(self.get_leaderboard(), 1):
            lines.append(f"{i:4d}  {entry['player_id']:22s}  {entry['points']:6.1f}  "
                         f"{entry['games_played']:5d}  {entry['margin']:6d}")
        return "\n".join(lines)

    def save_results(self, results: Dict, filepath: str):
        """Save tournament results to a JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump({
                'saved_at': datetime.now().isoformat(),
                **results
            }, f, indent=2)
