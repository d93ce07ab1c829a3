"""
Stats Service

Folds finished daily games into the player's cumulative stats record.
"""

from dataclasses import replace

from ..models.game import GameState, GameStatus
from ..models.stats import Stats


def record_finished_game(stats: Stats, state: GameState) -> Stats:
    """
    Counts a finished game once.

    Games still in play, and days already counted (``last_played_key``), leave
    the stats untouched. A win extends the streak and the win distribution
    under the number of rounds used; a loss resets the current streak.

    Returns:
        Stats: New stats record; ``stats`` itself is not modified
    """
    if state.status is GameStatus.PLAYING:
        return stats
    if stats.last_played_key == state.date_key:
        return stats

    updated = replace(
        stats,
        played=stats.played + 1,
        last_played_key=state.date_key,
        win_dist=dict(stats.win_dist),
    )

    if state.status is GameStatus.WON:
        updated.wins += 1
        updated.current_streak += 1
        updated.max_streak = max(updated.max_streak, updated.current_streak)
        rounds = str(len(state.guesses))
        updated.win_dist[rounds] = updated.win_dist.get(rounds, 0) + 1
    else:
        updated.current_streak = 0

    return updated


def win_percentage(stats: Stats) -> int:
    if not stats.played:
        return 0
    return round(stats.wins / stats.played * 100)
