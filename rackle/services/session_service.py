"""
Session Service

Connects the pure game functions to caller-provided storage: loads or creates
the day's game, plays guesses, resets a day, and records each finished day in
the stats exactly once.
"""

from typing import Optional, Sequence, Tuple

from ..config.game_settings import DRAW_PER_ROUND, MAX_ROUNDS, RACK_SIZE_START, WORD_LIST
from ..models.game import GameState, GameStatus
from ..models.stats import Stats
from ..utils.game_logger import game_logger
from .game_service import apply_guess, new_game, validate_guess
from .stats_service import record_finished_game
from .store import STATS_KEY, GameStore, state_key


class GameSession:
    """
    One player's daily games, persisted through an injected ``GameStore``.

    This class handles:
    - Creating the day's puzzle the first time it is requested
    - Validating and applying guesses against the stored rack
    - Counting finished games in the stats record once per day
    """

    def __init__(self,
                 store: GameStore,
                 words: Sequence[str] = WORD_LIST,
                 max_rounds: int = MAX_ROUNDS,
                 rack_size_start: int = RACK_SIZE_START,
                 draw_per_round: int = DRAW_PER_ROUND):
        self.store = store
        self.words = list(words)
        self.word_set = frozenset(self.words)
        self.max_rounds = max_rounds
        self.rack_size_start = rack_size_start
        self.draw_per_round = draw_per_round

    def _fresh_game(self, date_key: str) -> GameState:
        return new_game(
            date_key,
            max_rounds=self.max_rounds,
            rack_size_start=self.rack_size_start,
            draw_per_round=self.draw_per_round,
            words=self.words,
        )

    def save_game(self, state: GameState) -> None:
        self.store.save(state_key(state.date_key), state.to_dict())

    def load_game(self, date_key: str) -> GameState:
        """
        Returns the stored game for a day, creating and saving it on first use.

        Args:
            date_key: Puzzle day

        Returns:
            GameState: Saved or freshly generated state
        """
        record = self.store.load(state_key(date_key))
        if record is not None:
            return GameState.from_dict(record)

        state = self._fresh_game(date_key)
        self.save_game(state)
        game_logger.log_game_event(date_key, 'game_created', rack_size=state.rack.total())
        return state

    def submit_guess(self, date_key: str, word: str) -> Tuple[GameState, Optional[str]]:
        """
        Validates and plays a guess for a day.

        Returns:
            Tuple of (state, error_message). On a rejected guess the stored
            state is returned unchanged together with the reason.
        """
        state = self.load_game(date_key)
        if state.status is not GameStatus.PLAYING:
            return state, None

        error = validate_guess(word, state.rack, self.word_set)
        if error:
            return state, error

        next_state = apply_guess(state, word)
        self.save_game(next_state)

        if next_state.status is not GameStatus.PLAYING:
            self.save_stats(record_finished_game(self.load_stats(), next_state))
            game_logger.log_game_event(
                date_key,
                'game_won' if next_state.status is GameStatus.WON else 'game_lost',
                rounds_used=len(next_state.guesses),
                final_guess=word.strip().upper(),
            )

        return next_state, None

    def reset_game(self, date_key: str) -> GameState:
        """Replaces the stored game for a day with a fresh one. Stats are left alone."""
        state = self._fresh_game(date_key)
        self.save_game(state)
        game_logger.log_game_event(date_key, 'game_reset')
        return state

    def load_stats(self) -> Stats:
        return Stats.from_dict(self.store.load(STATS_KEY))

    def save_stats(self, stats: Stats) -> None:
        self.store.save(STATS_KEY, stats.to_dict())
