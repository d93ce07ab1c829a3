"""
Services Package

Contains the puzzle engine and the services built on top of it.
"""

from .game_service import (
    RackConfigurationError,
    apply_guess, build_initial_rack, count_rack, current_date_key, keyboard_view,
    new_game, overall_letter_knowledge, pick_answer, score_guess, share_text,
    validate_guess
)
from .session_service import GameSession
from .stats_service import record_finished_game, win_percentage
from .store import GameStore, MemoryStore

__all__ = [
    'RackConfigurationError',
    'apply_guess', 'build_initial_rack', 'count_rack', 'current_date_key', 'keyboard_view',
    'new_game', 'overall_letter_knowledge', 'pick_answer', 'score_guess', 'share_text',
    'validate_guess',
    'GameSession',
    'record_finished_game', 'win_percentage',
    'GameStore', 'MemoryStore'
]
