"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Puzzle rules, seed salt and the word list
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LIST, WORD_SET, MAX_ROUNDS, RACK_SIZE_START, DRAW_PER_ROUND,
    validate_word_list_integrity
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LIST', 'WORD_SET', 'MAX_ROUNDS', 'RACK_SIZE_START', 'DRAW_PER_ROUND',
    'validate_word_list_integrity'
]
