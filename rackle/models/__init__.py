"""
Data Models Package

Contains all data models and record layouts used throughout the application.
"""

from .game import GameState, GameStatus, Guess, Rack, TileStatus
from .stats import Stats

__all__ = ['GameState', 'GameStatus', 'Guess', 'Rack', 'TileStatus', 'Stats']
