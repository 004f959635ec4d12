"""
Utilities Package

Contains helper functions and the game logger.
"""

from .game_logger import GameLogger, game_logger
from .helpers import is_all_correct, normalize_guess

__all__ = ['GameLogger', 'game_logger', 'is_all_correct', 'normalize_guess']
