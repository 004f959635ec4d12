"""
Configuration Package

This package separates two types of configuration:
- app_config.py: runtime configuration (environment-based)
- game_settings.py: game constants and the word list loader
"""

from .app_config import Config, DevelopmentConfig, TestingConfig, config
from .game_settings import (
    DEFAULT_ANSWERS_FILE,
    DEFAULT_GUESSES_FILE,
    MAX_ROUNDS,
    WORD_LENGTH,
    load_word_list,
)

__all__ = [
    # Runtime configuration
    'Config', 'DevelopmentConfig', 'TestingConfig', 'config',
    # Game settings
    'WORD_LENGTH', 'MAX_ROUNDS', 'DEFAULT_GUESSES_FILE', 'DEFAULT_ANSWERS_FILE',
    'load_word_list'
]
