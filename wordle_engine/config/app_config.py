"""
Configuration Management Module

All runtime configuration is loaded from environment variables with
sensible defaults. An env file (``config.env`` unless WORDLE_ENV_FILE
points elsewhere) is read first; variables already set in the environment
win over the file.
"""

import os
from typing import Optional

from dotenv import load_dotenv

from .game_settings import DEFAULT_ANSWERS_FILE, DEFAULT_GUESSES_FILE, MAX_ROUNDS

load_dotenv(os.getenv('WORDLE_ENV_FILE', 'config.env'))


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == '':
        return None
    return int(value)


class Config:
    """Base configuration class with all settings."""

    # Word Lists
    GUESSES_FILE = os.getenv('WORDLE_GUESSES_FILE', DEFAULT_GUESSES_FILE)
    ANSWERS_FILE = os.getenv('WORDLE_ANSWERS_FILE', DEFAULT_ANSWERS_FILE)

    # Game Settings
    MAX_ROUNDS = int(os.getenv('MAX_ROUNDS', MAX_ROUNDS))
    SEED = _optional_int(os.getenv('WORDLE_SEED'))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING')
    LOG_DIR = os.getenv('LOG_DIR') or None


class DevelopmentConfig(Config):
    """Development configuration."""
    LOG_LEVEL = 'DEBUG'


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SEED = 0
    LOG_DIR = None


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'default': Config
}
