"""
Wordle Engine Package

Scores five-letter guesses against a secret word with correct
duplicate-letter handling, plus the console game built on top of it.
"""

from .models.game import LetterStatus, RoundState
from .models.vocabulary import Vocabulary
from .services.game_service import GameNotStarted, GameSession, InvalidGuess
from .services.scorer import score_guess

__version__ = '0.1.0'

__all__ = [
    'LetterStatus', 'RoundState', 'Vocabulary',
    'GameSession', 'InvalidGuess', 'GameNotStarted', 'score_guess'
]
