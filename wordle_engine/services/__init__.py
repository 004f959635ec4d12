"""
Services Package

Contains the game engine: the scorer and the per-player game session.
"""

from .game_service import GameNotStarted, GameSession, InvalidGuess
from .scorer import score_guess

__all__ = ['GameSession', 'InvalidGuess', 'GameNotStarted', 'score_guess']
