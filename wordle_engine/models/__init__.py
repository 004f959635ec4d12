"""
Data Models Package

Contains all data models used by the engine and its console front end.
"""

from .game import LetterStatus, RoundState
from .vocabulary import Vocabulary

__all__ = ['LetterStatus', 'RoundState', 'Vocabulary']
