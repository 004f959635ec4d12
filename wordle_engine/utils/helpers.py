"""
Helper Functions

Small utilities shared by the console front end.
"""

from typing import Sequence

from ..models.game import LetterStatus


def normalize_guess(raw: str) -> str:
    """Trim surrounding whitespace and lowercase user input."""
    return raw.strip().lower()


def is_all_correct(statuses: Sequence[LetterStatus]) -> bool:
    """Whether a scored guess is the winning one."""
    return bool(statuses) and all(status is LetterStatus.CORRECT for status in statuses)
