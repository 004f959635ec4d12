"""
Scorer

Letter-by-letter evaluation of a guess against the secret word.
"""

from collections import Counter
from typing import List

from ..models.game import LetterStatus


def score_guess(secret: str, guess: str) -> List[LetterStatus]:
    """
    Score ``guess`` against ``secret``, one status per position.

    Each letter of the secret can be credited at most once. Guess positions
    claim occurrences from left to right: a position whose letter has no
    unclaimed occurrence left is NOT_IN_WORD, otherwise it takes one and is
    CORRECT when the secret has the same letter at that position and
    IN_WORD when it does not.

    >>> [s.name for s in score_guess("abcde", "xbcaa")]
    ['NOT_IN_WORD', 'CORRECT', 'CORRECT', 'IN_WORD', 'NOT_IN_WORD']

    Raises:
        ValueError: If the two words differ in length
    """
    if len(secret) != len(guess):
        raise ValueError(
            f"Guess length {len(guess)} does not match secret length {len(secret)}"
        )

    remaining = Counter(secret)
    statuses: List[LetterStatus] = []

    for i, letter in enumerate(guess):
        if remaining[letter] == 0:
            statuses.append(LetterStatus.NOT_IN_WORD)
            continue

        remaining[letter] -= 1
        if letter == secret[i]:
            statuses.append(LetterStatus.CORRECT)
        else:
            statuses.append(LetterStatus.IN_WORD)

    return statuses
