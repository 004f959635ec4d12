"""
Game Service

Contains the round lifecycle for a single player: secret word selection
and guess validation, with scoring delegated to the scorer.
"""

import logging
import random
from typing import Iterable, List, Optional, Tuple, Union

from ..models.game import LetterStatus
from ..models.vocabulary import Vocabulary
from .scorer import score_guess

logger = logging.getLogger(__name__)

WordSource = Union[Vocabulary, Iterable[str]]


class InvalidGuess(ValueError):
    """A guess that cannot be scored. The round continues unchanged."""

    def __init__(self, word, message: str):
        super().__init__(message)
        self.word = word
        self.message = message


class GameNotStarted(RuntimeError):
    """Raised when a guess is made before any secret word was chosen."""


def _as_vocabulary(words: WordSource) -> Vocabulary:
    if isinstance(words, Vocabulary):
        return words
    return Vocabulary(words)


class GameSession:
    """
    One player's game engine.

    This class handles:
    - Holding the allowed guesses and the answer candidates
    - Choosing the secret word for each round
    - Validating and scoring guesses without ever exposing the answer

    A session is not thread-safe; use one per game or serialize access.

    Args:
        guesses: Words accepted as guesses
        answers: Candidate secret words, drawn uniformly with replacement
        rng: Random source; pass a seeded ``random.Random`` for
            reproducible games

    Raises:
        ValueError: If either vocabulary is empty or malformed, or the two
            vocabularies have different word lengths
    """

    def __init__(self, guesses: WordSource, answers: WordSource,
                 rng: Optional[random.Random] = None):
        self.guesses = _as_vocabulary(guesses)
        self.answers = _as_vocabulary(answers)

        if self.guesses.word_length != self.answers.word_length:
            raise ValueError(
                f"Guess words have {self.guesses.word_length} letters "
                f"but answer words have {self.answers.word_length}"
            )

        self._rng = rng if rng is not None else random.Random()
        self._secret: Optional[str] = None

    @property
    def word_length(self) -> int:
        return self.answers.word_length

    @property
    def has_secret(self) -> bool:
        """Whether a round has been started with ``choose_word``."""
        return self._secret is not None

    def choose_word(self) -> None:
        """Select the next secret word to play against."""
        self._secret = self._rng.choice(self.answers.words)
        logger.debug("New secret word chosen from %d answers", len(self.answers))

    def is_valid_guess(self, word) -> Tuple[bool, str]:
        """
        Validates a guess without scoring it.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not word or not isinstance(word, str):
            return False, "Guess must be a valid string"

        if any(char.isspace() for char in word):
            return False, "Guess cannot contain whitespace characters"

        if len(word) != self.word_length:
            return False, f"Guess must be exactly {self.word_length} letters"

        if word not in self.guesses:
            return False, "Word not in word list"

        return True, ""

    def guess(self, word: str) -> List[LetterStatus]:
        """
        Guess a word and get back the status of each of its letters.

        Args:
            word: The guessed word, already lowercased

        Returns:
            One LetterStatus per position of the guess

        Raises:
            InvalidGuess: If the word is malformed or not an allowed guess.
                Nothing about the round changes.
            GameNotStarted: If ``choose_word`` has never been called
        """
        is_valid, error = self.is_valid_guess(word)
        if not is_valid:
            logger.debug("Rejected guess %r: %s", word, error)
            raise InvalidGuess(word, error)

        if self._secret is None:
            raise GameNotStarted("Game not initialized: call choose_word() first")

        return score_guess(self._secret, word)
