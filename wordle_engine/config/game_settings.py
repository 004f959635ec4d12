"""
Game Configuration Constants Module

Fixed game parameters and the word list loader. The word lists themselves
are data files: one word per line, or a JSON array of words.
"""

import json
import os
from typing import Final, List

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letters in every secret word and every guess.
"""

MAX_ROUNDS: Final[int] = 6
"""
Default number of guess attempts allowed per game.
"""

DATA_DIR: Final[str] = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'data'
)
DEFAULT_GUESSES_FILE: Final[str] = os.path.join(DATA_DIR, 'guesses.txt')
DEFAULT_ANSWERS_FILE: Final[str] = os.path.join(DATA_DIR, 'answers.txt')


def _read_words(path: str) -> List[str]:
    with open(path, 'r', encoding='utf-8') as f:
        if path.lower().endswith('.json'):
            word_list = json.load(f)
            if not isinstance(word_list, list):
                raise ValueError("JSON file must contain an array of words")
            if not all(isinstance(word, str) for word in word_list):
                raise ValueError("JSON word list must contain only strings")
        else:
            word_list = f.read().splitlines()

    # skip blank lines
    return [word.strip().lower() for word in word_list if word.strip()]


def load_word_list(path: str, word_length: int = WORD_LENGTH):
    """
    Load a vocabulary from a word list file.

    Args:
        path: Text file with one word per line, or a ``.json`` file holding
            an array of words
        word_length: Required length of every word

    Returns:
        Vocabulary: The words in file order, lowercased

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If a JSON file is malformed
        ValueError: If the list is empty or contains a malformed word
    """
    from ..models.vocabulary import Vocabulary

    try:
        words = _read_words(path)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {path}")

    if not words:
        raise ValueError(f"Word list cannot be empty: {path}")

    try:
        return Vocabulary(words, word_length)
    except ValueError as e:
        raise ValueError(f"Invalid word list {path}: {e}") from e
