"""
Vocabulary Model

An immutable list of fixed-length lowercase words. The same type serves
both roles a game needs: the allowed guesses (membership checks) and the
answer candidates (ordered, drawn from at random).
"""

from typing import FrozenSet, Iterable, Iterator, Tuple

from ..config.game_settings import WORD_LENGTH


class Vocabulary:
    """
    Fixed-length word list with ordered and set views.

    Args:
        words: Words in the order they should be kept
        word_length: Required length of every word

    Raises:
        ValueError: If the list is empty or a word is malformed. A bad word
            list is a setup bug, so this is not meant to be recovered from.
    """

    __slots__ = ("_words", "_members", "_word_length")

    def __init__(self, words: Iterable[str], word_length: int = WORD_LENGTH):
        ordered = tuple(words)
        if not ordered:
            raise ValueError("Word list cannot be empty")

        for index, word in enumerate(ordered):
            if not isinstance(word, str):
                raise ValueError(f"Word at index {index} {word!r} is not a string")
            if len(word) != word_length:
                raise ValueError(
                    f"Word at index {index} '{word}' is not {word_length} characters long"
                )
            if any(char.isspace() for char in word):
                raise ValueError(f"Word at index {index} '{word}' contains whitespace")
            if word != word.lower():
                raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

        self._words: Tuple[str, ...] = ordered
        self._members: FrozenSet[str] = frozenset(ordered)
        self._word_length = word_length

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def word_length(self) -> int:
        return self._word_length

    def __contains__(self, word: object) -> bool:
        return word in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, index: int) -> str:
        return self._words[index]

    def __repr__(self) -> str:
        return f"Vocabulary({len(self._words)} words, word_length={self._word_length})"
