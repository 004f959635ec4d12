"""
Game Data Models

Contains the letter evaluation enum and the per-game bookkeeping used by
the console controller.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List


class LetterStatus(Enum):
    """Per-letter evaluation of a guess against the secret word."""
    CORRECT = "CORRECT"          # green square
    IN_WORD = "IN_WORD"          # yellow square
    NOT_IN_WORD = "NOT_IN_WORD"  # gray/black square


# Keyboard display priority, lowest first
_STATUS_PRIORITY = {
    LetterStatus.NOT_IN_WORD: 0,
    LetterStatus.IN_WORD: 1,
    LetterStatus.CORRECT: 2,
}


@dataclass
class RoundState:
    """Client-side record of one game (the engine itself keeps none of this)."""
    game_number: int
    max_rounds: int
    current_round: int = 0
    won: bool = False
    game_over: bool = False
    guesses: List[str] = field(default_factory=list)
    results: List[List[LetterStatus]] = field(default_factory=list)
    letter_status: Dict[str, LetterStatus] = field(default_factory=dict)

    @property
    def guesses_left(self) -> int:
        return self.max_rounds - self.current_round

    def record(self, guess: str, statuses: List[LetterStatus], solved: bool) -> None:
        """
        Store a scored guess and advance the round counter.

        ``solved`` is decided by the caller from the statuses; the game ends
        when it is set or the guess budget runs out.

        The keyboard status of a letter only ever moves up in priority:
        a letter once shown as correct stays correct.
        """
        self.current_round += 1
        self.guesses.append(guess)
        self.results.append(list(statuses))

        for letter, new_status in zip(guess, statuses):
            current = self.letter_status.get(letter)
            if current is None or _STATUS_PRIORITY[new_status] > _STATUS_PRIORITY[current]:
                self.letter_status[letter] = new_status

        if solved:
            self.won = True
            self.game_over = True
        elif self.current_round >= self.max_rounds:
            self.game_over = True
