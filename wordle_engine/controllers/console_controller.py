"""
Console Controller

Handles the interactive read/print loop: starting games, prompting for
guesses, re-prompting on invalid ones and printing the colored result.
"""

import sys
from typing import Callable, Dict, Optional, Sequence, TextIO

from ..config.game_settings import MAX_ROUNDS
from ..models.game import LetterStatus, RoundState
from ..services.game_service import GameSession, InvalidGuess
from ..utils.game_logger import game_logger
from ..utils.helpers import is_all_correct, normalize_guess

STATUS_GLYPHS: Dict[LetterStatus, str] = {
    LetterStatus.CORRECT: '🟩',
    LetterStatus.IN_WORD: '🟨',
    LetterStatus.NOT_IN_WORD: '⬛',
}

QUIT_COMMANDS = ('quit', 'exit')


def render_statuses(statuses: Sequence[LetterStatus]) -> str:
    """Map each letter status to its colored square."""
    return ''.join(STATUS_GLYPHS[status] for status in statuses)


class ConsoleController:
    """
    Text-mode game loop on top of a GameSession.

    The session only scores guesses; deciding that a game is won or lost
    happens here.

    Args:
        session: The game engine to play against
        max_rounds: Guesses allowed per game
        input_func: Reads one line given a prompt; raises EOFError when
            input runs out
        output: Stream the game is printed to
    """

    def __init__(self, session: GameSession, max_rounds: int = MAX_ROUNDS,
                 input_func: Callable[[str], str] = input,
                 output: Optional[TextIO] = None):
        if max_rounds < 1:
            raise ValueError("max_rounds must be at least 1")

        self.session = session
        self.max_rounds = max_rounds
        self.input_func = input_func
        self.output = output if output is not None else sys.stdout
        self.games_played = 0
        self.games_won = 0

    def _print(self, text: str = '') -> None:
        print(text, file=self.output)
        self.output.flush()

    def _read_guess(self, state: RoundState) -> Optional[str]:
        """
        Prompt until the session accepts a guess.

        Returns:
            The accepted guess, or None if the player quit, interrupted or
            input ended
        """
        while True:
            prompt = f"Guess {state.current_round + 1}/{state.max_rounds}: "
            try:
                raw = self.input_func(prompt)
            except EOFError:
                return None
            except KeyboardInterrupt:
                # Ctrl-C ends the session like end of input
                self._print()
                return None

            guess = normalize_guess(raw)
            if guess in QUIT_COMMANDS:
                return None

            try:
                statuses = self.session.guess(guess)
            except InvalidGuess as e:
                game_logger.log_rejected_guess(state.game_number, guess, e.message)
                self._print(f"Guess '{guess}' is not valid. {e.message}")
                continue

            state.record(guess, statuses, solved=is_all_correct(statuses))
            game_logger.log_guess(state.game_number, guess, statuses, state.current_round)
            self._print(f"Guess:  {guess}")
            self._print(f"Result: {render_statuses(statuses)}")
            return guess

    def play_game(self) -> Optional[RoundState]:
        """
        Play one game to completion.

        Returns:
            The finished RoundState, or None if the player stopped mid-game
        """
        self.session.choose_word()
        self.games_played += 1
        state = RoundState(game_number=self.games_played, max_rounds=self.max_rounds)

        self._print(f"--- Game {state.game_number} started ---")
        game_logger.log_round_started(state.game_number, state.max_rounds)

        while not state.game_over:
            if self._read_guess(state) is None:
                game_logger.log_game_event(
                    state.game_number, 'game_abandoned', rounds_used=state.current_round
                )
                return None

        if state.won:
            self.games_won += 1
            self._print("Congratulations!")
            game_logger.log_game_event(
                state.game_number, 'game_won',
                rounds_used=state.current_round, winning_guess=state.guesses[-1]
            )
        else:
            self._print("Out of guesses.")
            game_logger.log_game_event(
                state.game_number, 'game_lost', rounds_used=state.current_round
            )

        return state

    def run(self, games: Optional[int] = None) -> int:
        """
        Play games back to back.

        Args:
            games: Number of games to play; None plays until input ends

        Returns:
            Number of games won
        """
        while games is None or self.games_played < games:
            state = self.play_game()
            if state is None:
                break
            self._print()

        game_logger.log_game_event(
            self.games_played, 'session_ended',
            games_played=self.games_played, games_won=self.games_won
        )
        return self.games_won
