import random

import pytest

from wordle_engine.models.vocabulary import Vocabulary
from wordle_engine.services.game_service import GameSession
from wordle_engine.utils.game_logger import game_logger

GUESS_WORDS = ["crane", "slate", "trace", "abbey", "abcde", "xbcaa", "aabcd"]
ANSWER_WORDS = ["crane"]


@pytest.fixture(autouse=True)
def reset_game_logger():
    yield
    # drop any file handler a test installed
    game_logger.configure()


@pytest.fixture
def guesses():
    return Vocabulary(GUESS_WORDS)


@pytest.fixture
def answers():
    return Vocabulary(ANSWER_WORDS)


@pytest.fixture
def session(guesses, answers):
    """A session whose only possible secret is 'crane'."""
    return GameSession(guesses, answers, rng=random.Random(0))


@pytest.fixture
def word_file(tmp_path):
    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


def scripted_input(lines):
    """input() replacement that replays ``lines`` then signals EOF."""
    remaining = iter(lines)
    prompts = []

    def _read(prompt):
        prompts.append(prompt)
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    _read.prompts = prompts
    return _read
