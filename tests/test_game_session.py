import random

import pytest

from wordle_engine.models.game import LetterStatus
from wordle_engine.models.vocabulary import Vocabulary
from wordle_engine.services.game_service import GameNotStarted, GameSession, InvalidGuess

C = LetterStatus.CORRECT
I = LetterStatus.IN_WORD
N = LetterStatus.NOT_IN_WORD


def test_new_session_has_no_secret(session):
    assert not session.has_secret
    assert session.word_length == 5


def test_guess_before_choose_word(session):
    with pytest.raises(GameNotStarted):
        session.guess("crane")


def test_choose_word_starts_round(session):
    session.choose_word()
    assert session.has_secret
    assert session.guess("crane") == [C] * 5
    assert session.guess("trace") == [N, C, C, I, C]


def test_secret_is_not_public(session):
    session.choose_word()
    public = {name for name in dir(session) if not name.startswith("_")}
    assert public.isdisjoint({"secret", "word", "answer", "target_word"})


def test_choose_word_uses_injected_rng():
    answers = ["crane", "slate", "trace"]
    for seed in range(10):
        session = GameSession(answers, answers, rng=random.Random(seed))
        session.choose_word()
        expected = random.Random(seed).choice(tuple(answers))
        assert session.guess(expected) == [C] * 5


def test_choose_word_repeatedly():
    answers = ["crane", "slate"]
    rng = random.Random(42)
    reference = random.Random(42)
    session = GameSession(answers, answers, rng=rng)
    for _ in range(20):
        session.choose_word()
        assert session.guess(reference.choice(tuple(answers))) == [C] * 5


def test_accepts_plain_word_lists():
    session = GameSession(["abcde", "xbcaa"], ["abcde"])
    assert isinstance(session.guesses, Vocabulary)
    assert isinstance(session.answers, Vocabulary)


def test_shares_vocabularies(guesses, answers):
    session = GameSession(guesses, answers)
    assert session.guesses is guesses
    assert session.answers is answers


@pytest.mark.parametrize("guesses, answers", [
    ([], ["crane"]),
    (["crane"], []),
])
def test_empty_vocabulary(guesses, answers):
    with pytest.raises(ValueError, match="cannot be empty"):
        GameSession(guesses, answers)


def test_mismatched_word_lengths():
    with pytest.raises(ValueError, match="letters"):
        GameSession(Vocabulary(["abcd"], word_length=4), ["crane"])


def test_invalid_guess_keeps_round():
    session = GameSession(["abcde", "xbcaa"], ["abcde"])
    session.choose_word()

    with pytest.raises(InvalidGuess) as exc_info:
        session.guess("zzzzz")
    assert exc_info.value.word == "zzzzz"
    assert exc_info.value.message == "Word not in word list"

    assert session.guess("xbcaa") == [N, C, C, I, N]


@pytest.mark.parametrize("word, message", [
    ("cran", "Guess must be exactly 5 letters"),
    ("cranes", "Guess must be exactly 5 letters"),
    ("cr ne", "Guess cannot contain whitespace characters"),
    ("crane\n", "Guess cannot contain whitespace characters"),
    ("", "Guess must be a valid string"),
    (None, "Guess must be a valid string"),
    (12345, "Guess must be a valid string"),
    ("CRANE", "Word not in word list"),
])
def test_malformed_guesses_are_recoverable(session, word, message):
    session.choose_word()
    with pytest.raises(InvalidGuess, match=message):
        session.guess(word)
    assert session.guess("crane") == [C] * 5


def test_shape_validation_precedes_round_check(session):
    with pytest.raises(InvalidGuess):
        session.guess("cran")


def test_invalid_guess_is_a_value_error(session):
    session.choose_word()
    with pytest.raises(ValueError):
        session.guess("zzzzz")


def test_is_valid_guess(session):
    assert session.is_valid_guess("slate") == (True, "")
    assert session.is_valid_guess("zzzzz") == (False, "Word not in word list")
    assert session.is_valid_guess("sl") == (False, "Guess must be exactly 5 letters")
