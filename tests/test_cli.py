import importlib
import io

import pytest

from wordle_engine import cli
from wordle_engine.config import Config, TestingConfig, app_config, config


@pytest.fixture
def word_lists(word_file):
    guesses = word_file("guesses.txt", "crane\nslate\n")
    answers = word_file("answers.txt", "crane\n")
    return guesses, answers


def test_config_mapping():
    assert config["default"] is Config
    assert config["testing"] is TestingConfig
    assert TestingConfig.SEED == 0
    assert Config.MAX_ROUNDS >= 1


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MAX_ROUNDS", "4")
    monkeypatch.setenv("WORDLE_SEED", "17")
    monkeypatch.setenv("LOG_DIR", "")
    try:
        reloaded = importlib.reload(app_config)
        assert reloaded.Config.MAX_ROUNDS == 4
        assert reloaded.Config.SEED == 17
        assert reloaded.Config.LOG_DIR is None
    finally:
        monkeypatch.undo()
        importlib.reload(app_config)


def test_parser_defaults_follow_config():
    args = cli.build_parser(TestingConfig).parse_args([])
    assert args.seed == 0
    assert args.max_rounds == TestingConfig.MAX_ROUNDS
    assert args.games is None


def test_parser_rejects_zero_rounds(capsys):
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["--max-rounds", "0"])


def test_plays_a_game(monkeypatch, capsys, word_lists):
    guesses, answers = word_lists
    monkeypatch.setattr("sys.stdin", io.StringIO("slate\ncrane\n"))

    status = cli.main([
        "--guesses", guesses, "--answers", answers, "--games", "1", "--seed", "3"
    ])

    assert status == 0
    out = capsys.readouterr().out
    assert "Congratulations!" in out
    assert "Games played: 1, won: 1" in out


def test_missing_word_list(capsys, tmp_path, word_lists):
    guesses, _ = word_lists
    status = cli.main(["--guesses", guesses, "--answers", str(tmp_path / "nope.txt")])

    assert status == 1
    assert "Error loading word lists" in capsys.readouterr().err


def test_log_dir_is_a_file(capsys, tmp_path, word_lists):
    guesses, answers = word_lists
    not_a_dir = tmp_path / "afile"
    not_a_dir.write_text("", encoding="utf-8")

    status = cli.main([
        "--guesses", guesses, "--answers", answers, "--log-dir", str(not_a_dir)
    ])

    assert status == 1
    assert "Error configuring logging" in capsys.readouterr().err


def test_unknown_log_level_from_config(capsys, word_lists):
    class VerboseConfig(TestingConfig):
        LOG_LEVEL = 'VERBOSE'

    guesses, answers = word_lists
    status = cli.main(["--guesses", guesses, "--answers", answers], config_class=VerboseConfig)

    assert status == 1
    assert "Error configuring logging" in capsys.readouterr().err
