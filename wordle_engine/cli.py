"""
Wordle Console - Command Line Entry Point

Loads the word lists, builds a game session and runs the console loop.
Command line options override the environment configuration.
"""

import argparse
import random
import sys
from typing import List, Optional

from .config import Config, load_word_list
from .controllers.console_controller import ConsoleController
from .services.game_service import GameSession
from .utils.game_logger import game_logger


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"{value} must be at least 1")
    return number


def build_parser(config_class=Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='wordle',
        description='Play Wordle in the terminal.'
    )
    parser.add_argument('--guesses', default=config_class.GUESSES_FILE,
                        help='word list of allowed guesses (default: %(default)s)')
    parser.add_argument('--answers', default=config_class.ANSWERS_FILE,
                        help='word list of candidate answers (default: %(default)s)')
    parser.add_argument('--max-rounds', type=_positive_int, default=config_class.MAX_ROUNDS,
                        help='guesses allowed per game (default: %(default)s)')
    parser.add_argument('--seed', type=int, default=config_class.SEED,
                        help='seed for reproducible secret words')
    parser.add_argument('--games', type=_positive_int, default=None,
                        help='stop after this many games (default: play until EOF)')
    parser.add_argument('--log-dir', default=config_class.LOG_DIR,
                        help='write JSON game logs to this directory')
    parser.add_argument('--log-level', default=config_class.LOG_LEVEL,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        type=str.upper, help='console log level (default: %(default)s)')
    return parser


def main(argv: Optional[List[str]] = None, config_class=Config) -> int:
    """Main function to load the word lists and start the game loop."""
    args = build_parser(config_class).parse_args(argv)
    try:
        game_logger.configure(log_dir=args.log_dir, level=args.log_level)
    except (OSError, ValueError) as e:
        print(f"Error configuring logging: {e}", file=sys.stderr)
        return 1

    try:
        guesses = load_word_list(args.guesses)
        answers = load_word_list(args.answers)
        session = GameSession(guesses, answers, rng=random.Random(args.seed))
    except (OSError, ValueError) as e:
        game_logger.log_error(e, 'load_word_lists')
        print(f"Error loading word lists: {e}", file=sys.stderr)
        return 1

    controller = ConsoleController(session, max_rounds=args.max_rounds)
    controller.run(games=args.games)

    print(f"Games played: {controller.games_played}, won: {controller.games_won}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
