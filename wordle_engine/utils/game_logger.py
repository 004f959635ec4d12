"""
Game Logger Module

Structured logging of game events for the console front end. Every event
is one JSON object per log line so log files are easy to parse.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..models.game import LetterStatus


class GameLogger:
    """
    Centralized logging for played games.

    Features:
    - Console handler for warnings and errors (level configurable)
    - Optional dated log file holding every event
    - JSON structured log entries

    The secret word is never written to the log.
    """

    def __init__(self, log_dir: Optional[Union[str, Path]] = None, level: str = 'WARNING'):
        self.log_dir = Path(log_dir) if log_dir else None
        self.logger = self._setup_logger(level)

    def _setup_logger(self, level: str) -> logging.Logger:
        """Setup the game logger with a console and an optional file handler."""
        logger = logging.getLogger('wordle_game')
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        # Prevent duplicate handlers
        if logger.handlers:
            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level.upper())
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.INFO)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        return logger

    def configure(self, log_dir: Optional[Union[str, Path]] = None, level: str = 'WARNING') -> None:
        """Rebuild the handlers, e.g. once the CLI has parsed its options."""
        self.log_dir = Path(log_dir) if log_dir else None
        self.logger = self._setup_logger(level)

    @staticmethod
    def _create_log_entry(event_type: str, action: str, details: Dict[str, Any]) -> str:
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False)

    def log_round_started(self, game_number: int, max_rounds: int) -> None:
        self.logger.info(self._create_log_entry(
            'GAME_EVENT', 'round_started',
            {'game_number': game_number, 'max_rounds': max_rounds}
        ))

    def log_guess(self, game_number: int, guess: str, statuses: List[LetterStatus],
                  round_number: int) -> None:
        """Log a scored guess."""
        self.logger.info(self._create_log_entry(
            'USER_ACTION', 'guess_scored',
            {
                'game_number': game_number,
                'round': round_number,
                'guess': guess,
                'result': [status.value for status in statuses]
            }
        ))

    def log_rejected_guess(self, game_number: int, guess: str, reason: str) -> None:
        self.logger.info(self._create_log_entry(
            'USER_ACTION', 'guess_rejected',
            {'game_number': game_number, 'guess': guess, 'reason': reason}
        ))

    def log_game_event(self, game_number: int, event: str, **kwargs) -> None:
        """
        Log game outcomes.

        Args:
            game_number: Sequence number of the game in this session
            event: Type of game event ('game_won', 'game_lost', 'session_ended')
            **kwargs: Additional game details
        """
        details = {'game_number': game_number, **kwargs}
        self.logger.info(self._create_log_entry('GAME_EVENT', event, details))

    def log_error(self, error: Exception, action: str) -> None:
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
        }
        self.logger.error(self._create_log_entry('ERROR', action, details))


# Global logger instance
game_logger = GameLogger()
