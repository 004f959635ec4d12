"""
Wordle Console - Main Entry Point

Runs the terminal game with the configuration from the environment.
"""

import sys

from wordle_engine.cli import main


if __name__ == '__main__':
    sys.exit(main())
