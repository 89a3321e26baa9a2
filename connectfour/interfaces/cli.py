"""
cli.py - Command-line interface for two-player Connect Four

This module wires a GameSession to the console: columns are read with
input() and the board and status messages are printed to stdout.
"""

import argparse
from typing import List, Optional

from connectfour.debug import debug, DebugLevel
from connectfour.game.session import GameSession


def console_request_column(prompt: str) -> str:
    """Read a raw column choice from the keyboard."""
    return input(prompt)


def console_present(text: str) -> None:
    """Show text to the players."""
    print(text)


class SimpleCLI:
    """Console front end for a hot-seat Connect Four game."""

    def __init__(self):
        """Initialize the CLI."""
        self.args = None
        self.session: Optional[GameSession] = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(description='Two-player Connect Four')

        parser.add_argument('--player1', default='Player 1',
                            help='Name of the first player (X)')
        parser.add_argument('--player2', default='Player 2',
                            help='Name of the second player (O)')
        parser.add_argument('--debug', action='store_true',
                            help='Enable debug logging')
        parser.add_argument('--debug-level', dest='debug_level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level (default: warning)')
        parser.add_argument('--log-file', dest='log_file', default=None,
                            help='Also write log records to this file')

        self.args = parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)

        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Play one game to completion.

        Returns:
            Process exit status
        """
        if not self.args:
            self.parse_args(argv)

        self.session = GameSession(self.args.player1, self.args.player2)

        try:
            self.session.run(console_request_column, console_present)
        except (KeyboardInterrupt, EOFError):
            print()
            print("Game abandoned.")
            debug.info("Input closed before the game finished", "cli")

        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    raise SystemExit(main())
