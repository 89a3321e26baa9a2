"""
session.py - Turn management for a two-player Connect Four game

This module provides the GameSession class, which pairs two players with a
board and drives the turn loop. Moves come from an input collaborator as
1-based column choices; anything malformed is rejected and requested again.
"""

import numbers
import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, List, Optional, Tuple

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.utils import COLS, Mark


RequestColumn = Callable[[str], Any]
Present = Callable[[str], None]

# Optional sign and ASCII digits only; int() alone would take "1_0" or "３"
INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Player:
    """A display name paired with the mark the player drops."""
    name: str
    mark: Mark

    def __str__(self) -> str:
        return f"{self.name} ({self.mark.symbol})"


class Phase(Enum):
    """Phases of the session state machine."""
    AWAITING_MOVE = auto()
    WON = auto()
    DRAW = auto()

    def is_terminal(self) -> bool:
        return self != Phase.AWAITING_MOVE


@dataclass(frozen=True)
class TurnState:
    """Current phase and the player it refers to (None for a draw)."""
    phase: Phase
    player: Optional[Player] = None


def parse_column(raw: Any) -> Optional[int]:
    """
    Convert a 1-based column choice to a 0-based column index.

    Accepts integers and integer text. Returns None for anything else,
    including booleans, floats and values outside 1..COLS.
    """
    if isinstance(raw, bool):
        return None

    if isinstance(raw, numbers.Integral):
        number = int(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not INTEGER_TEXT.fullmatch(text):
            return None
        number = int(text)
    else:
        return None

    if not (1 <= number <= COLS):
        return None

    return number - 1


class GameSession:
    """
    One game of Connect Four between two players.

    Player one always holds Mark.ONE and moves first. The session ends on the
    first win or when the board fills up; it cannot be reset.
    """

    def __init__(self, player1_name: str = "Player 1", player2_name: str = "Player 2"):
        debug.debug(f"Starting session: {player1_name} vs {player2_name}", "session")
        self.players: Tuple[Player, Player] = (
            Player(player1_name, Mark.ONE),
            Player(player2_name, Mark.TWO),
        )
        self.board = Board()
        self.moves_made: List[int] = []
        self._turn = 0
        self._state = TurnState(Phase.AWAITING_MOVE, self.players[0])

    @property
    def current_player(self) -> Player:
        return self.players[self._turn]

    @property
    def state(self) -> TurnState:
        return self._state

    @property
    def winner(self) -> Optional[Player]:
        if self._state.phase == Phase.WON:
            return self._state.player
        return None

    def is_over(self) -> bool:
        return self._state.phase.is_terminal()

    def submit_column(self, raw: Any) -> bool:
        """
        Attempt a move for the current player.

        Args:
            raw: The 1-based column choice as returned by the input collaborator

        Returns:
            True if the move was applied, False if it was rejected
        """
        if self.is_over():
            debug.debug(f"Move {raw!r} rejected: game is over", "session")
            return False

        column = parse_column(raw)
        if column is None:
            debug.debug(f"Move {raw!r} rejected: not a column in 1-{COLS}", "session")
            return False

        if not self.board.is_valid_move(column):
            debug.debug(f"Move {raw!r} rejected: column is full", "session")
            return False

        player = self.current_player
        self.board.drop_disc(column, player.mark)
        self.moves_made.append(column)
        debug.debug(f"{player.name} dropped in column {column + 1}", "session")

        if self.board.check_for_win(player.mark):
            self._state = TurnState(Phase.WON, player)
            debug.info(f"{player.name} wins after {len(self.moves_made)} moves", "session")
        elif self.board.is_board_full():
            self._state = TurnState(Phase.DRAW)
            debug.info("Game ends in a draw", "session")
        else:
            self._turn = 1 - self._turn
            self._state = TurnState(Phase.AWAITING_MOVE, self.current_player)

        return True

    def play_turn(self, request_column: RequestColumn) -> TurnState:
        """
        Request columns until one is accepted, then return the new state.

        Raises:
            RuntimeError: If the game is already over
        """
        if self.is_over():
            raise RuntimeError("Cannot play a turn: the game is over")

        prompt = self.turn_prompt()
        while not self.submit_column(request_column(prompt)):
            pass

        return self._state

    def run(self, request_column: RequestColumn, present: Present = print) -> TurnState:
        """
        Play the game to completion.

        Args:
            request_column: Blocking callable returning the next column choice
            present: Callable that shows text to the players

        Returns:
            The terminal state
        """
        present(self.welcome_message())

        while not self.is_over():
            present(self.board.display())
            present(self.turn_message())
            self.play_turn(request_column)

        present(self.board.display())
        present(self.result_message())
        return self._state

    def welcome_message(self) -> str:
        player1, player2 = self.players
        return f"Welcome to Connect Four!\n{player1} vs. {player2}\n"

    def turn_message(self) -> str:
        player = self.current_player
        return f"{player.name}'s turn ({player.mark.symbol})"

    def turn_prompt(self) -> str:
        return f"Enter column number (1-{COLS}): "

    def result_message(self) -> str:
        if self._state.phase == Phase.WON:
            return f"{self._state.player.name} wins!"
        elif self._state.phase == Phase.DRAW:
            return "It's a draw!"
        return "Game in progress"
