"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, the turn-based game
session and the Gymnasium environment built on top of it.
"""

from connectfour.game.board import Board
from connectfour.game.session import GameSession, Phase, Player, TurnState, parse_column

__all__ = ['Board', 'GameSession', 'Phase', 'Player', 'TurnState', 'parse_column']
