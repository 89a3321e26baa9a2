"""
board.py - Board representation and core game mechanics for Connect Four

This module implements the Board class which owns the 6x7 grid and provides
move validation, gravity-based disc placement, win detection and fullness
queries. It has no notion of players or turn order.
"""

from typing import List, Tuple

import numpy as np

from connectfour.debug import debug
from connectfour.utils import (ROWS, COLS, Mark, find_winning_line,
                               render_board_text)


class Board:
    """
    Represents a Connect Four game board.

    Row 0 is the top of the board and row ROWS-1 the floor. Cells only ever
    go from empty to occupied, and within a column the occupied cells always
    form a block resting on the floor.
    """

    def __init__(self):
        """Initialize an empty Connect Four board."""
        debug.trace("Initializing new Board", "board")
        self.grid = np.full((ROWS, COLS), Mark.EMPTY.value, dtype=np.int8)

    def copy(self) -> 'Board':
        """
        Create a deep copy of the current board.

        Returns:
            A new Board instance with the same grid
        """
        new_board = Board()
        new_board.grid = self.grid.copy()
        return new_board

    def is_column_full(self, column: int) -> bool:
        """
        Check if the top cell of a column is occupied.

        The column must already be in range; use is_valid_move for untrusted input.
        """
        return bool(self.grid[0, column] != Mark.EMPTY.value)

    def is_valid_move(self, column: int) -> bool:
        """
        Check if a move is valid.

        Args:
            column: The column to place a disc (0-indexed)

        Returns:
            True if the column is in range and not full, False otherwise
        """
        if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
            debug.debug(f"Invalid move: column {column!r} is not an integer", "board")
            return False

        if not (0 <= column < COLS):
            debug.debug(f"Invalid move: column {column} out of bounds", "board")
            return False

        if self.is_column_full(column):
            debug.debug(f"Invalid move: column {column} is full", "board")
            return False

        return True

    def get_valid_moves(self) -> List[int]:
        """
        Get a list of valid columns where a disc can be placed.

        Returns:
            List of valid column indices
        """
        return [col for col in range(COLS) if not self.is_column_full(col)]

    def column_height(self, column: int) -> int:
        """Number of discs currently stacked in a column."""
        return int(np.count_nonzero(self.grid[:, column] != Mark.EMPTY.value))

    def drop_disc(self, column: int, mark: Mark) -> bool:
        """
        Drop a disc into the specified column.

        The disc lands in the lowest empty cell of the column. An invalid
        column leaves the board untouched.

        Args:
            column: The column to drop into (0-indexed)
            mark: The player mark to place

        Returns:
            True if the disc was placed, False otherwise
        """
        if not isinstance(mark, Mark) or not mark.is_player:
            debug.warning(f"Refusing to drop non-player mark {mark!r}", "board")
            return False

        if not self.is_valid_move(column):
            return False

        # Find the lowest empty row in the column
        for row in range(ROWS - 1, -1, -1):
            if self.grid[row, column] == Mark.EMPTY.value:
                debug.trace(f"Placing {mark.name} at position ({row}, {column})", "board")
                self.grid[row, column] = mark.value
                return True

        return False

    def check_for_win(self, mark: Mark) -> bool:
        """
        Check whether the mark has four in a row anywhere on the board.

        Args:
            mark: The player mark to check

        Returns:
            True if a winning window exists for the mark
        """
        return bool(find_winning_line(self.grid, mark))

    def get_winning_line(self, mark: Mark) -> List[Tuple[int, int]]:
        """
        Get the positions of a winning line for the mark.

        Returns:
            List of (row, col) positions forming the line, or empty list if no win
        """
        return find_winning_line(self.grid, mark)

    def is_board_full(self) -> bool:
        """Check if every column is full."""
        return all(self.is_column_full(col) for col in range(COLS))

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Copy of the 2D grid of Mark values
        """
        return self.grid.copy()

    def display(self) -> str:
        """
        Render the board as text.

        Returns:
            One line per row followed by the column legend
        """
        return render_board_text(self.grid)

    def __str__(self) -> str:
        return self.display()
