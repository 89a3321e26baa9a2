"""
utils.py - Constants, enumerations and grid helpers for Connect Four

This module holds the fixed board dimensions, the cell/mark enumeration and
the window-scanning and rendering helpers shared by the board and the
environment.
"""

from enum import Enum, auto
from typing import List, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of discs in a row to win


class Mark(Enum):
    """Enumeration representing cell states and the two player marks."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Mark':
        """Get the opposing mark."""
        if self == Mark.ONE:
            return Mark.TWO
        elif self == Mark.TWO:
            return Mark.ONE
        return Mark.EMPTY

    @property
    def is_player(self) -> bool:
        return self in (Mark.ONE, Mark.TWO)

    @property
    def symbol(self) -> str:
        """Single-character symbol used in status messages."""
        if self == Mark.ONE:
            return "X"
        elif self == Mark.TWO:
            return "O"
        return "."

    @property
    def glyph(self) -> str:
        """Two-character cell rendering used by the board display."""
        return self.symbol + " "

    def __str__(self):
        return self.symbol


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    HORIZONTAL = auto()      # Left to right
    VERTICAL = auto()        # Top to bottom
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (row, col) for each direction; row 0 is the top row
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1)
}


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS


def window_positions(row: int, col: int, dr: int, dc: int) -> List[Tuple[int, int]]:
    """Positions of the CONNECT_N-cell window starting at (row, col)."""
    return [(row + i * dr, col + i * dc) for i in range(CONNECT_N)]


def find_winning_line(grid: np.ndarray, mark: Mark) -> List[Tuple[int, int]]:
    """
    Scan the whole grid for a run of CONNECT_N cells holding the given mark.

    Every start position whose window stays in bounds is checked, for all four
    directions. The scan does not depend on which disc was placed last.

    Args:
        grid: The game grid
        mark: The mark to look for

    Returns:
        (row, col) positions of the first winning window found, or an empty
        list if there is none
    """
    if not mark.is_player:
        return []

    value = mark.value
    for direction, (dr, dc) in DIRECTION_VECTORS.items():
        for row in range(ROWS):
            for col in range(COLS):
                positions = window_positions(row, col, dr, dc)
                end_row, end_col = positions[-1]
                if not is_valid_position(end_row, end_col):
                    continue
                if all(grid[r, c] == value for r, c in positions):
                    return positions

    return []


def render_board_text(grid: np.ndarray) -> str:
    """
    Render the grid as text.

    One line per row from top to bottom, each cell as a two-character glyph,
    followed by the 1-based column legend.

    Args:
        grid: The game grid

    Returns:
        Text representation of the board
    """
    lines = []
    for row in range(ROWS):
        lines.append("".join(Mark(int(cell)).glyph for cell in grid[row]))

    lines.append(" ".join(str(col + 1) for col in range(COLS)))

    return "\n".join(lines)
