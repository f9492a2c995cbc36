"""
board.py - Board representation for Connect Four

This module implements the Board class which owns the grid of cell occupancy.
Pieces obey gravity: within a column, occupied cells always form a contiguous
run from row 0 (the bottom) upward, and a cell is written at most once.
"""

from typing import List, NamedTuple, Optional

import numpy as np

from connect_four.debug import debug
from connect_four.utils import (WIDTH, HEIGHT, Player, is_valid_position,
                                render_board_ascii)


class Cell(NamedTuple):
    """Occupancy of a single grid position."""
    occupied: bool
    owner: Player


EMPTY_CELL = Cell(False, Player.EMPTY)


class Board:
    """
    Represents a Connect Four grid.

    The board knows nothing about turns or winners; the game engine drives it
    through landing_row() and place().
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT):
        """Initialize an empty board of the given dimensions."""
        debug.debug(f"Initializing new {width}x{height} Board", "board")
        self.width = width
        self.height = height
        self.reset()

    def reset(self):
        """Reset the board to an empty state."""
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def copy(self) -> 'Board':
        """
        Create a deep copy of the current board.

        Returns:
            A new Board instance with the same cells
        """
        new_board = Board(self.width, self.height)
        new_board.grid = self.grid.copy()
        return new_board

    def landing_row(self, column: int) -> Optional[int]:
        """
        Find where gravity would put the next piece dropped in a column.

        Args:
            column: Column index, must be in [0, width)

        Returns:
            The lowest unoccupied row, or None if the column is full
        """
        empty_rows = np.flatnonzero(self.grid[:, column] == Player.EMPTY.value)
        if empty_rows.size == 0:
            return None
        return int(empty_rows[0])

    def place(self, column: int, row: int, player: Player):
        """
        Mark a cell as occupied by a player.

        Raises:
            ValueError: if the cell is out of range or already occupied, if the
                row is not the column's landing row, or if player is EMPTY
        """
        if player == Player.EMPTY:
            raise ValueError("Cannot place a piece for Player.EMPTY")
        if not is_valid_position(column, row, self.width, self.height):
            raise ValueError(f"Cell ({column}, {row}) is off the board")
        if self.is_occupied(column, row):
            raise ValueError(f"Cell ({column}, {row}) is already occupied")
        if row != self.landing_row(column):
            raise ValueError(f"Cell ({column}, {row}) is not the landing row of column {column}")

        debug.trace(f"Placing {player.name} at ({column}, {row})", "board")
        self.grid[row, column] = player.value

    def is_full(self) -> bool:
        """Check if every cell on the board is occupied."""
        return bool(np.all(self.grid != Player.EMPTY.value))

    def owner_at(self, column: int, row: int) -> Player:
        """
        Look up who owns a cell.

        Returns:
            The owning player, or Player.EMPTY for empty or out-of-range cells
        """
        if not is_valid_position(column, row, self.width, self.height):
            return Player.EMPTY
        return Player(int(self.grid[row, column]))

    def is_occupied(self, column: int, row: int) -> bool:
        return self.owner_at(column, row) != Player.EMPTY

    def cell_at(self, column: int, row: int) -> Cell:
        owner = self.owner_at(column, row)
        if owner == Player.EMPTY:
            return EMPTY_CELL
        return Cell(True, owner)

    def column_height(self, column: int) -> int:
        """Number of pieces in a column."""
        return int(np.count_nonzero(self.grid[:, column]))

    def valid_columns(self) -> List[int]:
        """Columns that still have room for a piece."""
        return [col for col in range(self.width) if self.landing_row(col) is not None]

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Copy of the grid indexed [row, column], row 0 at the bottom
        """
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
