"""
utils.py - Constants, enumerations and helpers shared across the package

Coordinates throughout the package are (column, row) with row 0 at the
bottom of the board. Grids are stored as numpy arrays indexed [row, column].
"""

from enum import Enum, auto
from typing import Dict, Tuple

import numpy as np

# Board configuration
WIDTH = 7
HEIGHT = 6
CONNECT_N = 4  # Number of pieces in a row to win

# Seconds between the final render and the end-of-game notice
ANNOUNCE_DELAY = 0.2


class Player(Enum):
    """Enumeration representing players and cell owners."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return "."
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class GameStatus(Enum):
    """Enumeration representing the state of a game session."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    TIED = auto()

    @classmethod
    def won_by(cls, player: Player) -> 'GameStatus':
        """Get the win status for a player."""
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        if player == Player.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"No win status for {player!r}")

    @property
    def winner(self) -> Player:
        """The winning player, or Player.EMPTY when nobody has won."""
        if self == GameStatus.PLAYER_ONE_WIN:
            return Player.ONE
        if self == GameStatus.PLAYER_TWO_WIN:
            return Player.TWO
        return Player.EMPTY

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameStatus.IN_PROGRESS


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP_RIGHT = auto()
    DIAGONAL_UP_LEFT = auto()


# Direction vectors (column, row) for each direction
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (1, 0),
    Direction.VERTICAL: (0, 1),
    Direction.DIAGONAL_UP_RIGHT: (1, 1),
    Direction.DIAGONAL_UP_LEFT: (-1, 1),
}


def is_valid_position(column: int, row: int, width: int = WIDTH, height: int = HEIGHT) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        column: Column index
        row: Row index (0 is the bottom)
        width: Board width
        height: Board height

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= column < width and 0 <= row < height


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as ASCII art, top row first.

    Args:
        grid: Array of Player values indexed [row, column], row 0 at the bottom

    Returns:
        ASCII representation of the board
    """
    height, width = grid.shape
    border = "|" + "-" * (width * 2 - 1) + "|"

    result = [border]
    for row in range(height - 1, -1, -1):
        cells = [str(Player(int(grid[row, col]))) for col in range(width)]
        result.append("|" + " ".join(cells) + "|")
    result.append(border)
    result.append("|" + " ".join(str(i % 10) for i in range(width)) + "|")

    return "\n".join(result)
