"""
rules.py - Turn sequencing and win/tie detection for Connect Four

ConnectFourGame is one game session: it owns a Board, the active player and
the running status. attempt_move() is the only operation that changes them,
and it never raises for user-driven input; rejected moves come back as
ordinary MoveResult values.
"""

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import List, Optional, Tuple

import numpy as np

from connect_four.debug import debug
from connect_four.game.board import Board, Cell
from connect_four.utils import (WIDTH, HEIGHT, CONNECT_N, DIRECTION_VECTORS,
                                Player, GameStatus)

Position = Tuple[int, int]


class RejectReason(Enum):
    """Why a move was not played."""
    INVALID_COLUMN = "invalid_column"
    COLUMN_FULL = "column_full"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a single attempt_move() call.

    Attributes:
        column: The column that was requested
        row: Row the piece landed in, or None if the move was rejected
        player: The active player when the move was attempted
        status: Session status after the attempt
        reason: Why the move was rejected, or None if it was played
        winning_line: The (column, row) cells of the winning line, if any
        next_player: Who moves next; Player.EMPTY once the game is over
    """
    column: int
    row: Optional[int]
    player: Player
    status: GameStatus
    reason: Optional[RejectReason] = None
    winning_line: Tuple[Position, ...] = ()
    next_player: Player = Player.EMPTY

    @property
    def accepted(self) -> bool:
        return self.reason is None

    @property
    def position(self) -> Optional[Position]:
        if self.row is None:
            return None
        return (self.column, self.row)


class ConnectFourGame:
    """
    A single Connect Four session.

    Sessions share no state, so any number of them can be played side by side.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT):
        """Initialize a new game on an empty board."""
        debug.debug("Initializing ConnectFourGame", "game")
        self._board = Board(width, height)
        self.reset()

    def reset(self) -> None:
        """Start over with an empty board and Player ONE to move."""
        debug.debug("Resetting game", "game")
        self._board.reset()
        self._current_player = Player.ONE
        self._status = GameStatus.IN_PROGRESS
        self._history: List[MoveResult] = []
        self._winning_line: Tuple[Position, ...] = ()

    def attempt_move(self, column) -> MoveResult:
        """
        Drop the active player's piece into a column.

        Args:
            column: Column to drop a piece into (0-indexed)

        Returns:
            MoveResult describing the placement, or why the move was rejected
        """
        player = self._current_player
        debug.debug(f"Attempting move in column {column} for player {player.name}", "game")

        reason = self._validate(column)
        if reason is not None:
            debug.debug(f"Rejected move in column {column}: {reason.value}", "game")
            return MoveResult(column, None, player, self._status, reason,
                              next_player=self._next_player())

        row = self._board.landing_row(column)
        self._board.place(column, row, player)

        debug.start_timer("win_check")
        line = self.find_winning_line(player)
        debug.end_timer("win_check", "game")

        if line:
            self._status = GameStatus.won_by(player)
            self._winning_line = line
            debug.info(f"Player {player.name} wins after move at ({column}, {row})", "game")
        elif self.check_for_tie():
            self._status = GameStatus.TIED
            debug.info("Game ends in a tie", "game")
        else:
            self._current_player = player.other()
            debug.debug(f"Switching to player {self._current_player.name}", "game")

        result = MoveResult(column, row, player, self._status, None, line,
                            next_player=self._next_player())
        self._history.append(result)
        return result

    def _next_player(self) -> Player:
        if self._status.is_game_over():
            return Player.EMPTY
        return self._current_player

    def _validate(self, column) -> Optional[RejectReason]:
        if self._status.is_game_over():
            return RejectReason.GAME_OVER
        if isinstance(column, bool) or not isinstance(column, Integral):
            return RejectReason.INVALID_COLUMN
        if not 0 <= column < self.width:
            return RejectReason.INVALID_COLUMN
        if self._board.landing_row(column) is None:
            return RejectReason.COLUMN_FULL
        return None

    def find_winning_line(self, player: Player) -> Tuple[Position, ...]:
        """
        Scan every cell for a four-in-a-row owned by a player.

        Each cell anchors one line per direction. Cells that fall off the
        board read as Player.EMPTY, so lines that leave the grid never match.

        Returns:
            The (column, row) cells of the first winning line found, or ()
        """
        board = self._board
        for x in range(board.width):
            for y in range(board.height):
                for dx, dy in DIRECTION_VECTORS.values():
                    line = tuple((x + dx * step, y + dy * step) for step in range(CONNECT_N))
                    if all(board.owner_at(c, r) == player for c, r in line):
                        return line
        return ()

    def check_for_win(self, player: Player) -> bool:
        """Check if a player has four in a row anywhere on the board."""
        return bool(self.find_winning_line(player))

    def check_for_tie(self) -> bool:
        """A tie is a full board; only meaningful once no win was found."""
        return self._board.is_full()

    @property
    def board(self) -> Board:
        """The session's board. Read it; move only through attempt_move()."""
        return self._board

    @property
    def width(self) -> int:
        return self._board.width

    @property
    def height(self) -> int:
        return self._board.height

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def history(self) -> Tuple[MoveResult, ...]:
        """Accepted moves, oldest first."""
        return tuple(self._history)

    @property
    def last_move(self) -> Optional[MoveResult]:
        return self._history[-1] if self._history else None

    @property
    def winning_line(self) -> Tuple[Position, ...]:
        return self._winning_line

    def is_game_over(self) -> bool:
        return self._status.is_game_over()

    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            The winning player, or None if no winner yet or tied
        """
        winner = self._status.winner
        return None if winner == Player.EMPTY else winner

    def get_valid_moves(self) -> List[int]:
        """
        Get a list of valid moves.

        Returns:
            List of playable column indices, empty once the game is over
        """
        if self.is_game_over():
            return []
        return self._board.valid_columns()

    def owner_at(self, column: int, row: int) -> Player:
        return self._board.owner_at(column, row)

    def is_occupied(self, column: int, row: int) -> bool:
        return self._board.is_occupied(column, row)

    def cell_at(self, column: int, row: int) -> Cell:
        return self._board.cell_at(column, row)

    def get_state(self) -> np.ndarray:
        return self._board.get_state()

    def render(self) -> str:
        """
        Render the game as a string.

        Returns:
            String representation of the board
        """
        return self._board.render()
