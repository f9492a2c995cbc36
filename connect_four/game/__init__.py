"""
connect_four.game - Core game mechanics for Connect Four

This package contains the board representation and the game engine that
sequences turns and detects wins and ties.
"""

from connect_four.game.board import Board, Cell
from connect_four.game.rules import ConnectFourGame, MoveResult, RejectReason

__all__ = ['Board', 'Cell', 'ConnectFourGame', 'MoveResult', 'RejectReason']
