import numpy as np
import pytest

from connect_four.game.board import Board, Cell, EMPTY_CELL
from connect_four.utils import Player


def test_new_board_is_empty_with_default_size():
    board = Board()
    assert (board.width, board.height) == (7, 6)
    assert board.get_state().shape == (6, 7)
    assert not board.get_state().any()
    assert not board.is_full()


def test_landing_row_empty_column_is_zero():
    board = Board()
    for col in range(board.width):
        assert board.landing_row(col) == 0


def test_landing_row_none_after_filling_column():
    board = Board()
    player = Player.ONE
    for expected_row in range(board.height):
        row = board.landing_row(3)
        assert row == expected_row
        board.place(3, row, player)
        player = player.other()
    assert board.landing_row(3) is None
    assert board.column_height(3) == board.height
    assert 3 not in board.valid_columns()


def test_place_sets_owner_and_cell():
    board = Board()
    board.place(2, 0, Player.TWO)
    assert board.owner_at(2, 0) == Player.TWO
    assert board.is_occupied(2, 0)
    assert board.cell_at(2, 0) == Cell(True, Player.TWO)
    assert board.cell_at(2, 1) == EMPTY_CELL
    assert board.landing_row(2) == 1


def test_place_on_occupied_cell_raises():
    board = Board()
    board.place(0, 0, Player.ONE)
    with pytest.raises(ValueError):
        board.place(0, 0, Player.TWO)
    assert board.owner_at(0, 0) == Player.ONE


def test_place_above_landing_row_raises():
    board = Board()
    with pytest.raises(ValueError):
        board.place(4, 2, Player.ONE)
    assert not board.is_occupied(4, 2)


def test_place_empty_player_raises():
    board = Board()
    with pytest.raises(ValueError):
        board.place(0, 0, Player.EMPTY)


@pytest.mark.parametrize("column,row", [(-1, 0), (0, -1), (7, 0), (0, 6), (-3, -3), (100, 100)])
def test_owner_at_out_of_range_is_empty(column, row):
    board = Board()
    for col in range(board.width):
        for r in range(board.height):
            board.place(col, r, Player.ONE)
    assert board.owner_at(column, row) == Player.EMPTY
    assert board.cell_at(column, row) == EMPTY_CELL


def test_is_full_only_when_every_cell_taken():
    board = Board(width=2, height=2)
    board.place(0, 0, Player.ONE)
    board.place(1, 0, Player.TWO)
    board.place(0, 1, Player.ONE)
    assert not board.is_full()
    board.place(1, 1, Player.TWO)
    assert board.is_full()
    assert board.valid_columns() == []


def test_copy_is_independent():
    board = Board()
    board.place(0, 0, Player.ONE)
    clone = board.copy()
    clone.place(1, 0, Player.TWO)
    assert board.owner_at(1, 0) == Player.EMPTY
    assert clone.owner_at(0, 0) == Player.ONE


def test_reset_clears_cells():
    board = Board()
    board.place(0, 0, Player.ONE)
    board.reset()
    assert np.count_nonzero(board.grid) == 0


def test_render_shows_bottom_row_last():
    board = Board()
    board.place(0, 0, Player.ONE)
    board.place(0, 1, Player.TWO)
    lines = str(board).splitlines()
    assert lines[-3] == "|X . . . . . .|"
    assert lines[-4] == "|O . . . . . .|"
    assert lines[-1] == "|0 1 2 3 4 5 6|"
