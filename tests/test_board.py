import numpy as np
import pytest

from blockdrop.board import Board, PIECE_VALUES
from blockdrop.config import HEIGHT, WIDTH
from blockdrop.pieces import Piece, SHAPES, ShapeType


def test_empty_board_has_fixed_dimensions():
    board = Board.empty()
    assert board.grid.shape == (HEIGHT, WIDTH)
    assert not board.grid.any()


def test_is_occupied_is_false_off_board():
    board = Board.empty()
    board.set_cell(0, 0, 1)
    assert board.is_occupied(0, 0)
    assert not board.is_occupied(-1, 0)
    assert not board.is_occupied(0, -1)
    assert not board.is_occupied(WIDTH, 0)
    assert not board.is_occupied(0, HEIGHT)


def test_get_cell_out_of_bounds_raises():
    with pytest.raises(IndexError):
        Board.empty().get_cell(WIDTH, 0)


def test_merge_writes_only_the_piece_footprint():
    board = Board.empty()
    board.set_cell(0, 19, PIECE_VALUES[ShapeType.I])
    piece = Piece(ShapeType.T, SHAPES[ShapeType.T], x=3, y=10)

    merged = board.merge(piece)

    expected = board.grid.copy()
    for x, y in [(4, 10), (3, 11), (4, 11), (5, 11)]:
        expected[y, x] = PIECE_VALUES[ShapeType.T]
    assert np.array_equal(merged.grid, expected)
    assert merged.color_at(4, 10) == "purple"
    # The original board is left untouched.
    assert not board.is_occupied(4, 10)


def test_merge_skips_cells_above_the_board():
    piece = Piece(ShapeType.J, SHAPES[ShapeType.J], x=0, y=-1)
    merged = Board.empty().merge(piece)
    assert np.count_nonzero(merged.grid) == 3
    assert merged.is_occupied(0, 0)


def test_merge_rejects_horizontal_overflow():
    piece = Piece(ShapeType.I, SHAPES[ShapeType.I], x=8, y=0)
    with pytest.raises(IndexError):
        Board.empty().merge(piece)


def test_full_rows_only_reports_complete_rows():
    board = Board.empty()
    board.grid[19, :] = 1
    board.grid[17, :] = 2
    board.grid[18, :] = 3
    board.grid[18, 6] = 0
    assert board.full_rows() == [17, 19]


def test_rows_exposes_colour_tokens():
    board = Board.empty()
    board.set_cell(2, 3, PIECE_VALUES[ShapeType.Z])
    rows = board.rows()
    assert rows[3][2] == "red"
    assert rows[0][0] is None
