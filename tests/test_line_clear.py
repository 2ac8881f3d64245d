import numpy as np

from blockdrop.board import Board
from blockdrop.config import HEIGHT
from blockdrop.pieces import Piece, SHAPES, ShapeType
from blockdrop.placement import clear_rows, detect_full_rows, place


def _board_missing_i_slot() -> Board:
    board = Board.empty()
    board.grid[19, :] = 1
    board.grid[19, 4:8] = 0
    # Markers above the row that will clear.
    board.grid[18, 0] = 2
    board.grid[5, 9] = 3
    return board


def test_place_reports_completed_row():
    board = _board_missing_i_slot()
    piece = Piece(ShapeType.I, SHAPES[ShapeType.I], x=4, y=19)
    result = place(board, piece)
    assert result.full_rows == [19]
    assert result.board.is_occupied(4, 19)


def test_place_without_full_rows():
    piece = Piece(ShapeType.O, SHAPES[ShapeType.O], x=0, y=18)
    result = place(Board.empty(), piece)
    assert result.full_rows == []


def test_clear_shifts_rows_above_down():
    board = _board_missing_i_slot()
    merged, rows = place(board, Piece(ShapeType.I, SHAPES[ShapeType.I], x=4, y=19))

    cleared = clear_rows(merged, rows)

    assert cleared.grid.shape[0] == HEIGHT
    assert not cleared.grid[0].any()
    assert np.array_equal(cleared.grid[1:], merged.grid[:19])
    assert cleared.get_cell(0, 19) == 2
    assert cleared.get_cell(9, 6) == 3


def test_non_adjacent_rows_clear_together():
    board = Board.empty()
    board.grid[19, :] = 1
    board.grid[17, :] = 1
    board.grid[18, 3] = 4
    board.grid[16, 7] = 5

    rows = detect_full_rows(board)
    cleared = clear_rows(board, rows)

    assert rows == [17, 19]
    assert cleared.grid.shape[0] == HEIGHT
    assert cleared.get_cell(3, 19) == 4
    assert cleared.get_cell(7, 18) == 5
    assert np.count_nonzero(cleared.grid) == 2
