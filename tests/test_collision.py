from blockdrop.board import Board
from blockdrop.collision import can_move, collides, is_valid_move
from blockdrop.pieces import SHAPES, ShapeType, spawn_piece

O = SHAPES[ShapeType.O]
I = SHAPES[ShapeType.I]


def test_walls_and_floor_collide():
    board = Board.empty()
    assert collides(board, -1, 0, O)
    assert collides(board, 9, 0, O)
    assert collides(board, 0, 19, O)
    assert not collides(board, 8, 18, O)


def test_cells_above_the_board_are_allowed():
    board = Board.empty()
    assert not collides(board, 3, -1, O)
    assert not collides(board, 3, -5, I)


def test_occupied_cell_collides():
    board = Board.empty()
    board.set_cell(5, 10, 1)
    assert collides(board, 4, 9, O)
    assert not collides(board, 6, 9, O)
    assert is_valid_move(board, 6, 9, O)


def test_empty_cells_in_shape_matrix_are_ignored():
    board = Board.empty()
    board.set_cell(0, 0, 1)
    # The top-left cell of the S matrix is empty.
    assert not collides(board, 0, 0, SHAPES[ShapeType.S])


def test_occupied_cell_above_board_does_not_count():
    # Only cells at y >= 0 are compared against the board.
    board = Board.empty()
    board.grid[0, :] = 1
    assert not collides(board, 0, -1, I)
    assert collides(board, 0, 0, I)


def test_can_move_uses_piece_offsets():
    board = Board.empty()
    piece = spawn_piece(ShapeType.O)
    assert can_move(board, piece, -4, 0)
    assert not can_move(board, piece, -5, 0)
    assert not can_move(board, piece, 0, 19)
