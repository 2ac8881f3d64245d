"""Collision checks shared by every movement path."""

from __future__ import annotations

from .board import Board
from .pieces import Piece, Shape, shape_cells


def collides(board: Board, x: int, y: int, shape: Shape) -> bool:
    """Return ``True`` if ``shape`` placed at ``(x, y)`` hits a wall or block.

    A block collides when it leaves the board horizontally, falls below the
    bottom row, or lands on an occupied cell.  Blocks above the top row are
    allowed so that pieces may spawn partially hidden.
    """

    for col, row in shape_cells(shape):
        new_x = x + col
        new_y = y + row
        if new_x < 0 or new_x >= board.width or new_y >= board.height:
            return True
        if new_y >= 0 and board.is_occupied(new_x, new_y):
            return True
    return False


def is_valid_move(board: Board, x: int, y: int, shape: Shape) -> bool:
    return not collides(board, x, y, shape)


def can_move(board: Board, piece: Piece, dx: int, dy: int) -> bool:
    """Return ``True`` if ``piece`` can be translated by ``dx`` and ``dy``."""

    return is_valid_move(board, piece.x + dx, piece.y + dy, piece.shape)
