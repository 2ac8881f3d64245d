"""Clockwise rotation with a small kick table."""

from __future__ import annotations

from typing import Optional, Tuple

from .board import Board
from .collision import is_valid_move
from .pieces import Piece, Shape


# Origin offsets tried in order after rotating: in place, one column left,
# one column right, one row up.
KICK_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, 0), (-1, 0), (1, 0), (0, -1))


def rotate_shape(shape: Shape) -> Shape:
    """Return ``shape`` rotated 90 degrees clockwise.

    The matrix is transposed and each resulting row reversed.  No pivot is
    special-cased, so the I piece swings around its top-left corner.
    """

    return tuple(tuple(reversed(column)) for column in zip(*shape))


def rotate_piece(board: Board, piece: Piece) -> Optional[Piece]:
    """Return ``piece`` rotated clockwise, or ``None`` if no kick fits."""

    rotated = rotate_shape(piece.shape)
    for dx, dy in KICK_OFFSETS:
        x, y = piece.x + dx, piece.y + dy
        if is_valid_move(board, x, y, rotated):
            return piece.with_shape(rotated, x, y)
    return None
