"""Locking pieces into the board and removing completed rows."""

from __future__ import annotations

from typing import Iterable, List, NamedTuple

from .board import Board
from .pieces import Piece


class PlacementResult(NamedTuple):
    board: Board
    full_rows: List[int]


def detect_full_rows(board: Board) -> List[int]:
    """Return the indices of rows with no empty cell, in ascending order."""

    return board.full_rows()


def place(board: Board, piece: Piece) -> PlacementResult:
    """Merge ``piece`` into ``board`` and report which rows became full.

    The merge is unconditional: callers must already know that the piece
    cannot fall any further.  The full rows are only reported here; removal
    happens in :func:`clear_rows` once any clear animation has finished.
    """

    merged = board.merge(piece)
    return PlacementResult(merged, detect_full_rows(merged))


def clear_rows(board: Board, rows: Iterable[int]) -> Board:
    """Remove ``rows`` from ``board`` and back-fill empty rows at the top."""

    return board.without_rows(rows)
