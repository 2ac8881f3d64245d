"""Read-only view of a session handed to renderers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Optional, Tuple

from .pieces import Piece

Cell = Optional[str]


class GameStatus(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Snapshot:
    """State a renderer needs for one frame.

    ``board`` holds only locked cells.  The active piece is kept separate and
    composed on top by :func:`cell_at` / :func:`render_grid`.
    """

    board: Tuple[Tuple[Cell, ...], ...]
    active: Optional[Piece]
    rows_pending_clear: FrozenSet[int]
    score: int
    level: int
    drop_interval_ms: float
    paused: bool
    started: bool
    game_over: bool
    status: GameStatus

    @property
    def width(self) -> int:
        return len(self.board[0]) if self.board else 0

    @property
    def height(self) -> int:
        return len(self.board)


def cell_at(snapshot: Snapshot, x: int, y: int) -> Cell:
    """Return the colour shown at ``(x, y)``: the active piece wins over the board."""

    piece = snapshot.active
    if piece is not None and (x, y) in set(piece.cells()):
        return piece.color
    return snapshot.board[y][x]


def render_grid(snapshot: Snapshot) -> List[List[Cell]]:
    """Return a copy of the board with the active piece overlaid.

    Convenience for renderers that want a single 2D array to draw.  Blocks of
    the active piece above the top row are not visible and are skipped.
    """

    grid = [list(row) for row in snapshot.board]
    piece = snapshot.active
    if piece is not None:
        for x, y in piece.cells():
            if 0 <= y < snapshot.height and 0 <= x < snapshot.width:
                grid[y][x] = piece.color
    return grid
