"""Board representation for the playfield."""

from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np
from numpy.typing import NDArray

from .config import HEIGHT, WIDTH
from .pieces import COLORS, Piece, ShapeType


Grid = NDArray[np.uint8]

# Mapping from ``ShapeType`` to the integer stored in the grid.  ``0`` marks an
# empty cell; every other value identifies the colour of a locked block.
PIECE_VALUES = {t: i + 1 for i, t in enumerate(ShapeType)}
VALUE_COLORS = {value: COLORS[t] for t, value in PIECE_VALUES.items()}


def create_empty_grid(width: int = WIDTH, height: int = HEIGHT) -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((height, width), dtype=np.uint8)


class Board:
    """Grid of locked cells, independent of any falling piece.

    Coordinates follow the screen convention: ``x`` is the column and ``y``
    the row, with row ``0`` at the top.
    """

    def __init__(self, grid: Optional[Grid] = None) -> None:
        self.grid: Grid = create_empty_grid() if grid is None else grid

    @classmethod
    def empty(cls, width: int = WIDTH, height: int = HEIGHT) -> "Board":
        return cls(create_empty_grid(width, height))

    @property
    def width(self) -> int:
        return int(self.grid.shape[1])

    @property
    def height(self) -> int:
        return int(self.grid.shape[0])

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> int:
        """Safely return the value at ``(x, y)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.in_bounds(x, y):
            return int(self.grid[y, x])
        raise IndexError("Cell out of bounds")

    def set_cell(self, x: int, y: int, value: int) -> None:
        """Safely set the value at ``(x, y)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.in_bounds(x, y):
            self.grid[y, x] = np.uint8(value)
        else:
            raise IndexError("Cell out of bounds")

    def is_occupied(self, x: int, y: int) -> bool:
        """Return ``True`` if ``(x, y)`` is on the board and holds a block.

        Off-board coordinates are never reported as occupied; bounds are a
        separate concern handled by the collision checks.
        """

        return self.in_bounds(x, y) and bool(self.grid[y, x] != 0)

    def color_at(self, x: int, y: int) -> Optional[str]:
        """Return the colour token at ``(x, y)`` or ``None`` for empty cells."""

        return VALUE_COLORS.get(self.get_cell(x, y))

    def copy(self) -> "Board":
        return Board(self.grid.copy())

    def merge(self, piece: Piece) -> "Board":
        """Return a new board with ``piece`` written into its cells.

        Blocks above or below the grid are dropped silently.  A block outside
        the horizontal bounds indicates a collision check was skipped and
        raises ``IndexError``.
        """

        merged = self.copy()
        value = PIECE_VALUES[piece.kind]
        for x, y in piece.cells():
            if not 0 <= y < self.height:
                continue
            if not 0 <= x < self.width:
                raise IndexError("Block out of bounds")
            merged.grid[y, x] = value
        return merged

    def full_rows(self) -> List[int]:
        """Return the indices of completely filled rows, top to bottom."""

        return [int(r) for r in np.flatnonzero(np.all(self.grid != 0, axis=1))]

    def without_rows(self, rows: Iterable[int]) -> "Board":
        """Return a new board with ``rows`` removed and the rest compacted.

        All rows are deleted together and empty rows are added at the top, so
        every surviving row moves down by the number of removed rows below it.
        """

        mask = np.zeros(self.height, dtype=bool)
        for row in rows:
            mask[row] = True
        cleared = int(np.count_nonzero(mask))
        if not cleared:
            return self.copy()
        remaining = self.grid[~mask]
        new_rows = np.zeros((cleared, self.width), dtype=self.grid.dtype)
        return Board(np.vstack((new_rows, remaining)))

    def rows(self) -> List[List[Optional[str]]]:
        """Return the grid as nested lists of colour tokens (``None`` = empty)."""

        return [[VALUE_COLORS.get(int(v)) for v in row] for row in self.grid]
