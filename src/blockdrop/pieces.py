"""Shape definitions and the active falling piece.

Shapes are stored as small row-major matrices of ``0``/``1`` in their spawn
orientation.  A :class:`Piece` couples a shape with an origin on the board and
is never mutated in place; moves and rotations produce new pieces.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Iterator, Tuple

from .config import WIDTH

Shape = Tuple[Tuple[int, ...], ...]


class ShapeType(str, Enum):
    """Enumeration of the seven standard shapes."""

    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"


SHAPES: Dict[ShapeType, Shape] = {
    ShapeType.I: ((1, 1, 1, 1),),
    ShapeType.J: ((1, 0, 0), (1, 1, 1)),
    ShapeType.L: ((0, 0, 1), (1, 1, 1)),
    ShapeType.O: ((1, 1), (1, 1)),
    ShapeType.S: ((0, 1, 1), (1, 1, 0)),
    ShapeType.T: ((0, 1, 0), (1, 1, 1)),
    ShapeType.Z: ((1, 1, 0), (0, 1, 1)),
}

# Colour token attached to every cell a piece of the given type locks into.
COLORS: Dict[ShapeType, str] = {
    ShapeType.I: "cyan",
    ShapeType.J: "blue",
    ShapeType.L: "orange",
    ShapeType.O: "yellow",
    ShapeType.S: "green",
    ShapeType.T: "purple",
    ShapeType.Z: "red",
}


def shape_cells(shape: Shape) -> Iterator[Tuple[int, int]]:
    """Yield the ``(col, row)`` offsets of the occupied cells of ``shape``."""

    for row, values in enumerate(shape):
        for col, value in enumerate(values):
            if value:
                yield col, row


@dataclass(frozen=True)
class Piece:
    """Active falling piece: a shape placed at ``(x, y)`` on the board."""

    kind: ShapeType
    shape: Shape
    x: int = 0
    y: int = 0

    @property
    def color(self) -> str:
        return COLORS[self.kind]

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Return the absolute ``(x, y)`` board coordinates of the piece."""

        for col, row in shape_cells(self.shape):
            yield self.x + col, self.y + row

    def moved(self, dx: int, dy: int) -> "Piece":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def with_shape(self, shape: Shape, x: int, y: int) -> "Piece":
        return replace(self, shape=shape, x=x, y=y)


def spawn_piece(kind: ShapeType, width: int = WIDTH) -> Piece:
    """Return a fresh piece of ``kind`` at the spawn origin.

    The shape's left edge sits at ``width // 2 - 1`` on the top row.
    """

    return Piece(kind, SHAPES[kind], x=width // 2 - 1, y=0)
