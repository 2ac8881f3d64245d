"""Falling-block puzzle engine."""

from .board import Board
from .collision import can_move, collides, is_valid_move
from .config import EngineConfig, HEIGHT, WIDTH
from .engine import Command, GameEngine
from .game_state import GameState
from .pieces import COLORS, SHAPES, Piece, ShapeType, spawn_piece
from .placement import clear_rows, detect_full_rows, place
from .progression import Progression, on_lines_cleared
from .rotation import rotate_piece, rotate_shape
from .snapshot import GameStatus, Snapshot, cell_at, render_grid

__all__ = [
    "Board",
    "COLORS",
    "Command",
    "EngineConfig",
    "GameEngine",
    "GameState",
    "GameStatus",
    "HEIGHT",
    "Piece",
    "Progression",
    "SHAPES",
    "ShapeType",
    "Snapshot",
    "WIDTH",
    "can_move",
    "cell_at",
    "clear_rows",
    "collides",
    "detect_full_rows",
    "is_valid_move",
    "on_lines_cleared",
    "place",
    "render_grid",
    "rotate_piece",
    "rotate_shape",
    "spawn_piece",
]
