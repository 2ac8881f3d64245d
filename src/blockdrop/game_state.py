"""Mutable state for a single game session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Set

from .board import Board
from .config import EngineConfig, INITIAL_DROP_INTERVAL_MS
from .pieces import Piece


@dataclass
class GameState:
    """Everything a session owns: the board, the active piece and counters.

    ``rows_pending_clear`` marks rows that are full but not yet removed.  It
    exists only so renderers can animate the clear and plays no part in
    collision.  ``pending_clear_deadline_ms`` is the engine clock time at
    which those rows are removed, or ``None`` when no clear is outstanding.
    """

    board: Board = field(default_factory=Board.empty)
    active: Optional[Piece] = None
    score: int = 0
    level: int = 1
    drop_interval_ms: float = INITIAL_DROP_INTERVAL_MS
    paused: bool = False
    started: bool = False
    game_over: bool = False
    rows_pending_clear: Set[int] = field(default_factory=set)
    pending_clear_deadline_ms: Optional[float] = None

    @property
    def clear_pending(self) -> bool:
        return self.pending_clear_deadline_ms is not None

    def reset_game(self, config: Optional[EngineConfig] = None) -> None:
        """Reset the entire session to its initial values."""

        config = config or EngineConfig()
        self.board = Board.empty()
        self.active = None
        self.score = 0
        self.level = 1
        self.drop_interval_ms = config.initial_drop_interval_ms
        self.paused = False
        self.started = False
        self.game_over = False
        self.rows_pending_clear = set()
        self.pending_clear_deadline_ms = None
