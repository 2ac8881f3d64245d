"""Game constants and tunable engine settings."""

from __future__ import annotations

from dataclasses import dataclass


# Dimensions of the playfield.  These are fixed for every session.
WIDTH = 10
HEIGHT = 20

INITIAL_DROP_INTERVAL_MS = 800.0
SPEED_INCREASE_FACTOR = 0.95
SCORE_PER_LINE = 100
LEVEL_THRESHOLD = 500
# Delay between marking full rows and removing them, for clear animations.
CLEAR_DELAY_MS = 500.0


@dataclass(frozen=True)
class EngineConfig:
    """Tunable numbers used by :class:`~blockdrop.engine.GameEngine`.

    The defaults reproduce the classic behaviour.  ``clear_delay_ms`` may be
    ``0`` in which case completed rows are removed in the same step that
    locked the piece.
    """

    initial_drop_interval_ms: float = INITIAL_DROP_INTERVAL_MS
    speed_increase_factor: float = SPEED_INCREASE_FACTOR
    score_per_line: int = SCORE_PER_LINE
    level_threshold: int = LEVEL_THRESHOLD
    clear_delay_ms: float = CLEAR_DELAY_MS

    def __post_init__(self) -> None:
        if self.initial_drop_interval_ms <= 0:
            raise ValueError("initial_drop_interval_ms must be positive")
        if not 0 < self.speed_increase_factor <= 1:
            raise ValueError("speed_increase_factor must be in (0, 1]")
        if self.level_threshold <= 0:
            raise ValueError("level_threshold must be positive")
        if self.clear_delay_ms < 0:
            raise ValueError("clear_delay_ms must not be negative")
