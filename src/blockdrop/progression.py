"""Score, level and gravity speed progression."""

from __future__ import annotations

from typing import NamedTuple, Optional

from .config import EngineConfig


class Progression(NamedTuple):
    score: int
    level: int
    drop_interval_ms: float


def on_lines_cleared(
    cleared: int,
    score: int,
    level: int,
    drop_interval_ms: float,
    config: Optional[EngineConfig] = None,
) -> Progression:
    """Return the progression after ``cleared`` rows were removed at once.

    Each line is worth a flat ``score_per_line``.  When the new score crosses
    into a higher ``level_threshold`` bracket than the current level, the
    level rises by exactly one and the drop interval is scaled by
    ``speed_increase_factor``.  Several thresholds crossed in a single clear
    still yield a single level.  The interval has no lower bound.
    """

    if cleared <= 0:
        return Progression(score, level, drop_interval_ms)
    config = config or EngineConfig()
    new_score = score + cleared * config.score_per_line
    if new_score // config.level_threshold > level - 1:
        return Progression(
            new_score, level + 1, drop_interval_ms * config.speed_increase_factor
        )
    return Progression(new_score, level, drop_interval_ms)
