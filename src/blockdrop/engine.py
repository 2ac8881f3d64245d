"""Game loop and command dispatcher.

:class:`GameEngine` owns a :class:`~blockdrop.game_state.GameState` and a
logical millisecond clock.  Input arrives as discrete :class:`Command` values
through :meth:`GameEngine.dispatch`; time arrives through
:meth:`GameEngine.advance`.  Both run to completion before returning, so every
collision check sees a consistent board and piece.

Timers are plain deadlines on the engine clock rather than callbacks:

* ``gravity_due_ms`` is the next gravity tick.  It is re-armed whenever the
  drop interval, the paused flag or the running flag changes.
* ``state.pending_clear_deadline_ms`` is when rows marked for clearing are
  removed.  A reset wipes it together with the rest of the session, so a
  stale clear can never touch a fresh board.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Any, Callable, Dict, Optional, Protocol, Sequence, TypeVar, Union

from .collision import can_move, collides
from .config import EngineConfig
from .game_state import GameState
from .pieces import ShapeType, spawn_piece
from .placement import clear_rows, place
from .progression import on_lines_cleared
from .rotation import rotate_piece
from .snapshot import GameStatus, Snapshot


LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything able to pick an element, e.g. :class:`random.Random`."""

    def choice(self, seq: Sequence[T]) -> T:
        ...


class Command(str, Enum):
    """Discrete commands decoded from player input."""

    MOVE_LEFT = "MoveLeft"
    MOVE_RIGHT = "MoveRight"
    SOFT_DROP = "SoftDrop"
    ROTATE = "Rotate"
    TOGGLE_PAUSE = "TogglePause"
    START = "Start"
    RESET = "Reset"


class GameEngine:
    """State machine driving a single game.

    ``NOT_STARTED -> RUNNING <-> PAUSED``, and ``RUNNING -> GAME_OVER`` when a
    new piece cannot spawn.  Only ``Reset`` leaves ``GAME_OVER``.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        rng: Optional[RandomSource] = None,
        *,
        seed: Optional[int] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.rng: RandomSource = rng if rng is not None else random.Random(seed)
        self.state = GameState()
        self.state.reset_game(self.config)
        self.clock_ms = 0.0
        self.gravity_due_ms: Optional[float] = None
        self._handlers: Dict[Command, Callable[[], None]] = {
            Command.MOVE_LEFT: lambda: self._shift(-1),
            Command.MOVE_RIGHT: lambda: self._shift(1),
            Command.SOFT_DROP: self._drop,
            Command.ROTATE: self._rotate,
            Command.TOGGLE_PAUSE: self._toggle_pause,
            Command.START: self._start,
            Command.RESET: self._reset,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def status(self) -> GameStatus:
        if self.state.game_over:
            return GameStatus.GAME_OVER
        if not self.state.started:
            return GameStatus.NOT_STARTED
        if self.state.paused:
            return GameStatus.PAUSED
        return GameStatus.RUNNING

    def dispatch(self, command: Union[Command, str, Any]) -> Snapshot:
        """Apply ``command`` and return the resulting snapshot.

        Unrecognised tokens and commands that do not apply in the current
        state are ignored.
        """

        try:
            command = Command(command)
        except ValueError:
            LOGGER.debug("Ignoring unknown command %r", command)
            return self.snapshot()
        self._handlers[command]()
        return self.snapshot()

    def tick(self) -> Snapshot:
        """Fire one gravity step immediately.

        Behaves exactly like a soft drop: a piece that cannot fall is locked.
        """

        self._drop()
        return self.snapshot()

    def advance(self, elapsed_ms: float) -> Snapshot:
        """Move the engine clock forward, firing every event that falls due.

        Events are processed in time order.  A clear commit due at the same
        instant as a gravity tick runs first.
        """

        target = self.clock_ms + max(0.0, elapsed_ms)
        while True:
            due = self._next_due()
            if due is None or due > target:
                break
            self.clock_ms = due
            deadline = self.state.pending_clear_deadline_ms
            if deadline is not None and deadline <= due:
                self._commit_clear()
            else:
                assert self.gravity_due_ms is not None
                self.gravity_due_ms += self.state.drop_interval_ms
                self._drop()
        self.clock_ms = target
        return self.snapshot()

    def snapshot(self) -> Snapshot:
        state = self.state
        return Snapshot(
            board=tuple(tuple(row) for row in state.board.rows()),
            active=state.active,
            rows_pending_clear=frozenset(state.rows_pending_clear),
            score=state.score,
            level=state.level,
            drop_interval_ms=state.drop_interval_ms,
            paused=state.paused,
            started=state.started,
            game_over=state.game_over,
            status=self.status,
        )

    # ------------------------------------------------------------------
    # Timers
    # ------------------------------------------------------------------
    def _next_due(self) -> Optional[float]:
        candidates = [
            t
            for t in (self.state.pending_clear_deadline_ms, self.gravity_due_ms)
            if t is not None
        ]
        return min(candidates) if candidates else None

    def _arm_gravity(self) -> None:
        if self.status is GameStatus.RUNNING:
            self.gravity_due_ms = self.clock_ms + self.state.drop_interval_ms
        else:
            self.gravity_due_ms = None

    # ------------------------------------------------------------------
    # Command handlers
    # ------------------------------------------------------------------
    def _accepting_moves(self) -> bool:
        return self.status is GameStatus.RUNNING and self.state.active is not None

    def _shift(self, dx: int) -> None:
        if not self._accepting_moves():
            return
        piece = self.state.active
        if can_move(self.state.board, piece, dx, 0):
            self.state.active = piece.moved(dx, 0)

    def _drop(self) -> None:
        if not self._accepting_moves():
            return
        piece = self.state.active
        if can_move(self.state.board, piece, 0, 1):
            self.state.active = piece.moved(0, 1)
        else:
            self._lock_piece()

    def _rotate(self) -> None:
        if not self._accepting_moves():
            return
        rotated = rotate_piece(self.state.board, self.state.active)
        if rotated is not None:
            self.state.active = rotated

    def _toggle_pause(self) -> None:
        if self.status not in (GameStatus.RUNNING, GameStatus.PAUSED):
            LOGGER.debug("Pause ignored: game not running")
            return
        self.state.paused = not self.state.paused
        LOGGER.info("Paused" if self.state.paused else "Resumed")
        self._arm_gravity()
        self._spawn_if_needed()

    def _start(self) -> None:
        if self.status is not GameStatus.NOT_STARTED:
            LOGGER.debug("Start ignored: game is %s", self.status.value)
            return
        self.state.started = True
        self.state.paused = False
        LOGGER.info("Game started")
        self._arm_gravity()
        self._spawn_if_needed()

    def _reset(self) -> None:
        self.state.reset_game(self.config)
        self.gravity_due_ms = None
        LOGGER.info("Game reset")

    # ------------------------------------------------------------------
    # Placement and spawning
    # ------------------------------------------------------------------
    def _lock_piece(self) -> None:
        state = self.state
        result = place(state.board, state.active)
        state.board = result.board
        state.active = None
        if not result.full_rows:
            self._spawn_if_needed()
            return
        LOGGER.info("Clearing row(s) %s", result.full_rows)
        state.rows_pending_clear = set(result.full_rows)
        state.pending_clear_deadline_ms = self.clock_ms + self.config.clear_delay_ms
        if self.config.clear_delay_ms <= 0:
            self._commit_clear()

    def _commit_clear(self) -> None:
        state = self.state
        rows = sorted(state.rows_pending_clear)
        state.board = clear_rows(state.board, rows)
        state.rows_pending_clear = set()
        state.pending_clear_deadline_ms = None

        progress = on_lines_cleared(
            len(rows), state.score, state.level, state.drop_interval_ms, self.config
        )
        level_up = progress.level != state.level
        state.score, state.level, state.drop_interval_ms = progress
        LOGGER.info("Cleared %d row(s). Score: %d", len(rows), state.score)
        if level_up:
            LOGGER.info(
                "Level %d, drop interval %.1fms", state.level, state.drop_interval_ms
            )
            self._arm_gravity()
        self._spawn_if_needed()

    def _spawn_if_needed(self) -> None:
        state = self.state
        if (
            self.status is not GameStatus.RUNNING
            or state.active is not None
            or state.clear_pending
        ):
            return
        kind = self.rng.choice(list(ShapeType))
        piece = spawn_piece(kind, state.board.width)
        if collides(state.board, piece.x, piece.y, piece.shape):
            state.game_over = True
            state.started = False
            self.gravity_due_ms = None
            LOGGER.info("Game over. Final score: %d", state.score)
            return
        state.active = piece
