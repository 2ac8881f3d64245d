"""Simple pygame front-end for the engine.

This module provides a minimal playable window on top of
:class:`~blockdrop.engine.GameEngine`.  It only translates key presses into
:class:`~blockdrop.engine.Command` values, feeds elapsed frame time into the
engine and draws the snapshots it returns.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, Optional, Tuple

import pygame

from .config import HEIGHT, WIDTH
from .engine import Command, GameEngine
from .snapshot import GameStatus, Snapshot, render_grid

LOGGER = logging.getLogger(__name__)

# Size of a single board cell in pixels
CELL_SIZE = 30
# Frames per second to run the game loop at
FPS = 60

Color = Tuple[int, int, int]

# RGB values for each colour token stored on the board
TOKEN_COLORS: Dict[str, Color] = {
    "cyan": (0, 255, 255),
    "blue": (0, 0, 255),
    "orange": (255, 165, 0),
    "yellow": (255, 255, 0),
    "green": (0, 255, 0),
    "purple": (128, 0, 128),
    "red": (255, 0, 0),
}
EMPTY_COLOR: Color = (0, 0, 0)
GRID_COLOR: Color = (50, 50, 50)

KEY_COMMANDS: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
    pygame.K_SPACE: Command.TOGGLE_PAUSE,
    pygame.K_RETURN: Command.START,
    pygame.K_r: Command.RESET,
}


def command_for_key(key: int) -> Optional[Command]:
    """Return the command bound to ``key`` or ``None`` for unbound keys."""

    return KEY_COMMANDS.get(key)


def cell_color(token: Optional[str], clearing: bool = False) -> Color:
    """Map a colour token to RGB; rows being cleared are drawn at half brightness."""

    if token is None:
        return EMPTY_COLOR
    color = TOKEN_COLORS[token]
    if clearing:
        return (color[0] // 2, color[1] // 2, color[2] // 2)
    return color


def caption(snapshot: Snapshot) -> str:
    labels = {
        GameStatus.NOT_STARTED: "Press Enter - ",
        GameStatus.PAUSED: "Paused - ",
        GameStatus.GAME_OVER: "Game Over (R to reset) - ",
        GameStatus.RUNNING: "",
    }
    return (
        f"Blockdrop - {labels[snapshot.status]}"
        f"Score: {snapshot.score}  Level: {snapshot.level}"
    )


def draw(screen: pygame.Surface, snapshot: Snapshot) -> None:
    """Render locked cells with the active piece composited on top."""

    grid = render_grid(snapshot)
    for y, row in enumerate(grid):
        clearing = y in snapshot.rows_pending_clear
        for x, token in enumerate(row):
            rect = pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(screen, cell_color(token, clearing), rect)
            pygame.draw.rect(screen, GRID_COLOR, rect, 1)


class GameRunner:
    """Own the pygame window and pump input and time into the engine."""

    def __init__(self, engine: Optional[GameEngine] = None) -> None:
        self.engine = engine or GameEngine()
        self._running = False
        self._screen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None

    @property
    def running(self) -> bool:
        return self._running

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self._running = False
        elif event.type == pygame.KEYDOWN:
            command = command_for_key(event.key)
            if command is not None:
                self.engine.dispatch(command)

    async def run(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode((WIDTH * CELL_SIZE, HEIGHT * CELL_SIZE))
        self._clock = pygame.time.Clock()
        LOGGER.info("Window opened")

        self._running = True
        while self._running:
            dt = self._clock.tick(FPS)
            for event in pygame.event.get():
                self.handle_event(event)

            snapshot = self.engine.advance(dt)
            self._screen.fill(EMPTY_COLOR)
            draw(self._screen, snapshot)
            pygame.display.set_caption(caption(snapshot))
            pygame.display.flip()

            # Yield to the host event loop to keep it responsive
            await asyncio.sleep(0)

        pygame.quit()
        LOGGER.info("Window closed")

    def stop(self) -> None:
        self._running = False


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    asyncio.run(GameRunner().run())


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
