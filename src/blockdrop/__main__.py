"""Simple ASCII demo for the engine.

Run with: `python -m blockdrop`

This module prints a single frame of a freshly started game, composed of the
board plus the active piece.  Useful as a minimal smoke test that renderers
see more than a blank grid.  Pass ``--seed`` for a repeatable first piece.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from . import Command, GameEngine, render_grid


def format_grid(grid: List[List[Optional[str]]]) -> str:
    return "\n".join("".join("#" if cell else "." for cell in row) for row in grid)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Print one frame of a new game.")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    engine = GameEngine(seed=args.seed)
    snapshot = engine.dispatch(Command.START)
    print(format_grid(render_grid(snapshot)))


if __name__ == "__main__":
    main()
