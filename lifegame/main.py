"""Command entry point: load patterns, open the menu and the window, and play."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import pygame

from lifegame.game import Game
from lifegame.menu import Menu
from lifegame.pattern import load_patterns
from lifegame.window import Window


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game; returns the exit status."""
    parser = argparse.ArgumentParser(prog="lifegame", description="Conway's Game of Life.")
    parser.add_argument("--patterns", default="patterns",
                        help="directory of pattern files (default: %(default)s)")
    args = parser.parse_args(argv)

    storage = load_patterns(args.patterns)
    with Menu.open_curses(storage) as menu:
        game = Game()
        try:
            Window(game, menu).run()
        finally:
            pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())