"""Conway's Game of Life with a pattern library, a pygame board and a curses menu."""

__version__ = "0.1.0"