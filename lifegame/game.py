"""Game of Life board state and the pattern waiting to be placed on it."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional, Sequence

W_SIZE = 900
N_TILE = 180
S_TILE = W_SIZE // N_TILE
FPS = 120
FRAME_INTERVAL = 1000 // FPS
NB_PATTERNS_TYPE = 7

Grid = list[list[int]]


def _empty_grid() -> Grid:
    return [[0] * N_TILE for _ in range(N_TILE)]


@dataclass
class Game:
    """A bounded N_TILE x N_TILE board, its run state and the selected pattern."""

    grid: Grid = field(default_factory=_empty_grid)
    iteration: int = 0
    population: int = 0
    running: bool = True
    active: bool = True
    speed: int = 10
    size: int = 5
    to_place: Optional[Grid] = None

    @property
    def to_place_height(self) -> int:
        return len(self.to_place) if self.to_place else 0

    @property
    def to_place_length(self) -> int:
        return len(self.to_place[0]) if self.to_place else 0

    def count_neighbours(self, y: int, x: int) -> int:
        """Count live cells around (y, x); cells beyond the border are dead."""
        return sum(
            self.grid[ty][tx]
            for ty in range(max(y - 1, 0), min(y + 2, N_TILE))
            for tx in range(max(x - 1, 0), min(x + 2, N_TILE))
            if (ty, tx) != (y, x)
        )

    def step(self) -> None:
        """Advance the board by one generation."""
        self.iteration += 1
        new_grid = _empty_grid()
        population = 0
        for y, row in enumerate(self.grid):
            new_row = new_grid[y]
            for x, cell in enumerate(row):
                nei = self.count_neighbours(y, x)
                if nei == 3 or (cell and nei == 2):
                    new_row[x] = 1
                    population += 1
        self.population = population
        self.grid = new_grid

    def reset_map(self) -> None:
        """Clear every cell."""
        self.grid = _empty_grid()

    def random_map(self, rng: Optional[random.Random] = None) -> None:
        """Fill the board with random live and dead cells."""
        source = rng if rng is not None else random
        self.grid = [[source.randrange(2) for _ in range(N_TILE)] for _ in range(N_TILE)]

    def select_pattern(self, cells: Sequence[Sequence[int]]) -> None:
        """Make a copy of ``cells`` the pattern to place on the next click."""
        self.to_place = [[1 if c else 0 for c in row] for row in cells]

    def clear_pattern(self) -> None:
        """Drop the pattern waiting to be placed."""
        self.to_place = None

    def rotate_pattern(self) -> None:
        """Rotate the pending pattern a quarter turn clockwise."""
        if not self.to_place:
            return
        self.to_place = [list(col) for col in zip(*reversed(self.to_place))]

    def click(self, px: int, py: int) -> None:
        """Handle a click at pixel (px, py): place the pending pattern or toggle a cell."""
        x = px // self.size
        y = py // self.size
        if self.to_place:
            for dy, row in enumerate(self.to_place):
                for dx, cell in enumerate(row):
                    ty, tx = y + dy, x + dx
                    if cell and 0 <= ty < N_TILE and 0 <= tx < N_TILE:
                        self.grid[ty][tx] = cell
            self.to_place = None
        elif 0 <= y < N_TILE and 0 <= x < N_TILE:
            self.grid[y][x] = 0 if self.grid[y][x] else 1