"""Graphical window: draws the board and feeds input to the game and menu."""

from __future__ import annotations

from typing import Optional

import pygame

from lifegame.game import FPS, FRAME_INTERVAL, S_TILE, W_SIZE, Game
from lifegame.menu import Menu

ALIVE = (0, 0, 0)
DEAD = (255, 255, 255)
PREVIEW = (255, 0, 0)


class Window:
    """Draws ``game`` on a surface and dispatches events to it and to ``menu``."""

    def __init__(self, game: Game, menu: Menu, surface: Optional[pygame.Surface] = None) -> None:
        self.game = game
        self.menu = menu
        self.mouse_pos = (0, 0)
        self._owns_display = surface is None
        if surface is None:
            pygame.init()
            pygame.display.set_caption("The life game")
            surface = pygame.display.set_mode((W_SIZE, W_SIZE))
        self.surface = surface

    def render(self) -> None:
        """Draw every cell, then the pending pattern under the mouse."""
        for y, row in enumerate(self.game.grid):
            for x, cell in enumerate(row):
                rect = (S_TILE * x, S_TILE * y, S_TILE, S_TILE)
                self.surface.fill(ALIVE if cell else DEAD, rect)
        if self.game.to_place:
            px = self.mouse_pos[0] // self.game.size
            py = self.mouse_pos[1] // self.game.size
            for y, row in enumerate(self.game.to_place):
                for x, cell in enumerate(row):
                    if cell:
                        rect = (S_TILE * (px + x), S_TILE * (py + y), S_TILE, S_TILE)
                        self.surface.fill(PREVIEW, rect)

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one event: quit, key press, mouse motion or click."""
        if event.type == pygame.QUIT:
            self.game.active = False
        elif event.type == pygame.KEYDOWN:
            self.menu.key_pressed(self.game, event.key)
        elif event.type == pygame.MOUSEMOTION:
            self.mouse_pos = event.pos
        elif event.type == pygame.MOUSEBUTTONUP:
            self.mouse_pos = event.pos
            self.game.click(*event.pos)

    def run(self) -> None:
        """Run the main loop until the game stops being active."""
        rate = 0
        while self.game.active:
            if not rate and self.game.running:
                self.game.step()
            for event in pygame.event.get():
                self.handle_event(event)
            if self._owns_display:
                self.mouse_pos = pygame.mouse.get_pos()
            self.render()
            if self._owns_display:
                pygame.display.flip()
            pygame.time.delay(FRAME_INTERVAL)
            rate = (rate + 1) % max(FPS // self.game.speed, 1)