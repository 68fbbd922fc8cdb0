"""Keyboard-driven menu: home actions, speed control and the pattern browser."""

from __future__ import annotations

import curses
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Mapping, Optional, Protocol, Sequence

import pygame

from lifegame.game import FPS, NB_PATTERNS_TYPE, Game
from lifegame.pattern import Pattern, PatternType


class Status(Enum):
    """Which screen of the menu is shown."""

    HOME = "home"
    SPEED = "speed"
    PATTERNS = "patterns"


class Focus(IntEnum):
    """Which column of the pattern browser takes the arrow keys."""

    CATEGORY = 0
    PATTERN = 1


class MenuView(Protocol):
    """Something that shows the menu's state."""

    def draw(self, menu: "Menu", game: Optional[Game]) -> None: ...

    def close(self) -> None: ...


@dataclass
class Menu:
    """Menu state; every key press updates it and redraws the view, if any."""

    storage: Mapping[PatternType, Sequence[Pattern]]
    view: Optional[MenuView] = None
    status: Status = Status.HOME
    focus: Focus = Focus.CATEGORY
    index_categ: int = 0
    index_pattern: int = 0

    def __post_init__(self) -> None:
        self._redraw(None)

    @classmethod
    def open_curses(cls, storage: Mapping[PatternType, Sequence[Pattern]]) -> "Menu":
        """Create a menu shown in the terminal through curses."""
        return cls(storage, view=CursesView())

    def __enter__(self) -> "Menu":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def category(self) -> PatternType:
        return PatternType(self.index_categ)

    @property
    def patterns(self) -> Sequence[Pattern]:
        return self.storage.get(self.category, ())

    @property
    def selected_pattern(self) -> Optional[Pattern]:
        patterns = self.patterns
        if 0 <= self.index_pattern < len(patterns):
            return patterns[self.index_pattern]
        return None

    def close(self) -> None:
        """Release the view."""
        if self.view is not None:
            self.view.close()
            self.view = None

    def key_pressed(self, game: Game, key: int) -> None:
        """Apply a key press (a pygame key code) to the menu and the game."""
        handlers = {
            Status.HOME: self._home_key,
            Status.SPEED: self._speed_key,
            Status.PATTERNS: self._patterns_key,
        }
        handlers[self.status](game, key)
        self._redraw(game)

    def _redraw(self, game: Optional[Game]) -> None:
        if self.view is not None:
            self.view.draw(self, game)

    def _home_key(self, game: Game, key: int) -> None:
        if key == pygame.K_1:
            game.running = not game.running
        elif key == pygame.K_2:
            game.random_map()
        elif key == pygame.K_3:
            game.reset_map()
        elif key == pygame.K_4:
            self.status = Status.SPEED
        elif key == pygame.K_5:
            self.status = Status.PATTERNS
            self.focus = Focus.CATEGORY

    def _speed_key(self, game: Game, key: int) -> None:
        if key == pygame.K_LEFT:
            if game.speed > 1:
                game.speed -= 1
        elif key == pygame.K_RIGHT:
            if game.speed < FPS:
                game.speed += 1
        elif key == pygame.K_ESCAPE:
            self.status = Status.HOME

    def _patterns_key(self, game: Game, key: int) -> None:
        if key == pygame.K_UP:
            if self.focus is Focus.PATTERN:
                if self.index_pattern:
                    self.index_pattern -= 1
            elif self.index_categ:
                self.index_categ -= 1
        elif key == pygame.K_DOWN:
            if self.focus is Focus.PATTERN:
                if self.index_pattern < len(self.patterns) - 1:
                    self.index_pattern += 1
            elif self.index_categ != NB_PATTERNS_TYPE - 1:
                self.index_categ += 1
        elif key == pygame.K_RETURN:
            if self.focus is Focus.CATEGORY:
                self.focus = Focus.PATTERN
            else:
                pattern = self.selected_pattern
                if pattern is not None:
                    game.select_pattern(pattern.cells)
        elif key == pygame.K_ESCAPE:
            if self.focus is Focus.PATTERN:
                self.index_pattern = 0
                self.focus = Focus.CATEGORY
                game.clear_pattern()
            else:
                self.status = Status.HOME
        elif key == pygame.K_r:
            if self.focus is Focus.PATTERN:
                game.rotate_pattern()


def _put(win: "curses.window", y: int, x: int, text: str) -> None:
    try:
        win.addstr(y, x, text)
    except curses.error:
        pass


def _box(win: "curses.window") -> None:
    try:
        win.box()
    except curses.error:
        pass


class CursesView:
    """Shows the menu in a terminal."""

    def __init__(self) -> None:
        self._main = curses.initscr()
        try:
            self._menu = self._main.subwin(5, 120, 50, 40)
            self._patterns = self._main.subwin(46, 201, 2, 5)
            self._category = self._patterns.subwin(46, 20, 2, 5)
            self._pattern = self._patterns.subwin(46, 30, 2, 24)
            self._info = self._patterns.subwin(46, 153, 2, 53)
        except curses.error:
            curses.endwin()
            raise
        self._main.refresh()

    def close(self) -> None:
        curses.endwin()

    def draw(self, menu: Menu, game: Optional[Game]) -> None:
        if menu.status is Status.HOME:
            self._patterns.clear()
            self._patterns.refresh()
            self._draw_home()
        elif menu.status is Status.SPEED:
            self._draw_speed(game.speed if game is not None else 0)
        else:
            self._draw_patterns(menu)

    @staticmethod
    def _hide_cursor() -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            pass

    def _draw_home(self) -> None:
        self._menu.clear()
        _box(self._menu)
        for x, label in ((4, "1. Pause"), (28, "2. Random"), (54, "3. Reset"),
                         (80, "4. Speed"), (104, "5. Patterns")):
            _put(self._menu, 2, x, label)
        self._hide_cursor()
        self._menu.refresh()

    def _draw_speed(self, speed: int) -> None:
        self._menu.clear()
        _box(self._menu)
        _put(self._menu, 2, 57, f"< {speed} >")
        self._hide_cursor()
        self._menu.refresh()

    def _draw_patterns(self, menu: Menu) -> None:
        _box(self._patterns)
        self._patterns.refresh()

        self._category.clear()
        for row, kind in enumerate(PatternType, start=2):
            _put(self._category, row, 5, kind.label)
        _put(self._category, 2 + menu.index_categ, 2, "->")
        _box(self._category)
        if menu.focus is Focus.CATEGORY:
            _put(self._category, 0, 6, " Select ")
        self._category.refresh()

        self._pattern.clear()
        for row, pattern in enumerate(menu.patterns, start=2):
            _put(self._pattern, row, 5, pattern.name)
        _put(self._pattern, 2 + menu.index_pattern, 2, "->")
        _box(self._pattern)
        if menu.focus is Focus.PATTERN:
            _put(self._pattern, 0, 6, " Select ")
        self._pattern.refresh()

        self._info.clear()
        pattern = menu.selected_pattern
        if pattern is not None:
            _put(self._info, 2, 3, f"Name: {pattern.name}")
            _put(self._info, 3, 3, f"Dimension: {pattern.length}x{pattern.height}")
            for y, row in enumerate(pattern.cells):
                _put(self._info, y + 5, 3, "".join("#" if c else " " for c in row))
            _box(self._info)
        self._info.refresh()

        self._menu.clear()
        _box(self._menu)
        _put(self._menu, 2, 56, "r. Rotate")
        self._menu.refresh()