import pygame
import pytest

from lifegame.game import FPS, NB_PATTERNS_TYPE, Game
from lifegame.menu import Focus, Menu, Status
from lifegame.pattern import Pattern, PatternType


class RecordingView:
    def __init__(self):
        self.draws = []
        self.closed = False

    def draw(self, menu, game):
        self.draws.append((menu.status, menu.focus, game))

    def close(self):
        self.closed = True


def _pattern(name, kind, cells):
    return Pattern(name=name, type=kind, height=len(cells), length=len(cells[0]),
                   cells=tuple(tuple(r) for r in cells))


@pytest.fixture
def storage():
    data = {kind: [] for kind in PatternType}
    data[PatternType.BLOCK] = [
        _pattern("line", PatternType.BLOCK, [[1, 1, 0]]),
        _pattern("dot", PatternType.BLOCK, [[1]]),
    ]
    return data


def _press(menu, game, *keys):
    for key in keys:
        menu.key_pressed(game, key)


def test_initial_state_and_first_draw(storage):
    view = RecordingView()
    menu = Menu(storage, view=view)
    assert menu.status is Status.HOME
    assert view.draws[0][0] is Status.HOME


def test_pause_toggles_running(storage):
    menu, game = Menu(storage), Game()
    _press(menu, game, pygame.K_1)
    assert game.running is False
    _press(menu, game, pygame.K_1)
    assert game.running is True


def test_random_then_reset(storage):
    menu, game = Menu(storage), Game()
    _press(menu, game, pygame.K_2)
    assert {c for row in game.grid for c in row} == {0, 1}
    _press(menu, game, pygame.K_3)
    assert sum(map(sum, game.grid)) == 0


def test_speed_screen_bounds(storage):
    menu, game = Menu(storage), Game()
    _press(menu, game, pygame.K_4)
    assert menu.status is Status.SPEED
    start = game.speed
    _press(menu, game, pygame.K_LEFT)
    assert game.speed == start - 1
    _press(menu, game, pygame.K_RIGHT, pygame.K_RIGHT)
    assert game.speed == start + 1
    game.speed = 1
    _press(menu, game, pygame.K_LEFT)
    assert game.speed == 1
    game.speed = FPS
    _press(menu, game, pygame.K_RIGHT)
    assert game.speed == FPS
    _press(menu, game, pygame.K_ESCAPE)
    assert menu.status is Status.HOME


def test_arrows_ignored_on_home(storage):
    menu, game = Menu(storage), Game()
    start = game.speed
    _press(menu, game, pygame.K_LEFT, pygame.K_DOWN)
    assert (game.speed, menu.index_categ) == (start, 0)


def test_category_navigation_is_clamped(storage):
    menu, game = Menu(storage), Game()
    _press(menu, game, pygame.K_5)
    assert (menu.status, menu.focus) == (Status.PATTERNS, Focus.CATEGORY)
    _press(menu, game, pygame.K_UP)
    assert menu.index_categ == 0
    _press(menu, game, pygame.K_DOWN)
    assert menu.category is PatternType.OSCILLATOR
    _press(menu, game, *[pygame.K_DOWN] * (NB_PATTERNS_TYPE + 3))
    assert menu.index_categ == NB_PATTERNS_TYPE - 1
    assert menu.category is PatternType.SPACEFILLER


def test_choose_and_rotate_pattern(storage):
    menu, game = Menu(storage), Game()
    _press(menu, game, pygame.K_5, pygame.K_RETURN)
    assert menu.focus is Focus.PATTERN
    assert game.to_place is None
    _press(menu, game, pygame.K_RETURN)
    assert game.to_place == [[1, 1, 0]]
    _press(menu, game, pygame.K_r)
    assert game.to_place == [[1], [1], [0]]


def test_pattern_navigation(storage):
    menu, game = Menu(storage), Game()
    _press(menu, game, pygame.K_5, pygame.K_RETURN, pygame.K_DOWN, pygame.K_DOWN)
    assert menu.index_pattern == len(storage[PatternType.BLOCK]) - 1
    assert menu.selected_pattern is storage[PatternType.BLOCK][-1]
    _press(menu, game, pygame.K_RETURN)
    assert game.to_place == [[1]]
    _press(menu, game, pygame.K_UP, pygame.K_UP)
    assert menu.index_pattern == 0


def test_escape_from_pattern_then_home(storage):
    menu, game = Menu(storage), Game()
    _press(menu, game, pygame.K_5, pygame.K_RETURN, pygame.K_DOWN, pygame.K_RETURN)
    assert game.to_place is not None
    _press(menu, game, pygame.K_ESCAPE)
    assert (menu.focus, menu.index_pattern, game.to_place) == (Focus.CATEGORY, 0, None)
    _press(menu, game, pygame.K_ESCAPE)
    assert menu.status is Status.HOME


def test_rotate_needs_pattern_focus(storage):
    menu, game = Menu(storage), Game()
    game.select_pattern([[1, 0]])
    _press(menu, game, pygame.K_5, pygame.K_r)
    assert game.to_place == [[1, 0]]


def test_empty_category_selects_nothing(storage):
    menu, game = Menu(storage), Game()
    _press(menu, game, pygame.K_5, pygame.K_DOWN, pygame.K_RETURN, pygame.K_DOWN, pygame.K_RETURN)
    assert menu.index_pattern == 0
    assert game.to_place is None


def test_view_is_redrawn_and_closed(storage):
    view = RecordingView()
    game = Game()
    with Menu(storage, view=view) as menu:
        _press(menu, game, pygame.K_4)
        assert view.draws[-1] == (Status.SPEED, Focus.CATEGORY, game)
    assert view.closed is True
    assert menu.view is None