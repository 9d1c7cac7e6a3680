from collections import deque

import pygame
import pytest

from gridsnake.config import (
    WIDTH, HEIGHT, GRID_SIZE, SNAKE_COL, APPLE_COL, BG, IDLE_PROMPT,
)
from gridsnake.model import Direction
from gridsnake.view import GameView, status_text


@pytest.fixture
def view():
    pygame.init()
    surface = pygame.Surface((WIDTH, HEIGHT))
    yield GameView(surface)
    pygame.quit()


def tile_centre(x, y):
    return (x * GRID_SIZE + GRID_SIZE // 2, y * GRID_SIZE + GRID_SIZE // 2)


def test_status_prompt_while_idle(model):
    assert status_text(model, 60.0) == IDLE_PROMPT


def test_status_stats_while_running(model):
    model.direction = Direction.LEFT
    model.score = 4
    model.best_score = 9
    assert status_text(model, 59.876) == "FPS: 59.88 Score: 4 Best Score: 9"


def test_render_draws_body_and_apple_tiles(view, model):
    model.body = deque([(10, 10), (9, 10), (8, 10)])
    model.apple = (20, 15)
    view.render(model, flip=False)

    for cell in model.body:
        assert view.screen.get_at(tile_centre(*cell))[:3] == SNAKE_COL
    assert view.screen.get_at(tile_centre(20, 15))[:3] == APPLE_COL
    assert view.screen.get_at(tile_centre(25, 20))[:3] == BG


def test_render_does_not_touch_model(view, model):
    model.direction = Direction.UP
    before = (list(model.body), model.apple, model.direction, model.score, model.tick)
    view.render(model, fps=60.0, flip=False)
    after = (list(model.body), model.apple, model.direction, model.score, model.tick)
    assert before == after


def test_font_falls_back_when_system_font_fails(monkeypatch, model):
    def broken_sysfont(*args, **kwargs):
        raise OSError("font lookup failed")

    pygame.init()
    monkeypatch.setattr(pygame.font, "SysFont", broken_sysfont)
    view = GameView(pygame.Surface((WIDTH, HEIGHT)))
    assert isinstance(view.font, pygame.font.Font)

    model.body = deque([(10, 10), (9, 10), (8, 10)])
    view.render(model, flip=False)
    assert view.screen.get_at(tile_centre(10, 10))[:3] == SNAKE_COL
    pygame.quit()
