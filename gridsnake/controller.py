"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame event loop and the 60 FPS clock.
  - Turn this frame's key-down events into the set of pressed directions.
  - Drive the game loop: tick the model, then ask the view to render.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

The controller is the only layer that imports pygame directly for events.
"""

import sys
import pygame

from .config import (
    WIDTH, HEIGHT, FPS, TITLE,
    KEYS_DOWN, KEYS_UP, KEYS_RIGHT, KEYS_LEFT, KEYS_QUIT,
)
from .model import Direction, GameModel
from .view import GameView


def _resolve(names: tuple) -> list[int]:
    return [getattr(pygame, name) for name in names]


DIRECTION_KEYS: dict[int, Direction] = {}
for _dir, _names in (
    (Direction.DOWN,  KEYS_DOWN),
    (Direction.UP,    KEYS_UP),
    (Direction.RIGHT, KEYS_RIGHT),
    (Direction.LEFT,  KEYS_LEFT),
):
    for _key in _resolve(_names):
        DIRECTION_KEYS[_key] = _dir

QUIT_KEYS = set(_resolve(KEYS_QUIT))


def pressed_directions(events: list) -> set[Direction]:
    """Directions whose key went down in this batch of events."""
    return {
        DIRECTION_KEYS[event.key]
        for event in events
        if event.type == pygame.KEYDOWN and event.key in DIRECTION_KEYS
    }


def wants_quit(events: list) -> bool:
    for event in events:
        if event.type == pygame.QUIT:
            return True
        if event.type == pygame.KEYDOWN and event.key in QUIT_KEYS:
            return True
    return False


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    """

    def __init__(self, model: GameModel = None):
        pygame.init()
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        self.clock  = pygame.time.Clock()
        self.model  = model or GameModel()
        self.view   = GameView(self.screen)

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the window is closed."""
        while True:
            self.clock.tick(FPS)
            if not self.frame(pygame.event.get()):
                self._quit()

    def frame(self, events: list) -> bool:
        """One scheduler tick: update then draw. Returns False when asked to quit."""
        if wants_quit(events):
            return False
        self.model.update(pressed_directions(events))
        self.view.render(self.model, self.clock.get_fps())
        return True

    # ── Utilities ─────────────────────────────────────────────────
    @staticmethod
    def _quit() -> None:
        pygame.quit()
        sys.exit()
