"""
view.py — View layer.

Draws one frame from a GameModel snapshot: a solid tile per body cell,
a tile for the apple, and a single status line in the top-left corner.
Never mutates the model.

Public API:
    GameView(screen)         — bind to a pygame surface
    view.render(model, fps)  — draw the current frame
"""

import pygame

from .config import (
    GRID_SIZE, BG, SNAKE_COL, APPLE_COL, TEXT_COL,
    FONT_NAME, FONT_SIZE, IDLE_PROMPT, STATUS_FMT,
)
from .model import GameModel


def status_text(model: GameModel, fps: float) -> str:
    """The HUD line: a start prompt while idle, live stats while running."""
    if model.is_idle:
        return IDLE_PROMPT
    return STATUS_FMT.format(fps=fps, score=model.score, best=model.best_score)


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a GameModel snapshot."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._init_font()

    # ── Main entry ───────────────────────────────────────────────
    def render(self, model: GameModel, fps: float = 0.0, flip: bool = True) -> None:
        self.screen.fill(BG)

        for x, y in model.body:
            self._draw_tile(x, y, SNAKE_COL)
        self._draw_tile(*model.apple, APPLE_COL)

        self._draw_status(status_text(model, fps))

        if flip:
            pygame.display.flip()

    # ── Primitives ───────────────────────────────────────────────
    def _draw_tile(self, x: int, y: int, color: tuple) -> None:
        rect = pygame.Rect(x * GRID_SIZE, y * GRID_SIZE, GRID_SIZE, GRID_SIZE)
        pygame.draw.rect(self.screen, color, rect)

    def _draw_status(self, text: str) -> None:
        surf = self.font.render(text, True, TEXT_COL)
        self.screen.blit(surf, (2, 2))

    # ── Font init ─────────────────────────────────────────────────
    def _init_font(self) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        except Exception:
            self.font = pygame.font.Font(None, FONT_SIZE)
