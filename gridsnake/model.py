"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.
The controller hands it the directions pressed this tick; the view reads it.

Classes:
    Direction   — immutable (dx, dy) value object, NONE while idle
    GameModel   — body, apple, direction, score, speed, tick counter
"""

import random
from collections import deque
from typing import Iterable, Optional

from .config import (
    COLS, ROWS,
    TICKS_PER_SECOND, START_SPEED, START_LENGTH, START_POS, APPLE_START,
    STATE_IDLE, STATE_RUNNING,
)


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction."""
    NONE  = None  # filled below after class definition
    LEFT  = None
    RIGHT = None
    UP    = None
    DOWN  = None

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def is_opposite(self, other: "Direction") -> bool:
        if self.is_none or other.is_none:
            return False
        return self.x == -other.x and self.y == -other.y

    @property
    def is_none(self) -> bool:
        return self.x == 0 and self.y == 0

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction({self.x}, {self.y})"


Direction.NONE  = Direction( 0,  0)
Direction.LEFT  = Direction(-1,  0)
Direction.RIGHT = Direction( 1,  0)
Direction.UP    = Direction( 0, -1)
Direction.DOWN  = Direction( 0,  1)

# Only the first accepted key in this order is honoured per tick.
INPUT_PRIORITY = [Direction.DOWN, Direction.UP, Direction.RIGHT, Direction.LEFT]


# ─────────────────────────── GameModel ───────────────────────────
class GameModel:
    """
    Top-level model.  Owns all game state.
    The controller calls update() once per frame.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.tick: int = 0
        self.best_score: int = 0
        self.body: deque[tuple[int, int]] = deque()
        self.apple: tuple[int, int] = APPLE_START
        self.direction: Direction = Direction.NONE
        self.speed: int = START_SPEED
        self.score: int = 0
        self.reset()

    # ── Accessors ────────────────────────────────────────────────
    @property
    def head(self) -> tuple[int, int]:
        return self.body[0]

    @property
    def is_idle(self) -> bool:
        return self.direction.is_none

    @property
    def state(self) -> str:
        return STATE_IDLE if self.is_idle else STATE_RUNNING

    # ── Commands ─────────────────────────────────────────────────
    def reset(self) -> None:
        """Put everything except the tick counter and best score back to start."""
        self.apple = APPLE_START
        self.speed = START_SPEED
        self.score = 0
        self.body = deque([START_POS] * START_LENGTH)
        self.direction = Direction.NONE

    def request_direction(self, new_dir: Direction) -> bool:
        """Change direction unless it would reverse the snake. Returns True if applied."""
        if new_dir.is_none or new_dir.is_opposite(self.direction):
            return False
        self.direction = new_dir
        return True

    def update(self, pressed: Iterable[Direction] = ()) -> None:
        """Advance game logic by one tick. Called every frame."""
        pressed = set(pressed)
        for d in INPUT_PRIORITY:
            if d in pressed and self.request_direction(d):
                break

        if self._move_due():
            self._step()

        self.tick += 1

    # ── Private helpers ──────────────────────────────────────────
    def _move_due(self) -> bool:
        # Integer division: speeds that don't divide 60 give an uneven cadence.
        interval = max(1, TICKS_PER_SECOND // self.speed)
        return self.tick % interval == 0 and not self.is_idle

    def _step(self) -> None:
        hx, hy = self.head
        nx, ny = hx + self.direction.x, hy + self.direction.y

        self.body.appendleft((nx, ny))
        self.body.pop()

        # Checked before wrapping, so a head that just left the grid can't collide.
        if (nx, ny) in list(self.body)[1:]:
            self.reset()
            return

        nx, ny = nx % COLS, ny % ROWS
        self.body[0] = (nx, ny)

        if (nx, ny) == self.apple:
            self._eat()

    def _eat(self) -> None:
        # randrange excludes the last column and row, matching the original game.
        self.apple = (self.rng.randrange(COLS - 1), self.rng.randrange(ROWS - 1))
        self.body.append(self.head)
        self.score += 1
        if self.score > self.best_score:
            self.best_score = self.score
