"""
__main__.py — Entry point.

Run with:
    python -m gridsnake

Requires:
    pip install pygame
"""

import sys

import pygame

from .controller import GameController


def main() -> None:
    print("[snake] Starting snake game... have fun :)")
    try:
        controller = GameController()
    except pygame.error as exc:
        print(f"[display] Could not open the game window: {exc}")
        sys.exit(1)
    controller.run()


if __name__ == "__main__":
    main()
