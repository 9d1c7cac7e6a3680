import os

# Headless pygame for the view and controller tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pytest

from gridsnake.model import GameModel


@pytest.fixture
def model():
    return GameModel(rng=random.Random(1234))
