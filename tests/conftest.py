import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

import pytest

from martians.api.config import GameConfig
from martians.app.timers import Timers
from martians.game.arena import Arena


@pytest.fixture
def cfg():
    return GameConfig(canvas_size=(500, 500), seed=1234)


@pytest.fixture
def arena():
    return Arena()


@pytest.fixture
def timers():
    return Timers(now_ms=0)
