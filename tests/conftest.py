import random

import pytest

from canvas_snake.config import Config
from canvas_snake.controller import GameController
from canvas_snake.persistence import MemoryHighScoreStore
from canvas_snake.scheduler import ManualScheduler


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def draw(self, snake, food, grid):
        self.calls.append((list(snake), food))


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def game(scheduler, store, renderer):
    return GameController(scheduler, store, renderer=renderer, cfg=Config(), rng=random.Random(7))
