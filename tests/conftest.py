import random
from collections import deque

import pytest

from gridsnake.config import Config, RIGHT
from gridsnake.game import Game
from gridsnake.snake import Snake
from gridsnake.storage import MemoryStore


def make_game(size=5, wrap=True, store=None, seed=0, tps=4, strategy="rejection"):
    cfg = Config(grid_size=size, ticks_per_second=tps, wrap=wrap,
                 food_strategy=strategy)
    return Game(cfg, store if store is not None else MemoryStore(),
                rng=random.Random(seed))


def put_snake(game, cells, direction=RIGHT, food=None):
    """Replace the game's snake with an explicit body (head first)."""
    snake = Snake(cells[0], direction)
    snake.body = deque(cells)
    snake.occupied = set(cells)
    game.snake = snake
    if food is not None:
        game.food = food
    return snake


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def game(store):
    """5x5 wrapping board, 4 ticks/s, deterministic food."""
    return make_game(store=store)


@pytest.fixture
def wall_game(store):
    return make_game(wrap=False, store=store)
