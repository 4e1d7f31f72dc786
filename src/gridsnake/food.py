# food.py
from __future__ import annotations

import random
from typing import Collection, Optional

import numpy as np  # type: ignore

from .errors import BoardFullError
from .grid import Cell, Grid


# ---------- Helpers ----------
def spawn_food(grid: Grid, snake: Collection[Cell], rng: random.Random) -> Cell:
    """
    Rejection sampling: draw uniformly over the whole board until the cell
    is free. Never returns on a full board, so callers check first.
    """
    while True:
        fx = rng.randrange(grid.size)
        fy = rng.randrange(grid.size)
        if (fx, fy) not in snake:
            return (fx, fy)


def free_cell_mask(grid: Grid, snake: Collection[Cell]) -> np.ndarray:
    """Boolean [size, size] array indexed [y, x]; True where no snake cell is."""
    mask = np.ones((grid.size, grid.size), dtype=bool)
    for x, y in snake:
        mask[y, x] = False
    return mask


# ---------- Placers ----------
class RejectionPlacer:
    """Default placer, cheap while the snake covers a small part of the board."""

    def __init__(self, grid: Grid, rng: Optional[random.Random] = None):
        self.grid = grid
        self.rng = rng or random.Random()

    def place(self, snake: Collection[Cell]) -> Cell:
        if len(snake) >= self.grid.area:
            raise BoardFullError("snake covers every cell")
        return spawn_food(self.grid, snake, self.rng)


class FreeCellPlacer:
    """
    Enumerates free cells and picks one uniformly. Same distribution as
    rejection sampling, but bounded work on crowded boards.
    """

    def __init__(self, grid: Grid, rng: Optional[random.Random] = None):
        self.grid = grid
        self.rng = rng or random.Random()

    def place(self, snake: Collection[Cell]) -> Cell:
        ys, xs = np.nonzero(free_cell_mask(self.grid, snake))
        if len(xs) == 0:
            raise BoardFullError("snake covers every cell")
        i = self.rng.randrange(len(xs))
        return (int(xs[i]), int(ys[i]))


PLACERS = {
    "rejection": RejectionPlacer,
    "enumerate": FreeCellPlacer,
}


def make_placer(strategy: str, grid: Grid, rng: Optional[random.Random] = None):
    return PLACERS[strategy](grid, rng)
