# game.py
from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from .clock import FixedStepClock
from .config import CFG, RIGHT, Config
from .food import make_placer
from .grid import REJECTED, Cell, Grid
from .snake import Direction, Snake
from .storage import HighScore, KeyValueStore, MemoryStore

logger = logging.getLogger(__name__)


class StepResult(enum.Enum):
    IDLE = "idle"          # not running, or already dead
    MOVED = "moved"
    ATE = "ate"
    HIT_WALL = "wall"
    HIT_SELF = "self"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one frame, handed to the renderer."""
    snake: Tuple[Cell, ...]        # head at index 0
    food: Cell
    direction: Direction
    score: int
    high_score: int
    running: bool
    dead: bool
    grid_size: int


# ---------- State ----------
class Game:
    """
    One owned game-state record: snake, food, session flags and clock.

    Input calls ``turn`` / ``start`` / ``restart``; the display loop calls
    ``frame`` with a millisecond timestamp once per rendered frame and reads
    ``snapshot()`` afterwards.
    """

    def __init__(
        self,
        config: Config = CFG,
        store: Optional[KeyValueStore] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.grid = Grid(config.grid_size, wrap=config.wrap)
        self.rng = rng or random.Random(config.seed)
        self.placer = make_placer(config.food_strategy, self.grid, self.rng)
        self.high_scores = HighScore(store if store is not None else MemoryStore(),
                                     config.storage_key)
        self.high_score = self.high_scores.read()
        self.clock = FixedStepClock(config.tick_ms, config.max_ticks_per_frame)
        self.reset()

    # ----- lifecycle -----
    def reset(self) -> None:
        """Fresh board: one head at the center heading right, food placed, not running."""
        self.snake = Snake(self.grid.center, RIGHT)
        self.score = 0
        self.running = False
        self.dead = False
        self.death_cause: Optional[StepResult] = None
        self.clock.reset()
        self.place_food()

    def start(self, now_ms: Optional[int] = None) -> None:
        if self.dead:
            self.reset()
        self.clock.reset(now_ms)
        self.running = True
        logger.info("Game started")

    def restart(self, now_ms: Optional[int] = None) -> None:
        self.reset()
        self.start(now_ms)

    def pause(self) -> None:
        self.running = False

    def toggle_pause(self, now_ms: Optional[int] = None) -> None:
        """Start/resume when stopped, pause when running."""
        if self.running:
            self.pause()
        else:
            self.start(now_ms)

    # ----- input -----
    def turn(self, dx: int, dy: int) -> bool:
        accepted = self.snake.request_turn((dx, dy))
        if not accepted:
            logger.debug("Ignored turn (%d, %d) while heading %s", dx, dy, self.snake.direction)
        return accepted

    # ----- simulation -----
    def place_food(self) -> Cell:
        self.food = self.placer.place(self.snake.occupied)
        return self.food

    def step(self) -> StepResult:
        """Advance the simulation by exactly one tick."""
        if self.dead or not self.running:
            return StepResult.IDLE

        # Commit direction once per tick
        self.snake.commit()

        # Wall collision (wrap policy never rejects)
        new_head = self.grid.resolve(self.snake.next_head())
        if new_head is REJECTED:
            return self._game_over(StepResult.HIT_WALL)

        # Self collision, checked against the pre-move body
        if new_head in self.snake:
            return self._game_over(StepResult.HIT_SELF)

        # Move / grow
        if new_head == self.food:
            self.snake.advance(new_head, grow=True)
            self.score += 1
            logger.debug("Ate food at %s, score %d", new_head, self.score)
            self.place_food()
            return StepResult.ATE

        self.snake.advance(new_head, grow=False)
        return StepResult.MOVED

    def frame(self, now_ms: int) -> int:
        """
        Feed one display timestamp (ms). Runs as many whole ticks as
        elapsed time allows while the game is running; returns that count.
        """
        if not self.running or self.dead:
            self.clock.idle(now_ms)
            return 0
        return self.clock.tick(now_ms, self.step, self.is_active)

    def is_active(self) -> bool:
        return self.running and not self.dead

    def _game_over(self, cause: StepResult) -> StepResult:
        self.running = False
        self.dead = True
        self.death_cause = cause
        logger.info("Snake died (%s) with score %d", cause.value, self.score)
        self.high_scores.submit(self.score)
        self.high_score = self.high_scores.read()
        return cause

    # ----- renderer view -----
    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            direction=self.snake.direction,
            score=self.score,
            high_score=self.high_score,
            running=self.running,
            dead=self.dead,
            grid_size=self.grid.size,
        )
