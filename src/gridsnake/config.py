# config.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import ConfigError

# ----- Colors -----
BG         = (16, 18, 28)
BOARD      = (28, 31, 46)
SNAKE      = (80, 200, 120)
SNAKE_HEAD = (120, 235, 150)
FOOD       = (255, 77, 77)
EYE        = (0, 0, 0)
TEXT       = (230, 233, 255)
OVERLAY    = (0, 0, 0, 140)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS: Tuple[Tuple[int, int], ...] = (UP, DOWN, LEFT, RIGHT)

FOOD_STRATEGIES = ("rejection", "enumerate")

# Height of the score bar drawn above the board, in pixels
HUD_PX = 32


# ----- Tunables (fixed for the lifetime of a game) -----
@dataclass(frozen=True)
class Config:
    grid_size: int = 20
    ticks_per_second: int = 10
    wrap: bool = True                 # False -> walls are fatal
    food_strategy: str = "rejection"
    seed: Optional[int] = None
    storage_key: str = "snake_hi_simple"
    high_score_path: str = "~/.gridsnake/scores.json"
    cell_px: int = 24
    fps: int = 60
    max_ticks_per_frame: int = 0      # 0 -> never drop accumulated time

    def __post_init__(self) -> None:
        # One cell for the head, at least one more for food
        if self.grid_size < 2:
            raise ConfigError(f"grid_size must be at least 2, got {self.grid_size}")
        if not 0 < self.ticks_per_second <= 1000:
            raise ConfigError(
                f"ticks_per_second must be in 1..1000, got {self.ticks_per_second}"
            )
        if self.food_strategy not in FOOD_STRATEGIES:
            raise ConfigError(
                f"food_strategy must be one of {FOOD_STRATEGIES}, got {self.food_strategy!r}"
            )
        if self.cell_px <= 0 or self.fps <= 0:
            raise ConfigError("cell_px and fps must be positive")
        if self.max_ticks_per_frame < 0:
            raise ConfigError("max_ticks_per_frame cannot be negative")

    @property
    def tick_ms(self) -> int:
        return 1000 // self.ticks_per_second

    @property
    def window_size(self) -> Tuple[int, int]:
        side = self.grid_size * self.cell_px
        return side, side + HUD_PX


CFG = Config()
