# src/gridsnake/__init__.py
"""Single-player grid snake: fixed-timestep core plus a pygame front end."""

from .config import Config, CFG
from .errors import GridSnakeError, ConfigError, BoardFullError
from .game import Game, Snapshot, StepResult
from .storage import HighScore, JsonFileStore, MemoryStore

__all__ = [
    "Config", "CFG",
    "GridSnakeError", "ConfigError", "BoardFullError",
    "Game", "Snapshot", "StepResult",
    "HighScore", "JsonFileStore", "MemoryStore",
]
