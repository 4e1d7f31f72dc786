# errors.py


class GridSnakeError(Exception):
    """Base class for errors raised by gridsnake."""


class ConfigError(GridSnakeError, ValueError):
    """Static configuration is unusable (bad grid size, speed, ...)."""


class BoardFullError(GridSnakeError):
    """No free cell is left to place food on."""
