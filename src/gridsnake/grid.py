# grid.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .errors import ConfigError

Cell = Tuple[int, int]

# Returned by the wall policy when a coordinate leaves the board
REJECTED = None


def wrap_or_reject(coord: int, axis_size: int, wrap: bool) -> Optional[int]:
    """
    Map a coordinate onto an axis of length ``axis_size``.

    Wrap policy: any integer maps into [0, axis_size); Python's ``%`` already
    returns a non-negative result for a positive modulus, so -1 -> axis_size-1.
    Wall policy: anything outside [0, axis_size) is REJECTED.
    """
    if wrap:
        return coord % axis_size
    if 0 <= coord < axis_size:
        return coord
    return REJECTED


@dataclass(frozen=True)
class Grid:
    """Square board of ``size`` x ``size`` cells with a fixed boundary policy."""
    size: int
    wrap: bool = True

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ConfigError(f"grid size must be positive, got {self.size}")

    @property
    def area(self) -> int:
        return self.size * self.size

    @property
    def center(self) -> Cell:
        mid = self.size // 2
        return (mid, mid)

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.size and 0 <= y < self.size

    def resolve(self, cell: Cell) -> Optional[Cell]:
        """Apply the boundary policy to both axes; None when a wall is hit."""
        x = wrap_or_reject(cell[0], self.size, self.wrap)
        y = wrap_or_reject(cell[1], self.size, self.wrap)
        if x is REJECTED or y is REJECTED:
            return REJECTED
        return (x, y)

    def cells(self) -> Iterator[Cell]:
        for y in range(self.size):
            for x in range(self.size):
                yield (x, y)
