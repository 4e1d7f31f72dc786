# snake.py
from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, Set, Tuple

from .config import DIRECTIONS, RIGHT
from .grid import Cell

Direction = Tuple[int, int]


def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


class Snake:
    """
    Body cells head-first plus the two direction fields.

    ``pending`` is what input last asked for, ``direction`` is what the
    previous tick actually applied. ``commit()`` copies one into the other
    exactly once per tick.
    """

    def __init__(self, head: Cell, direction: Direction = RIGHT):
        self.body: Deque[Cell] = deque([head])   # head at index 0
        self.occupied: Set[Cell] = {head}        # O(1) collision lookup
        self.direction: Direction = direction
        self.pending: Direction = direction

    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def tail(self) -> Cell:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.body)

    def __contains__(self, cell: object) -> bool:
        return cell in self.occupied

    def request_turn(self, direction: Direction) -> bool:
        """Buffer a turn; reversals and non-unit vectors are ignored."""
        if direction not in DIRECTIONS:
            return False
        # Keep the canonical int tuple; (0.0, -1.0) compares equal to UP
        direction = DIRECTIONS[DIRECTIONS.index(direction)]
        if is_opposite(direction, self.direction):
            return False
        self.pending = direction
        return True

    def commit(self) -> Direction:
        self.direction = self.pending
        return self.direction

    def next_head(self) -> Cell:
        """Unbounded candidate head; the grid decides what happens at edges."""
        hx, hy = self.head
        dx, dy = self.direction
        return (hx + dx, hy + dy)

    def advance(self, new_head: Cell, grow: bool) -> None:
        """Prepend ``new_head``; drop the tail unless growing."""
        self.body.appendleft(new_head)
        self.occupied.add(new_head)
        if not grow:
            old_tail = self.body.pop()
            self.occupied.discard(old_tail)
