# clock.py
from __future__ import annotations

from typing import Callable, Optional, Tuple


def advance(
    prev_ms: Optional[int],
    now_ms: int,
    accumulator: int,
    tick_ms: int,
) -> Tuple[int, int]:
    """
    Fixed-timestep bookkeeping for one display frame, in whole milliseconds.

    Adds the elapsed time since ``prev_ms`` to ``accumulator`` and returns
    ``(new_accumulator, ticks)`` where ``ticks`` is how many whole simulation
    steps fit. ``prev_ms is None`` marks the first frame and counts as zero
    elapsed time.
    """
    delta = 0 if prev_ms is None else max(0, now_ms - prev_ms)
    ticks, accumulator = divmod(accumulator + delta, tick_ms)
    return accumulator, ticks


class FixedStepClock:
    """Stateful wrapper around ``advance`` driven by render timestamps (ms)."""

    def __init__(self, tick_ms: int, max_ticks_per_frame: int = 0):
        self.tick_ms = tick_ms
        self.max_ticks_per_frame = max_ticks_per_frame
        self.last_ms: Optional[int] = None
        self.accumulator = 0

    def reset(self, now_ms: Optional[int] = None) -> None:
        """Forget accumulated time; the next frame starts counting from ``now_ms``."""
        self.accumulator = 0
        self.last_ms = now_ms

    def idle(self, now_ms: int) -> None:
        """Paused frame: keep the timestamp fresh, accumulate nothing."""
        self.last_ms = now_ms

    def tick(
        self,
        now_ms: int,
        step: Callable[[], object],
        should_continue: Callable[[], bool],
    ) -> int:
        """
        Run ``step`` once per whole tick that elapsed. Stops early as soon as
        ``should_continue()`` goes False (game paused or died mid-frame).
        Returns the number of steps actually run.
        """
        accumulator, ticks = advance(
            self.last_ms, now_ms, self.accumulator, self.tick_ms
        )
        self.last_ms = now_ms
        if self.max_ticks_per_frame and ticks > self.max_ticks_per_frame:
            # Excess time beyond the cap is dropped, not replayed later
            ticks = self.max_ticks_per_frame

        ran = 0
        while ran < ticks and should_continue():
            step()
            ran += 1
        # Ticks the game refused to take stay in the accumulator
        self.accumulator = accumulator + (ticks - ran) * self.tick_ms
        return ran
