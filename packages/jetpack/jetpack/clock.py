"""Fixed-rate update clock driven by wall-clock frame time."""

from __future__ import annotations


class FrameClock:
    """Converts variable frame durations into a run of fixed ``dt`` updates.

    Leftover time carries into the next frame. When more than ``max_steps``
    updates are owed, the surplus is dropped so a long stall does not
    trigger an ever-growing catch-up.
    """

    def __init__(self, ups: int = 120, max_steps: int = 8) -> None:
        if ups <= 0:
            raise ValueError("ups must be positive")
        if max_steps <= 0:
            raise ValueError("max_steps must be positive")
        self._ups = ups
        self._dt = 1.0 / ups
        self._max_steps = max_steps
        self._accumulator = 0.0
        self._updates = 0

    @property
    def ups(self) -> int:
        return self._ups

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def updates(self) -> int:
        return self._updates

    def advance(self, elapsed: float) -> list[float]:
        if elapsed < 0.0:
            raise ValueError("elapsed must be non-negative")
        self._accumulator += elapsed
        steps = int(self._accumulator // self._dt)
        if steps > self._max_steps:
            steps = self._max_steps
            self._accumulator = 0.0
        else:
            self._accumulator -= steps * self._dt
        self._updates += steps
        return [self._dt] * steps

    def reset(self) -> None:
        self._accumulator = 0.0
        self._updates = 0
