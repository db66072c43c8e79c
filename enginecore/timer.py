"""A stopwatch that accumulates elapsed time from a clock."""

from __future__ import annotations

import time
from typing import Callable

_EPOCH = time.perf_counter()


def _seconds_since_start() -> float:
    return time.perf_counter() - _EPOCH


class Timer:
    """Accumulating stopwatch.

    ``clock`` returns seconds; by default it counts from when this module
    was loaded. The start mark begins at zero, so ``elapsed`` before any
    ``run`` measures from the clock's origin.
    """

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock if clock is not None else _seconds_since_start
        self._start = 0.0
        self._interval = 0.0

    def run(self) -> None:
        """Mark the current moment as the start of a running span."""
        self._start = self._clock()

    def stop(self) -> None:
        """Add the span since the last start mark to the accumulated time."""
        self._interval += self._clock() - self._start

    def reset(self) -> None:
        """Clear the accumulated time and restart from now."""
        self._interval = 0.0
        self._start = self._clock()

    def elapsed(self) -> float:
        """Accumulated time plus the span since the last start mark."""
        return self._interval + (self._clock() - self._start)

    def set_time(self, value: float) -> None:
        """Replace the accumulated time."""
        self._interval = value

    def add_time(self, value: float) -> None:
        """Increase the accumulated time."""
        self._interval += value

    def subtract_time(self, value: float) -> None:
        """Decrease the accumulated time."""
        self._interval -= value