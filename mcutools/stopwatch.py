"""A stopwatch that can be started, stopped and resumed."""

from __future__ import annotations

import math
import time
from collections.abc import Callable
from enum import Enum


class Resolution(Enum):
    """The unit that a stopwatch counts in; the value is ticks per second."""

    MILLIS = 1000
    MICROS = 1_000_000
    SECONDS = 1


class State(Enum):
    RESET = "reset"
    RUNNING = "running"
    STOPPED = "stopped"


class StopWatch:
    """Measures running time in whole ticks of its resolution.

    clock returns the current time in seconds; it defaults to time.monotonic.
    """

    def __init__(
        self,
        resolution: Resolution = Resolution.MILLIS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._resolution = Resolution(resolution)
        self._clock = clock
        self.reset()

    def _now(self) -> int:
        return math.floor(self._clock() * self._resolution.value)

    def reset(self) -> None:
        self._state = State.RESET
        self._start = 0
        self._stop = 0

    def start(self) -> None:
        """Start, or resume after a stop; does nothing while running."""
        if self._state in (State.RESET, State.STOPPED):
            self._state = State.RUNNING
            t = self._now()
            self._start += t - self._stop
            self._stop = t

    def stop(self) -> None:
        if self._state is State.RUNNING:
            self._state = State.STOPPED
            self._stop = self._now()

    def value(self) -> int:
        """The ticks counted so far."""
        if self._state is State.RUNNING:
            self._stop = self._now()
        return self._stop - self._start

    def elapsed(self) -> int:
        return self.value()

    def is_running(self) -> bool:
        return self._state is State.RUNNING

    @property
    def state(self) -> State:
        return self._state

    @property
    def resolution(self) -> Resolution:
        return self._resolution