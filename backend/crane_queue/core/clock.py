"""
Clock sources for the queue engine.

All engine timestamps are integer epoch milliseconds. Services receive a
clock instead of reading the system time so that window expiry and duration
computation can be driven deterministically.
"""

import time
from typing import Protocol


class Clock(Protocol):
    """Single source of "now" for the engine."""

    def now_ms(self) -> int:
        """Return the current time in epoch milliseconds."""
        ...


class SystemClock:
    """Wall-clock time."""

    def now_ms(self) -> int:
        return int(time.time() * 1000)


class FixedClock:
    """Manually controlled clock for tests and replays."""

    def __init__(self, now_ms: int = 0):
        self._now_ms = now_ms

    def now_ms(self) -> int:
        return self._now_ms

    def set(self, now_ms: int) -> None:
        self._now_ms = now_ms

    def advance(self, delta_ms: int) -> int:
        self._now_ms += delta_ms
        return self._now_ms


system_clock = SystemClock()
