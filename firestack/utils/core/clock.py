"""Millisecond clocks used by the identifier generator."""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Source of wall-clock time in integer milliseconds since the epoch."""

    def now_ms(self) -> int: ...


class SystemClock:
    """Clock backed by the host's wall clock."""

    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000


class ManualClock:
    """Clock that only moves when told to.

    Useful for deterministic tests and for replaying a known time sequence.
    """

    def __init__(self, now_ms: int = 0) -> None:
        self._now_ms = now_ms

    def now_ms(self) -> int:
        return self._now_ms

    def set(self, now_ms: int) -> None:
        self._now_ms = now_ms

    def advance(self, ms: int = 1) -> int:
        """Move the clock forward and return the new time."""
        self._now_ms += ms
        return self._now_ms
