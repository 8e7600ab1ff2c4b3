"""Time helpers."""

from __future__ import annotations

import time
from typing import Protocol


def now_ms() -> int:
    """Return current timestamp in milliseconds."""
    return time.time_ns() // 1_000_000


class Clock(Protocol):
    def now_ms(self) -> int:
        ...


class SystemClock:
    """Wall clock in milliseconds since the Unix epoch."""

    def now_ms(self) -> int:
        return now_ms()


class FixedClock:
    """Clock pinned to a given instant; only moves when advanced."""

    def __init__(self, value: int) -> None:
        self._value = value

    def now_ms(self) -> int:
        return self._value

    def advance(self, ms: int) -> None:
        self._value += ms
