"""
Monotonic time helpers.

The daemon works in integer milliseconds so debounce comparisons are exact.
ManualClock stands in for both the clock and time.sleep in tests.
"""

import time


def monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class ManualClock:
    """Clock that only moves when told to (or when 'slept' on)."""

    def __init__(self, start_ms: int = 0):
        self._now_ms = start_ms
        self.sleeps = []

    def now_ms(self) -> int:
        return self._now_ms

    def advance_to(self, at_ms: int) -> None:
        if at_ms > self._now_ms:
            self._now_ms = at_ms

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self._now_ms += int(round(seconds * 1000))

    def __repr__(self) -> str:
        return f"<ManualClock now={self._now_ms}ms>"
