"""
Clock

Millisecond time sources. The animator reads "now" through one of these
on every start and every query.
"""

import time


def monotonic_ms() -> float:
    """Current monotonic time in milliseconds."""
    return time.perf_counter() * 1000.0


class ManualClock:
    """
    Clock that only moves when told to.

    Useful for tests, offline sampling and hosts that drive their own time.
    """

    def __init__(self, start_ms: float = 0.0):
        self.now_ms = float(start_ms)

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, delta_ms: float) -> float:
        """Move time forward and return the new timestamp."""
        self.now_ms += delta_ms
        return self.now_ms

    def set(self, now_ms: float):
        self.now_ms = float(now_ms)

    def __repr__(self):
        return f"ManualClock(now_ms={self.now_ms:.1f})"
