import time
from typing import Protocol


class Clock(Protocol):
    """Protocol for time providers."""

    def now(self) -> float:
        """Return current Unix timestamp in seconds."""
        ...


class SystemClock:
    """Production clock using system time."""

    def now(self) -> float:
        return time.time()


class FixedClock:
    """Fixed clock for deterministic testing."""

    def __init__(self, timestamp: float):
        self._timestamp = timestamp

    def now(self) -> float:
        return self._timestamp

    def advance(self, seconds: float):
        self._timestamp += seconds
