"""
Cancellable execution scope bound to backend calls.

A ``CancelScope`` is a one-way token: once cancelled (explicitly or by its
deadline passing) it stays cancelled. Backend adapters check it before and
after every request.
"""
import threading
import time
from typing import Optional

from .utils.errors import CancelledError, DeadlineExceededError


class CancelScope:
    """
    Cooperative cancellation token with an optional deadline.

    Args:
        timeout: Seconds until the scope expires (None = no deadline)

    Example:
        scope = CancelScope()
        backend.index_exists("logs", scope)
        scope.cancel()  # every later call raises CancelledError
    """

    def __init__(self, timeout: Optional[float] = None):
        if timeout is not None and timeout <= 0:
            raise ValueError("timeout must be positive")
        self._cancelled = threading.Event()
        self._deadline = time.monotonic() + timeout if timeout is not None else None

    def cancel(self) -> None:
        """Cancel the scope. Safe to call more than once."""
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set() or self._expired()

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, or None when there is none."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def check(self) -> None:
        """Raise if the scope is cancelled or past its deadline."""
        if self._cancelled.is_set():
            raise CancelledError("execution scope cancelled")
        if self._expired():
            raise DeadlineExceededError("execution scope deadline exceeded")

    def _expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline
