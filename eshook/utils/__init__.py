from .errors import (
    HookError,
    CannotCreateIndexError,
    CancelledError,
    DeadlineExceededError,
    ConfigError,
)
from .time import Clock, SystemClock, FixedClock

__all__ = [
    "HookError",
    "CannotCreateIndexError",
    "CancelledError",
    "DeadlineExceededError",
    "ConfigError",
    "Clock",
    "SystemClock",
    "FixedClock",
]
