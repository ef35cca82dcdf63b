"""
Severity levels understood by the hook.

Six levels in a fixed order, most severe first. Each maps onto a stdlib
``logging`` level number so the logging facility can do the filtering.
"""
import logging
from enum import IntEnum
from typing import List


PANIC_LEVEL_NUM = 60
logging.addLevelName(PANIC_LEVEL_NUM, "PANIC")


class Level(IntEnum):
    """Severity rank: lower value is more severe."""
    PANIC = 0
    FATAL = 1
    ERROR = 2
    WARNING = 3
    INFO = 4
    DEBUG = 5

    @property
    def levelno(self) -> int:
        """Stdlib logging level number for this severity."""
        return _LEVELNO[self]

    @classmethod
    def from_levelno(cls, levelno: int) -> "Level":
        """Map a stdlib level number to the nearest level at or below it."""
        for level in cls:
            if levelno >= level.levelno:
                return level
        return cls.DEBUG

    @classmethod
    def parse(cls, name: str) -> "Level":
        """Parse a level name (case-insensitive, WARN/CRITICAL aliases accepted)."""
        key = name.strip().upper()
        key = _ALIASES.get(key, key)
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown log level: {name!r}") from None


_LEVELNO = {
    Level.PANIC: PANIC_LEVEL_NUM,
    Level.FATAL: logging.CRITICAL,
    Level.ERROR: logging.ERROR,
    Level.WARNING: logging.WARNING,
    Level.INFO: logging.INFO,
    Level.DEBUG: logging.DEBUG,
}

_ALIASES = {
    "WARN": "WARNING",
    "CRITICAL": "FATAL",
}


def levels_for(threshold: Level) -> List[Level]:
    """All levels at or above ``threshold`` in severity, most severe first."""
    return [level for level in Level if level <= threshold]
