"""
Index-name functions and provisioned-set cleanup callbacks.

Time-bucketed names use UTC and zero-padded fields, so they sort
chronologically as plain strings; ``keep_latest`` relies on that.
"""
from datetime import datetime, timezone
from typing import Callable, Dict, Optional

from .utils.time import Clock, SystemClock


ROTATION_FORMATS = {
    "hourly": "%Y.%m.%d.%H",
    "daily": "%Y.%m.%d",
    "monthly": "%Y.%m",
}


def fixed_index(name: str) -> Callable[[], str]:
    return lambda: name


def time_bucketed_index(
    prefix: str,
    rotation: str = "daily",
    clock: Optional[Clock] = None,
) -> Callable[[], str]:
    """
    Index name rotating with the current UTC time.

    Args:
        prefix: Name prefix, joined to the time bucket with ``-``
        rotation: hourly, daily or monthly
        clock: Time source (system clock when None)

    Example:
        time_bucketed_index("app", "daily")()  # "app-2024.01.31"
    """
    try:
        fmt = ROTATION_FORMATS[rotation]
    except KeyError:
        raise ValueError(
            f"Invalid rotation: {rotation}. Must be one of {sorted(ROTATION_FORMATS)}"
        ) from None

    source = clock or SystemClock()

    def index_name() -> str:
        bucket = datetime.fromtimestamp(source.now(), tz=timezone.utc).strftime(fmt)
        return f"{prefix}-{bucket}"

    return index_name


def noop_cleanup(indexes: Dict[str, bool]) -> None:
    pass


def keep_latest(count: int) -> Callable[[Dict[str, bool]], None]:
    """Cleanup keeping only the ``count`` greatest index names in the set."""
    if count <= 0:
        raise ValueError("count must be positive")

    def cleanup(indexes: Dict[str, bool]) -> None:
        for name in sorted(indexes)[:-count]:
            del indexes[name]

    return cleanup
