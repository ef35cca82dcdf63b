"""
Log entry and the fixed document envelope written per entry.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict

from .levels import Level


DOCUMENT_KIND = "log"

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


@dataclass(frozen=True)
class LogEntry:
    """A single log entry as seen by the hook."""
    time_ns: int
    level: Level
    message: str
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> "LogEntry":
        """Build an entry from a stdlib LogRecord, collecting ``extra`` fields as data."""
        data = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if record.exc_info and "error" not in data:
            data["error"] = logging.Formatter().formatException(record.exc_info)
        return cls(
            time_ns=int(round(record.created * 1_000_000)) * 1000,
            level=Level.from_levelno(record.levelno),
            message=record.getMessage(),
            data=data,
        )


@dataclass(frozen=True)
class LogEnvelope:
    """Document shape written to the backend."""
    host: str
    timestamp: str
    message: str
    data: Dict[str, Any]
    level: str

    @classmethod
    def build(cls, host: str, entry: LogEntry) -> "LogEnvelope":
        return cls(
            host=host,
            timestamp=format_rfc3339_nano(entry.time_ns),
            message=entry.message,
            data=entry.data,
            level=entry.level.name.upper(),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            "Host": self.host,
            "Timestamp": self.timestamp,
            "Message": self.message,
            "Data": self.data,
            "Level": self.level,
        }


def format_rfc3339_nano(time_ns: int) -> str:
    """
    Format a Unix timestamp in nanoseconds as UTC RFC3339 with nanoseconds.

    Trailing zeros of the fractional second are dropped, and the fraction is
    omitted entirely when it is zero: ``2024-01-31T13:04:05.12Z``.
    """
    seconds, nanos = divmod(time_ns, 1_000_000_000)
    text = datetime.fromtimestamp(seconds, tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%S")
    if nanos:
        text += "." + f"{nanos:09d}".rstrip("0")
    return text + "Z"
