"""
Logging configuration and hook installation.

Console/file output for the process itself, plus attaching an IndexingHook
to a logger so records are shipped to the search backend.
"""
import logging
import logging.handlers
import json
import sys
from pathlib import Path
from datetime import datetime, timezone
from typing import Optional

from ..envelope import LogEntry
from ..hook import IndexingHook


class JSONFormatter(logging.Formatter):
    """
    JSON log formatter for production environments.

    One JSON object per line; ``extra`` fields are nested under "extra".
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }

        extra_fields = _extra_fields(record)
        if extra_fields:
            log_data["extra"] = extra_fields

        return json.dumps(log_data, default=str)


class HumanReadableFormatter(logging.Formatter):
    """
    Human-readable log formatter for development.
    """

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",      # Cyan
        "INFO": "\033[32m",       # Green
        "WARNING": "\033[33m",    # Yellow
        "ERROR": "\033[31m",      # Red
        "CRITICAL": "\033[35m",   # Magenta
        "PANIC": "\033[41m",      # Red background
        "RESET": "\033[0m",
    }

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as human-readable text."""
        if self.use_color:
            level_color = self.COLORS.get(record.levelname, "")
            reset = self.COLORS["RESET"]
            level_text = f"{level_color}{record.levelname:8}{reset}"
        else:
            level_text = f"{record.levelname:8}"

        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc).strftime("%H:%M:%S.%f")[:-3]
        log_line = f"{timestamp} {level_text} [{record.name}] {record.getMessage()}"

        extra_fields = _extra_fields(record)
        if extra_fields:
            log_line += " | " + " ".join(f"{k}={v}" for k, v in extra_fields.items())

        if record.exc_info:
            log_line += "\n" + self.formatException(record.exc_info)

        return log_line


def _extra_fields(record: logging.LogRecord) -> dict:
    """Caller-supplied ``extra`` fields, without the error text derived from exc_info."""
    fields = LogEntry.from_record(record).data
    if record.exc_info and "error" not in record.__dict__:
        fields.pop("error", None)
    return fields


def configure_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
    max_bytes: int = 100 * 1024 * 1024,  # 100MB
    backup_count: int = 7,
) -> None:
    """
    Configure process logging (console, optional rotating file).

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (None = stdout only)
        json_format: Use JSON format (True) or human-readable (False)
        max_bytes: Max size per log file (default 100MB)
        backup_count: Number of backup files to keep (default 7)

    Any IndexingHook already attached to the root logger is kept.

    Example:
        configure_logging(level="DEBUG")
        install_hook(build_hook(load_config()))
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in list(root_logger.handlers):
        if not isinstance(handler, IndexingHook):
            root_logger.removeHandler(handler)

    formatter = JSONFormatter() if json_format else HumanReadableFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=str(log_path),
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def install_hook(hook: IndexingHook, logger: Optional[logging.Logger] = None) -> logging.Logger:
    """
    Attach ``hook`` to ``logger`` (root logger by default).

    The logger level is lowered to the hook's threshold when needed so records
    the hook asks for are not dropped before reaching it.
    """
    target = logger or logging.getLogger()
    if target.level == logging.NOTSET or target.level > hook.level:
        target.setLevel(hook.level)
    if hook not in target.handlers:
        target.addHandler(hook)
    return target


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Example:
        logger = get_logger(__name__)
        logger.info("Order placed", extra={"order_id": 42})
    """
    return logging.getLogger(name)
