"""
Logging infrastructure for the indexing hook.

Provides:
- JSON formatting for production (machine-readable)
- Human-readable formatting for development
- Log rotation for file output
- Attaching an IndexingHook to a logger
"""
from .config import configure_logging, get_logger, install_hook, JSONFormatter, HumanReadableFormatter

__all__ = [
    "configure_logging",
    "get_logger",
    "install_hook",
    "JSONFormatter",
    "HumanReadableFormatter",
]
