"""
eshook - logging handler that forwards log records to an OpenSearch /
Elasticsearch index, provisioning the index on first use.
"""
from .__version__ import VERSION
from .backend import SearchBackend, OpenSearchBackend
from .envelope import DOCUMENT_KIND, LogEntry, LogEnvelope, format_rfc3339_nano
from .hook import (
    IndexingHook,
    IndexNameFunc,
    IndexCleanupFunc,
    BackendRecordFilter,
    new_hook,
    new_hook_with_func,
)
from .index_names import fixed_index, time_bucketed_index, keep_latest, noop_cleanup
from .levels import Level, levels_for, PANIC_LEVEL_NUM
from .metrics import HookMetrics
from .scope import CancelScope
from .utils.errors import (
    HookError,
    CannotCreateIndexError,
    CancelledError,
    DeadlineExceededError,
    ConfigError,
)

__version__ = VERSION

__all__ = [
    "SearchBackend",
    "OpenSearchBackend",
    "DOCUMENT_KIND",
    "LogEntry",
    "LogEnvelope",
    "format_rfc3339_nano",
    "IndexingHook",
    "IndexNameFunc",
    "IndexCleanupFunc",
    "BackendRecordFilter",
    "new_hook",
    "new_hook_with_func",
    "fixed_index",
    "time_bucketed_index",
    "keep_latest",
    "noop_cleanup",
    "Level",
    "levels_for",
    "PANIC_LEVEL_NUM",
    "HookMetrics",
    "CancelScope",
    "HookError",
    "CannotCreateIndexError",
    "CancelledError",
    "DeadlineExceededError",
    "ConfigError",
]
