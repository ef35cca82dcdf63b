"""
Logging handler that ships log records to a search backend.

Each record becomes one document in the index returned by the hook's
index-name function. Indices are provisioned lazily (existence check, then
create) once per distinct name; the hook remembers which names it has
provisioned and hands that set to a cleanup callback after every new one.

The hook never logs through the logging facility it is attached to. Failures
raised by ``fire`` reach the facility through ``Handler.handleError``.
"""
import logging
import threading
import time
from contextlib import contextmanager
from typing import Callable, Dict, List, Optional

from .backend import SearchBackend
from .envelope import DOCUMENT_KIND, LogEntry, LogEnvelope
from .index_names import fixed_index, noop_cleanup
from .levels import Level, levels_for
from .metrics import HookMetrics
from .provisioned import ProvisionedIndexes
from .scope import CancelScope
from .utils.errors import CannotCreateIndexError


IndexNameFunc = Callable[[], str]
IndexCleanupFunc = Callable[[Dict[str, bool]], None]

# Loggers used by the backend client stack; their records never reach the hook.
BACKEND_LOGGERS = ("opensearch", "urllib3", "elastic_transport")


class BackendRecordFilter(logging.Filter):
    """Drop records emitted by the backend client's own loggers."""

    def __init__(self, prefixes=BACKEND_LOGGERS):
        super().__init__()
        self.prefixes = tuple(prefixes)

    def filter(self, record: logging.LogRecord) -> bool:
        return not any(
            record.name == prefix or record.name.startswith(prefix + ".")
            for prefix in self.prefixes
        )


class IndexingHook(logging.Handler):
    """
    Forward log records to a search backend index.

    Construction resolves the first index name and provisions it; any backend
    error raised there propagates and no hook is created.

    Args:
        backend: Search backend (shared; never closed by the hook)
        host: Host identifier written into every document
        level: Least severe level the hook receives
        index_func: Returns the current index name, called per entry
        cleanup: Called with the provisioned-index mapping after each new index;
            records it logs on the calling thread are not shipped
        metrics: Optional Prometheus metrics sink
        scope: Execution scope for backend calls (a fresh one by default)

    Example:
        hook = IndexingHook(backend, "web-1", Level.INFO, lambda: "logs")
        install_hook(hook)  # eshook.logging; lowers the root level to INFO
    """

    def __init__(
        self,
        backend: SearchBackend,
        host: str,
        level: Level,
        index_func: IndexNameFunc,
        cleanup: Optional[IndexCleanupFunc] = None,
        metrics: Optional[HookMetrics] = None,
        scope: Optional[CancelScope] = None,
    ):
        super().__init__(level=level.levelno)
        self.backend = backend
        self.host = host
        self.threshold = level
        self._index_func = index_func
        self._cleanup = cleanup or noop_cleanup
        self._metrics = metrics
        self._levels = levels_for(level)
        self._provisioned = ProvisionedIndexes()
        self._provision_lock = threading.Lock()
        self._scope = scope or CancelScope()
        self._local = threading.local()
        self.addFilter(BackendRecordFilter())

        self.get_or_create_index()

    @property
    def scope(self) -> CancelScope:
        return self._scope

    @property
    def provisioned(self) -> Dict[str, bool]:
        """Copy of the provisioned-index mapping."""
        return self._provisioned.snapshot()

    def levels(self) -> List[Level]:
        """Levels this hook receives, most severe first."""
        return list(self._levels)

    def cancel(self) -> None:
        """Cancel the hook's scope; every later backend call fails."""
        self._scope.cancel()

    def filter(self, record: logging.LogRecord) -> bool:
        # Runs before Handler.handle takes the handler lock.
        if getattr(self._local, "busy", False):
            return False
        return super().filter(record)

    def emit(self, record: logging.LogRecord) -> None:
        with self._busy():
            try:
                self.fire(LogEntry.from_record(record))
            except Exception:
                self.handleError(record)

    def fire(self, entry: LogEntry) -> None:
        """
        Write one entry to the backend.

        Raises:
            CannotCreateIndexError: Index creation was not acknowledged
            CancelledError: The hook's scope has been cancelled
            Exception: Backend client errors, unchanged
        """
        if entry.level not in self._levels:
            return

        start = time.perf_counter()
        try:
            index = self.get_or_create_index()
            envelope = LogEnvelope.build(self.host, entry)
            self.backend.index_document(index, DOCUMENT_KIND, envelope.to_document(), self._scope)
        except Exception:
            if self._metrics:
                self._metrics.record_document("error", time.perf_counter() - start)
            raise
        if self._metrics:
            self._metrics.record_document("ok", time.perf_counter() - start)

    def get_or_create_index(self) -> str:
        """
        Resolve the current index name, provisioning it on first use.

        Names already provisioned return without any backend call and without
        invoking the cleanup callback.
        """
        index = self._index_func()
        if index in self._provisioned:
            return index

        with self._busy(), self._provision_lock:
            if index in self._provisioned:
                return index
            if not self.backend.index_exists(index, self._scope):
                if not self.backend.create_index(index, self._scope):
                    raise CannotCreateIndexError(index)
            self._provisioned.mark(index, self._cleanup)
            if self._metrics:
                self._metrics.record_index_provisioned()
        return index

    @contextmanager
    def _busy(self):
        """Drop records logged on this thread while the hook is working."""
        previous = getattr(self._local, "busy", False)
        self._local.busy = True
        try:
            yield
        finally:
            self._local.busy = previous

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} host={self.host!r} level={self.threshold.name}>"


def new_hook(
    backend: SearchBackend,
    host: str,
    level: Level,
    index: str,
    **kwargs,
) -> IndexingHook:
    """Create a hook writing every entry into one fixed index."""
    return IndexingHook(backend, host, level, fixed_index(index), noop_cleanup, **kwargs)


def new_hook_with_func(
    backend: SearchBackend,
    host: str,
    level: Level,
    index_func: IndexNameFunc,
    cleanup: IndexCleanupFunc,
    **kwargs,
) -> IndexingHook:
    """Create a hook with a dynamic index name and a cleanup callback."""
    return IndexingHook(backend, host, level, index_func, cleanup, **kwargs)
