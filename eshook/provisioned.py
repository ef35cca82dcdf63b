import threading
from typing import Callable, Dict


class ProvisionedIndexes:
    """
    Thread-safe set of index names already known to exist on the backend.

    Stored as a ``dict[str, bool]`` so cleanup callbacks receive the same
    mapping shape they can prune. The hook only ever adds names; removals
    come from the cleanup callback, which runs under the set's lock.
    """

    def __init__(self):
        self._indexes: Dict[str, bool] = {}
        self._lock = threading.RLock()

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return self._indexes.get(name, False)

    def mark(self, name: str, cleanup: Callable[[Dict[str, bool]], None]) -> None:
        """Record ``name`` as provisioned, then hand the live mapping to ``cleanup``."""
        with self._lock:
            self._indexes[name] = True
            cleanup(self._indexes)

    def snapshot(self) -> Dict[str, bool]:
        with self._lock:
            return dict(self._indexes)
