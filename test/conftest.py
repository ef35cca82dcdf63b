import logging
import threading

import pytest

from eshook.scope import CancelScope


class FakeBackend:
    """In-memory SearchBackend recording every call."""

    def __init__(self, existing=(), acknowledge=True):
        self.indices = set(existing)
        self.acknowledge = acknowledge
        self.documents = []
        self.calls = []
        self.exists_error = None
        self.create_error = None
        self.index_error = None
        self._lock = threading.Lock()

    def count(self, op):
        return sum(1 for name, _ in self.calls if name == op)

    def index_exists(self, name, scope: CancelScope):
        scope.check()
        with self._lock:
            self.calls.append(("exists", name))
        if self.exists_error:
            raise self.exists_error
        return name in self.indices

    def create_index(self, name, scope: CancelScope):
        scope.check()
        with self._lock:
            self.calls.append(("create", name))
        if self.create_error:
            raise self.create_error
        if self.acknowledge:
            self.indices.add(name)
        return self.acknowledge

    def index_document(self, index, kind, body, scope: CancelScope):
        scope.check()
        with self._lock:
            self.calls.append(("index", index))
            if self.index_error:
                raise self.index_error
            self.documents.append((index, kind, body))
        return {"result": "created", "_index": index}


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def isolated_logger():
    logger = logging.getLogger("eshook.test.app")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
