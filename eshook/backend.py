"""
Search backend interface and the OpenSearch / Elasticsearch adapter.

The hook talks to the backend only through ``SearchBackend``. Every call takes
the hook's ``CancelScope``; the adapter checks it before issuing the request
and passes the scope's remaining deadline as the request timeout. A response that
arrives after cancellation is still returned. Client errors are propagated
unchanged.
"""
from typing import Any, Dict, Optional, Protocol

from opensearchpy import OpenSearch
from opensearchpy.client.utils import _make_path

from .scope import CancelScope


class SearchBackend(Protocol):
    """Operations the hook needs from a search backend."""

    def index_exists(self, name: str, scope: CancelScope) -> bool:
        ...

    def create_index(self, name: str, scope: CancelScope) -> bool:
        """Create ``name``; return whether the backend acknowledged it."""
        ...

    def index_document(
        self, index: str, kind: str, body: Dict[str, Any], scope: CancelScope
    ) -> Dict[str, Any]:
        ...


class OpenSearchBackend:
    """
    ``SearchBackend`` over an ``opensearchpy.OpenSearch`` client.

    The client is owned by the caller and never closed here.

    Args:
        client: Configured OpenSearch client
        typed: Send the document kind as mapping type (``POST /<index>/<kind>``)
            for clusters that still use mapping types
    """

    def __init__(self, client: OpenSearch, typed: bool = False):
        self.client = client
        self.typed = typed

    def index_exists(self, name: str, scope: CancelScope) -> bool:
        scope.check()
        exists = self.client.indices.exists(index=name, **_timeout(scope))
        return bool(exists)

    def create_index(self, name: str, scope: CancelScope) -> bool:
        scope.check()
        response = self.client.indices.create(index=name, **_timeout(scope))
        return bool(response.get("acknowledged", False))

    def index_document(
        self, index: str, kind: str, body: Dict[str, Any], scope: CancelScope
    ) -> Dict[str, Any]:
        scope.check()
        if self.typed:
            return self.client.transport.perform_request(
                "POST", _make_path(index, kind), params=_timeout(scope), body=body
            )
        return self.client.index(index=index, body=body, **_timeout(scope))


def _timeout(scope: CancelScope) -> Dict[str, Optional[float]]:
    remaining = scope.remaining()
    if remaining is None:
        return {}
    return {"request_timeout": remaining}
