"""
Assemble backend client and hook from a HookConfig.
"""
from typing import Optional

from opensearchpy import OpenSearch

from .settings import BackendConfig, HookConfig
from ..backend import OpenSearchBackend
from ..hook import IndexingHook
from ..index_names import fixed_index, keep_latest, noop_cleanup, time_bucketed_index
from ..metrics import HookMetrics
from ..scope import CancelScope


def build_client(config: BackendConfig) -> OpenSearch:
    """Create an OpenSearch client for the configured cluster."""
    kwargs = {
        "hosts": list(config.urls),
        "verify_certs": config.verify_certs,
        "timeout": config.timeout_seconds,
    }
    if config.username:
        kwargs["http_auth"] = (config.username, config.password)
    return OpenSearch(**kwargs)


def build_backend(config: BackendConfig, client: Optional[OpenSearch] = None) -> OpenSearchBackend:
    return OpenSearchBackend(client or build_client(config), typed=config.typed)


def build_hook(
    config: HookConfig,
    client: Optional[OpenSearch] = None,
    metrics: Optional[HookMetrics] = None,
    scope: Optional[CancelScope] = None,
) -> IndexingHook:
    """
    Build a provisioned hook from configuration.

    Raises:
        Exception: Backend errors from the initial index provisioning
    """
    if config.rotation == "none":
        index_func = fixed_index(config.index)
    else:
        index_func = time_bucketed_index(config.index, config.rotation)

    cleanup = keep_latest(config.keep_indices) if config.keep_indices else noop_cleanup

    return IndexingHook(
        build_backend(config.backend, client),
        config.host,
        config.level,
        index_func,
        cleanup,
        metrics=metrics,
        scope=scope,
    )
