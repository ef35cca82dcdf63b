from .settings import BackendConfig, HookConfig
from .loader import load_config
from .builder import build_client, build_backend, build_hook
from ..utils.errors import ConfigError

__all__ = [
    "BackendConfig",
    "HookConfig",
    "load_config",
    "build_client",
    "build_backend",
    "build_hook",
    "ConfigError",
]
