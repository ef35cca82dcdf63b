"""
Configuration loader for the indexing hook.

Loads and validates all configuration from environment variables,
optionally seeded from a .env file.
"""
import os
import socket
from typing import Optional

from dotenv import load_dotenv

from .settings import BackendConfig, HookConfig
from ..levels import Level
from ..utils.errors import ConfigError


def load_config(env_file: Optional[str] = None) -> HookConfig:
    """
    Load and validate hook configuration from environment.

    Args:
        env_file: Path to .env file (None = environment only)

    Returns:
        Validated HookConfig object

    Raises:
        ConfigError: If configuration is invalid
    """
    if env_file:
        _load_env_file(env_file)

    level_name = _get_env("ESHOOK_LEVEL", "DEBUG")
    try:
        level = Level.parse(level_name)
    except ValueError as e:
        raise ConfigError(str(e)) from e

    config = HookConfig(
        host=_get_env("ESHOOK_HOST") or socket.gethostname(),
        backend=_load_backend(),
        level=level,
        index=_get_env("ESHOOK_INDEX", "logs"),
        rotation=_get_env("ESHOOK_ROTATION", "none").lower(),
        keep_indices=_get_int_env("ESHOOK_KEEP_INDICES", 0),
    )

    try:
        config.validate()
    except ValueError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    return config


def _load_env_file(env_file: str):
    """Load environment variables from .env file."""
    if not os.path.exists(env_file):
        raise ConfigError(f".env file not found: {env_file}")
    load_dotenv(env_file, override=True)


def _load_backend() -> BackendConfig:
    """Load search backend configuration."""
    urls = tuple(
        url.strip()
        for url in _get_env("ESHOOK_URL", "http://localhost:9200").split(",")
        if url.strip()
    )
    return BackendConfig(
        urls=urls,
        username=_get_env("ESHOOK_USERNAME") or None,
        password=_get_env("ESHOOK_PASSWORD") or None,
        verify_certs=_get_bool_env("ESHOOK_VERIFY_CERTS", True),
        timeout_seconds=_get_float_env("ESHOOK_TIMEOUT_SECONDS", 10.0),
        typed=_get_bool_env("ESHOOK_TYPED", False),
    )


def _get_env(key: str, default: str = "") -> str:
    """Get optional environment variable."""
    return os.getenv(key, default)


def _get_bool_env(key: str, default: bool = False) -> bool:
    """Get boolean environment variable."""
    value = os.getenv(key)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigError(
            f"Invalid integer value for {key}: {value}"
        )


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigError(
            f"Invalid number for {key}: {value}"
        )
