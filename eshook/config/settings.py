from dataclasses import dataclass
from typing import Optional, Tuple

from ..index_names import ROTATION_FORMATS
from ..levels import Level


@dataclass(frozen=True)
class BackendConfig:
    """Search backend connection settings."""
    urls: Tuple[str, ...] = ("http://localhost:9200",)
    username: Optional[str] = None
    password: Optional[str] = None
    verify_certs: bool = True
    timeout_seconds: float = 10.0
    typed: bool = False

    def validate(self):
        """Validate backend configuration."""
        if not self.urls:
            raise ValueError("at least one backend URL is required")
        for url in self.urls:
            if not url.startswith(("http://", "https://")):
                raise ValueError(f"backend URL must be http(s): {url}")
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        if bool(self.username) != bool(self.password):
            raise ValueError("username and password must be set together")


@dataclass(frozen=True)
class HookConfig:
    """Complete hook configuration.

    Loaded and validated by eshook/config/loader.py.
    """
    host: str
    backend: BackendConfig
    level: Level = Level.DEBUG
    index: str = "logs"
    rotation: str = "none"  # none|hourly|daily|monthly
    keep_indices: int = 0   # 0 = never prune the provisioned set

    def validate(self):
        """Validate hook configuration."""
        if not self.host:
            raise ValueError("host must not be empty")
        if not self.index:
            raise ValueError("index must not be empty")
        if self.index != self.index.lower():
            raise ValueError("index must be lowercase")
        if self.rotation != "none" and self.rotation not in ROTATION_FORMATS:
            raise ValueError(
                f"rotation must be one of {['none'] + sorted(ROTATION_FORMATS)}"
            )
        if self.keep_indices < 0:
            raise ValueError("keep_indices must not be negative")
        self.backend.validate()
