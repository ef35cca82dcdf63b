class HookError(Exception):
    """Base exception for all eshook errors."""
    pass


class CannotCreateIndexError(HookError):
    """Backend did not acknowledge index creation."""

    def __init__(self, index: str):
        super().__init__(f"Cannot create index {index!r}")
        self.index = index


class CancelledError(HookError):
    """Execution scope was cancelled; backend call not issued or result discarded."""
    pass


class DeadlineExceededError(CancelledError):
    """Execution scope deadline passed."""
    pass


class ConfigError(HookError):
    """Configuration loading or validation failed."""
    pass
