"""Domain-specific configuration accessors."""
from __future__ import annotations

from .git import GitConfig, GitIdentity
from .logging import LoggingConfig
from .temp import TempConfig
from .timeouts import TimeoutsConfig

__all__ = [
    "GitConfig",
    "GitIdentity",
    "LoggingConfig",
    "TempConfig",
    "TimeoutsConfig",
]
