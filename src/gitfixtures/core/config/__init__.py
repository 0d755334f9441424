"""gitfixtures configuration system.

Usage:
    from gitfixtures.core.config import GitConfig, TimeoutsConfig

    GitConfig().default_branch
    TimeoutsConfig().git_operations_seconds
"""
from __future__ import annotations

from .base import BaseDomainConfig
from .cache import clear_all_caches, get_cached_config, is_cached
from .domains import GitConfig, LoggingConfig, TempConfig, TimeoutsConfig
from .manager import ConfigManager

__all__ = [
    "ConfigManager",
    "BaseDomainConfig",
    "get_cached_config",
    "clear_all_caches",
    "is_cached",
    "GitConfig",
    "LoggingConfig",
    "TempConfig",
    "TimeoutsConfig",
]
