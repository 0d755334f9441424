"""Domain-specific configuration for operation timeouts."""
from __future__ import annotations

from functools import cached_property

from gitfixtures.core.exceptions import ConfigError

from ..base import BaseDomainConfig


class TimeoutsConfig(BaseDomainConfig):
    """Typed, cached access to timeout configuration."""

    def _config_section(self) -> str:
        return "timeouts"

    @cached_property
    def git_operations_seconds(self) -> float:
        """Get timeout for git operations in seconds."""
        if "git_operations_seconds" not in self.section:
            raise ConfigError("timeouts.git_operations_seconds missing from configuration")
        return float(self.section["git_operations_seconds"])


__all__ = ["TimeoutsConfig"]
