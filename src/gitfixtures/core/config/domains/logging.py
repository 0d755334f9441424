"""Domain-specific configuration for gitfixtures logging.

This config controls whether git invocations are logged and how much of
their captured output is included in failure records.
"""
from __future__ import annotations

from functools import cached_property

from ..base import BaseDomainConfig


class LoggingConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "logging"

    @cached_property
    def enabled(self) -> bool:
        return bool(self.section.get("enabled", True))

    @cached_property
    def subprocess_enabled(self) -> bool:
        sub = self.section.get("subprocess") or {}
        return bool(sub.get("enabled", True))

    @cached_property
    def subprocess_max_output_bytes(self) -> int:
        sub = self.section.get("subprocess") or {}
        return int(sub.get("max_output_bytes", 0) or 0)


def truncate_text(text: str, *, max_bytes: int) -> str:
    """Truncate ``text`` to ``max_bytes`` UTF-8 bytes; 0 means unlimited."""
    if max_bytes <= 0:
        return text
    raw = text.encode("utf-8")
    if len(raw) <= max_bytes:
        return text
    return raw[:max_bytes].decode("utf-8", errors="ignore") + "...[truncated]"


__all__ = ["LoggingConfig", "truncate_text"]
