"""Domain-specific configuration for temporary directories."""
from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import Optional

from ..base import BaseDomainConfig


class TempConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "temp"

    @cached_property
    def prefix(self) -> str:
        return str(self.section.get("prefix") or "gitfixtures-")

    @cached_property
    def base_dir(self) -> Optional[Path]:
        """Parent directory for temp dirs; None means the platform default."""
        raw = str(self.section.get("base_dir") or "").strip()
        return Path(raw).expanduser() if raw else None


__all__ = ["TempConfig"]
