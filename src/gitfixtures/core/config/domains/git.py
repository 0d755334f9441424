"""Domain-specific configuration for the git helpers.

Controls the executable, the default branch and clone depth used when
callers do not pass them, the initial commit message of seeded bare
repositories, and the fallback commit identity for hosts without one.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Dict, Optional

from ..base import BaseDomainConfig


@dataclass(frozen=True)
class GitIdentity:
    name: str
    email: str

    def as_env(self) -> Dict[str, str]:
        return {
            "GIT_AUTHOR_NAME": self.name,
            "GIT_AUTHOR_EMAIL": self.email,
            "GIT_COMMITTER_NAME": self.name,
            "GIT_COMMITTER_EMAIL": self.email,
        }


class GitConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "git"

    @cached_property
    def executable(self) -> str:
        return str(self.section.get("executable") or "git")

    @cached_property
    def default_branch(self) -> str:
        return str(self.section.get("default_branch") or "master")

    @cached_property
    def clone_depth(self) -> int:
        return int(self.section.get("clone_depth") or 1)

    @cached_property
    def initial_commit_message(self) -> str:
        return str(self.section.get("initial_commit_message") or "Initial commit")

    @cached_property
    def identity(self) -> Optional[GitIdentity]:
        """Identity for commits, or None when disabled.

        When set, it is exported as ``GIT_AUTHOR_*``/``GIT_COMMITTER_*`` for
        hosts whose git config has no ``user.name``/``user.email``.
        """
        ident = self.section.get("identity") or {}
        if not ident.get("enabled", True):
            return None
        name = str(ident.get("name") or "").strip()
        email = str(ident.get("email") or "").strip()
        if not name or not email:
            return None
        return GitIdentity(name=name, email=email)


__all__ = ["GitConfig", "GitIdentity"]
