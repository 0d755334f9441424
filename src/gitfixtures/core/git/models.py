"""Value types returned by the git helpers."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True)
class Person:
    """Author or committer of a commit."""

    name: str
    email: str
    date: datetime


@dataclass(frozen=True)
class Commit:
    """A commit parsed from ``git log``.

    ``message`` is the raw body (``%B``) and ``git_tags`` the ref-name
    decoration (``%d``, e.g. ``"(HEAD -> master, tag: v1.0.0)"``), both
    stripped of surrounding whitespace.
    """

    hash: str
    short_hash: str
    tree: str
    author: Person
    committer: Person
    subject: str
    body: str
    message: str
    git_tags: str

    @property
    def committer_date(self) -> datetime:
        return self.committer.date

    @property
    def tags(self) -> list[str]:
        """Tag names from the decoration, in the order git prints them."""
        inner = self.git_tags.strip()
        if inner.startswith("(") and inner.endswith(")"):
            inner = inner[1:-1]
        return [
            ref.strip()[len("tag: "):]
            for ref in inner.split(",")
            if ref.strip().startswith("tag: ")
        ]


@dataclass(frozen=True)
class GitRepo:
    """A throwaway repository created by :func:`git_repo`.

    ``cwd`` is the working directory (the shallow clone when remote-backed).
    ``repository_url`` is the ``file://`` URL of the bare remote, or of the
    repository itself when there is no remote.
    """

    cwd: Path
    repository_url: str

    def __fspath__(self) -> str:
        return str(self.cwd)


__all__ = ["Person", "Commit", "GitRepo"]
