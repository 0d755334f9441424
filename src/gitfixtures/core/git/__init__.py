"""Thin git helpers for building test repositories."""
from __future__ import annotations

from .commits import git_commits, git_get_commits
from .index import git_add, git_commited_files, git_staged
from .models import Commit, GitRepo, Person
from .refs import git_push, git_remote_head, git_show_head, git_tag_version
from .repository import (
    file_url,
    git_checkout,
    git_detached_head,
    git_repo,
    git_shallow_clone,
    init_bare_repo,
)

__all__ = [
    "Commit",
    "GitRepo",
    "Person",
    "file_url",
    "git_repo",
    "init_bare_repo",
    "git_checkout",
    "git_shallow_clone",
    "git_detached_head",
    "git_commits",
    "git_get_commits",
    "git_tag_version",
    "git_push",
    "git_remote_head",
    "git_show_head",
    "git_staged",
    "git_commited_files",
    "git_add",
]
