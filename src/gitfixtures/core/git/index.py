"""Index (staging area) and per-commit file listings."""
from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from gitfixtures.core.utils.subprocess import run_git_command

from .parsing import parse_name_only, parse_staged


def git_staged(
    *,
    cwd: Optional[Path | str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> List[str]:
    """Paths currently staged for addition."""
    result = run_git_command(["status", "--porcelain"], cwd=cwd, env=env)
    return parse_staged(result.stdout, command=result.args)


def git_commited_files(
    ref: str,
    *,
    cwd: Optional[Path | str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> List[str]:
    """Paths changed by the commit ``ref``."""
    result = run_git_command(
        ["diff-tree", "-r", "--name-only", "--no-commit-id", "-r", ref], cwd=cwd, env=env
    )
    return parse_name_only(result.stdout)


def git_add(
    files: Sequence[str],
    *,
    cwd: Optional[Path | str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> None:
    """Force-add ``files`` to the index, skipping the ones that fail."""
    run_git_command(["add", "--force", "--ignore-errors", *[str(f) for f in files]], cwd=cwd, env=env)


__all__ = ["git_staged", "git_commited_files", "git_add"]
