"""Tags, pushes and HEAD lookups."""
from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional

from gitfixtures.core.utils.subprocess import run_git_command

from .parsing import parse_remote_head, parse_show_head


def git_tag_version(
    tag_name: str,
    sha: Optional[str] = None,
    *,
    cwd: Optional[Path | str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> None:
    """Create ``tag_name`` on HEAD, or force it onto ``sha`` when given."""
    args = ["tag", "-f", tag_name, sha] if sha else ["tag", tag_name]
    run_git_command(args, cwd=cwd, env=env)


def git_push(
    repository_url: str,
    branch: str,
    *,
    cwd: Optional[Path | str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> None:
    """Push HEAD to ``branch`` of ``repository_url``, with all tags."""
    run_git_command(["push", "--tags", repository_url, f"HEAD:{branch}"], cwd=cwd, env=env)


def git_remote_head(
    repository_url: str,
    *,
    cwd: Optional[Path | str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """SHA of HEAD in the remote repository, or None when it advertises none."""
    result = run_git_command(["ls-remote", repository_url, "HEAD"], cwd=cwd, env=env)
    return parse_remote_head(result.stdout, command=result.args)


def git_show_head(
    *,
    cwd: Optional[Path | str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """SHA of HEAD in the local repository."""
    result = run_git_command(["show", "HEAD", "--quiet", "--no-color"], cwd=cwd, env=env)
    return parse_show_head(result.stdout, command=result.args)


__all__ = ["git_tag_version", "git_push", "git_remote_head", "git_show_head"]
