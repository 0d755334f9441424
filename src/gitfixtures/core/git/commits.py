"""Commit creation and log parsing."""
from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from gitfixtures.core.utils.subprocess import run_git_command

from .models import Commit
from .parsing import LOG_FORMAT, parse_log


def git_commits(
    messages: Sequence[str],
    *,
    cwd: Optional[Path | str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> List[Commit]:
    """Create one empty, unsigned commit per message, in order.

    Returns:
        The created commits, newest first (``git log`` order).
    """
    messages = list(messages)
    if not messages:
        return []
    # Each commit's parent is the previous one, so these must run one by one.
    for message in messages:
        run_git_command(
            ["commit", "-m", message, "--allow-empty", "--no-gpg-sign"], cwd=cwd, env=env
        )
    return git_get_commits(cwd=cwd, env=env)[: len(messages)]


def git_get_commits(
    from_ref: Optional[str] = None,
    *,
    cwd: Optional[Path | str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> List[Commit]:
    """List commits reachable from HEAD, back to (excluding) ``from_ref``.

    Args:
        from_ref: Reference to start from; all of HEAD's history when None.
        cwd: Repository working directory.
        env: Environment overrides merged on top of the host environment.
    """
    revision = f"{from_ref}..HEAD" if from_ref else "HEAD"
    args = ["log", "-z", "--no-color", "--decorate=short", f"--format={LOG_FORMAT}", revision, "--"]
    result = run_git_command(args, cwd=cwd, env=env)
    return parse_log(result.stdout, command=result.args)


__all__ = ["git_commits", "git_get_commits"]
