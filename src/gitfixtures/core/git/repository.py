"""Creation of throwaway repositories: plain, bare-backed, shallow, detached."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional

from gitfixtures.core.config.domains.git import GitConfig
from gitfixtures.core.utils.subprocess import run_git_command
from gitfixtures.core.utils.tempdirs import temp_directory

from .commits import git_commits
from .models import GitRepo

logger = logging.getLogger(__name__)


def file_url(path: Path | str) -> str:
    """``file://`` URL for a local path (needed for ``--depth`` clones)."""
    return Path(path).resolve().as_uri()


def git_repo(with_remote: bool = False, branch: Optional[str] = None) -> GitRepo:
    """Create a temporary git repository.

    With ``with_remote``, a bare repository is created and seeded with one
    commit on ``branch``, and the returned working directory is a shallow
    clone of it. Otherwise a regular repository is created with ``branch``
    checked out. Commit signing is disabled in the working directory.

    Args:
        with_remote: Back the working directory with a bare remote.
        branch: Branch to initialize (default: ``git.default_branch``).

    Returns:
        GitRepo with the working directory and the repository URL.
    """
    branch = branch or GitConfig().default_branch
    cwd = temp_directory()

    # Pin the unborn branch so the bare remote's HEAD resolves to ``branch``
    # whatever init.defaultBranch the host has.
    run_git_command(
        ["-c", f"init.defaultBranch={branch}", "init", *(["--bare"] if with_remote else [])],
        cwd=cwd,
    )

    repository_url = file_url(cwd)
    if with_remote:
        init_bare_repo(repository_url, branch)
        cwd = git_shallow_clone(repository_url, branch)
    else:
        git_checkout(branch, True, cwd=cwd)

    run_git_command(["config", "commit.gpgsign", "false"], cwd=cwd)

    logger.debug("Created %s repository %s (%s)", "remote-backed" if with_remote else "local", cwd, branch)
    return GitRepo(cwd=cwd, repository_url=repository_url)


def init_bare_repo(repository_url: str, branch: Optional[str] = None) -> None:
    """Give an empty bare repository a first commit on ``branch``.

    Clones it into a new temp directory, creates ``branch``, commits an empty
    initial commit and pushes it back.
    """
    branch = branch or GitConfig().default_branch
    cwd = temp_directory()
    run_git_command(["clone", "--no-hardlinks", repository_url, str(cwd)], cwd=cwd)
    git_checkout(branch, True, cwd=cwd)
    git_commits([GitConfig().initial_commit_message], cwd=cwd)
    run_git_command(["push", repository_url, branch], cwd=cwd)


def git_checkout(
    branch: str,
    create: bool = False,
    *,
    cwd: Optional[Path | str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> None:
    """Check out ``branch``, creating it first when ``create`` is True."""
    run_git_command(["checkout", "-b", branch] if create else ["checkout", branch], cwd=cwd, env=env)


def git_shallow_clone(
    repository_url: str,
    branch: Optional[str] = None,
    depth: Optional[int] = None,
) -> Path:
    """Clone ``depth`` commits of ``branch`` without tags into a temp directory.

    Returns:
        Path of the clone.
    """
    cfg = GitConfig()
    branch = branch or cfg.default_branch
    depth = depth if depth is not None else cfg.clone_depth
    cwd = temp_directory()

    run_git_command(
        [
            "clone",
            "--no-hardlinks",
            "--no-tags",
            "-b",
            branch,
            "--depth",
            str(depth),
            repository_url,
            str(cwd),
        ],
        cwd=cwd,
    )
    return cwd


def git_detached_head(repository_url: str, head: str) -> Path:
    """Create a repository whose HEAD is detached at ``head`` of ``repository_url``.

    Returns:
        Path of the new repository.
    """
    cwd = temp_directory()

    run_git_command(["init"], cwd=cwd)
    run_git_command(["remote", "add", "origin", repository_url], cwd=cwd)
    run_git_command(["fetch", repository_url], cwd=cwd)
    run_git_command(["checkout", head], cwd=cwd)
    return cwd


__all__ = [
    "file_url",
    "git_repo",
    "init_bare_repo",
    "git_checkout",
    "git_shallow_clone",
    "git_detached_head",
]
