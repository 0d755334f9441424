"""Pytest integration.

Enable it from a ``conftest.py``::

    pytest_plugins = ["gitfixtures.pytest_plugin"]

Fixtures:
- git_repo_local: a plain repository on the default branch
- git_repo_remote: a shallow clone of a seeded bare remote
- git_cleanup: removes every temp directory created during the test

Tests marked ``requires_git`` are skipped when no git executable is found.
"""
from __future__ import annotations

import shutil
from typing import Iterator

import pytest

from gitfixtures.core.git.models import GitRepo
from gitfixtures.core.git.repository import git_repo
from gitfixtures.core.utils.tempdirs import cleanup_temp_dirs, registered_temp_dirs


def pytest_configure(config):  # type: ignore[no-untyped-def]
    config.addinivalue_line(
        "markers", "requires_git: marks tests that require a git executable"
    )


def _git_available() -> bool:
    from gitfixtures.core.config.domains.git import GitConfig

    return shutil.which(GitConfig().executable) is not None


def pytest_collection_modifyitems(config, items):  # type: ignore[no-untyped-def]
    if _git_available():
        return
    skip_marker = pytest.mark.skip(reason="git executable not available in this environment")
    for item in items:
        if "requires_git" in item.keywords:
            item.add_marker(skip_marker)


@pytest.fixture
def git_cleanup() -> Iterator[None]:
    """Remove the temp directories created while the test ran."""
    before = set(registered_temp_dirs())
    yield
    cleanup_temp_dirs([p for p in registered_temp_dirs() if p not in before])


@pytest.fixture
def git_repo_local(git_cleanup: None) -> GitRepo:
    """A plain repository with the default branch checked out."""
    return git_repo(with_remote=False)


@pytest.fixture
def git_repo_remote(git_cleanup: None) -> GitRepo:
    """A shallow clone of a bare remote seeded with one commit."""
    return git_repo(with_remote=True)
