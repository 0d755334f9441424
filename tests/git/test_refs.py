from __future__ import annotations

import pytest

from gitfixtures import (
    git_commits,
    git_get_commits,
    git_push,
    git_remote_head,
    git_show_head,
    git_tag_version,
)
from gitfixtures.core.utils.subprocess import run_git_command


def _tag_target(tag: str, cwd) -> str:
    return run_git_command(["rev-list", "-n", "1", tag], cwd=cwd).stdout.strip()


@pytest.mark.requires_git
class TestShowHead:
    def test_matches_newest_commit(self, git_repo_local) -> None:
        commits = git_commits(["a", "b", "c"], cwd=git_repo_local.cwd)

        assert git_show_head(cwd=git_repo_local.cwd) == commits[0].hash
        assert git_show_head(cwd=git_repo_local.cwd) == git_get_commits(cwd=git_repo_local.cwd)[0].hash


@pytest.mark.requires_git
class TestTagVersion:
    def test_tag_on_head(self, git_repo_local) -> None:
        head, = git_commits(["release"], cwd=git_repo_local.cwd)

        git_tag_version("v1.0.0", cwd=git_repo_local.cwd)

        assert _tag_target("v1.0.0", git_repo_local.cwd) == head.hash

    def test_force_moves_existing_tag(self, git_repo_local) -> None:
        newer, older = git_commits(["older", "newer"], cwd=git_repo_local.cwd)
        git_tag_version("v1.0.0", cwd=git_repo_local.cwd)

        git_tag_version("v1.0.0", older.hash, cwd=git_repo_local.cwd)

        assert _tag_target("v1.0.0", git_repo_local.cwd) == older.hash
        assert newer.hash != older.hash


@pytest.mark.requires_git
class TestPushAndRemoteHead:
    def test_remote_head_after_push(self, git_repo_remote) -> None:
        cwd = git_repo_remote.cwd
        url = git_repo_remote.repository_url
        head, = git_commits(["feat: release"], cwd=cwd)
        git_tag_version("v1.0.0", head.hash, cwd=cwd)

        git_push(url, "master", cwd=cwd)

        assert git_remote_head(url, cwd=cwd) == head.hash
        tags = run_git_command(["ls-remote", "--tags", url], cwd=cwd).stdout
        assert "refs/tags/v1.0.0" in tags

    def test_remote_head_before_push_is_seed(self, git_repo_remote) -> None:
        cwd = git_repo_remote.cwd
        seed = git_show_head(cwd=cwd)
        git_commits(["local only"], cwd=cwd)

        assert git_remote_head(git_repo_remote.repository_url, cwd=cwd) == seed

    def test_push_to_new_branch(self, git_repo_remote) -> None:
        cwd = git_repo_remote.cwd
        url = git_repo_remote.repository_url
        head, = git_commits(["on next"], cwd=cwd)

        git_push(url, "next", cwd=cwd)

        refs = run_git_command(["ls-remote", url, "refs/heads/next"], cwd=cwd).stdout
        assert refs.split()[0] == head.hash
