from __future__ import annotations

from pathlib import Path

import pytest

from gitfixtures import (
    GitCommandError,
    git_checkout,
    git_commits,
    git_detached_head,
    git_get_commits,
    git_push,
    git_repo,
    git_shallow_clone,
    git_show_head,
)
from gitfixtures.core.git.repository import file_url, init_bare_repo
from gitfixtures.core.utils.subprocess import run_git_command


def _git_out(args, cwd) -> str:
    return run_git_command(args, cwd=cwd).stdout.strip()


@pytest.mark.requires_git
class TestGitRepo:
    def test_local_repo_on_branch(self, isolated_project_env: Path) -> None:
        repo = git_repo(with_remote=False, branch="trunk")

        assert repo.cwd.is_dir()
        assert (repo.cwd / ".git").is_dir()
        assert repo.repository_url == file_url(repo.cwd)
        assert _git_out(["symbolic-ref", "--short", "HEAD"], repo.cwd) == "trunk"
        assert _git_out(["config", "commit.gpgsign"], repo.cwd) == "false"

    def test_local_repo_default_branch_from_config(self, write_project_config) -> None:
        write_project_config("git", {"git": {"default_branch": "main"}})

        repo = git_repo()

        assert _git_out(["symbolic-ref", "--short", "HEAD"], repo.cwd) == "main"

    def test_remote_repo_is_shallow_clone_of_bare(self, isolated_project_env: Path) -> None:
        repo = git_repo(with_remote=True)

        assert repo.repository_url.startswith("file://")
        assert repo.cwd.as_uri() != repo.repository_url
        assert _git_out(["rev-parse", "--is-shallow-repository"], repo.cwd) == "true"
        assert _git_out(["rev-parse", "--abbrev-ref", "HEAD"], repo.cwd) == "master"
        assert _git_out(["config", "commit.gpgsign"], repo.cwd) == "false"

        commits = git_get_commits(cwd=repo.cwd)
        assert [c.message for c in commits] == ["Initial commit"]

    def test_remote_repo_history_is_bounded(self, isolated_project_env: Path) -> None:
        repo = git_repo(with_remote=True, branch="main")
        git_commits(["one", "two", "three"], cwd=repo.cwd)
        git_push(repo.repository_url, "main", cwd=repo.cwd)

        clone = git_shallow_clone(repo.repository_url, "main", depth=2)

        assert [c.message for c in git_get_commits(cwd=clone)] == ["three", "two"]
        assert _git_out(["tag"], clone) == ""

    def test_repository_url_is_file_url(self, isolated_project_env: Path) -> None:
        repo = git_repo(with_remote=False)
        assert repo.repository_url == repo.cwd.resolve().as_uri()

    def test_git_repo_is_path_like(self, isolated_project_env: Path) -> None:
        repo = git_repo()
        assert Path(repo) == repo.cwd


@pytest.mark.requires_git
class TestInitBareRepo:
    def test_seeds_branch_with_initial_commit(self, isolated_project_env: Path) -> None:
        bare = isolated_project_env / "bare.git"
        bare.mkdir()
        run_git_command(["init", "--bare"], cwd=bare)

        init_bare_repo(file_url(bare), "release")

        heads = _git_out(["for-each-ref", "--format=%(refname:short)", "refs/heads"], bare)
        assert heads.splitlines() == ["release"]
        assert _git_out(["log", "-1", "--format=%s", "release"], bare) == "Initial commit"


@pytest.mark.requires_git
class TestCheckout:
    def test_create_then_switch_back(self, git_repo_local) -> None:
        cwd = git_repo_local.cwd
        git_commits(["base"], cwd=cwd)

        git_checkout("feature", True, cwd=cwd)
        assert _git_out(["rev-parse", "--abbrev-ref", "HEAD"], cwd) == "feature"

        git_checkout("master", cwd=cwd)
        assert _git_out(["rev-parse", "--abbrev-ref", "HEAD"], cwd) == "master"

    def test_missing_branch_fails(self, git_repo_local) -> None:
        git_commits(["base"], cwd=git_repo_local.cwd)

        with pytest.raises(GitCommandError) as excinfo:
            git_checkout("does-not-exist", cwd=git_repo_local.cwd)

        assert excinfo.value.returncode != 0
        assert excinfo.value.stderr


@pytest.mark.requires_git
class TestDetachedHead:
    def test_head_detached_at_sha(self, git_repo_remote) -> None:
        cwd = git_repo_remote.cwd
        commits = git_commits(["first", "second"], cwd=cwd)
        git_push(git_repo_remote.repository_url, "master", cwd=cwd)
        target = commits[1].hash

        detached = git_detached_head(git_repo_remote.repository_url, target)

        assert git_show_head(cwd=detached) == target
        result = run_git_command(["symbolic-ref", "-q", "HEAD"], cwd=detached, check=False)
        assert result.returncode != 0
        assert _git_out(["remote", "get-url", "origin"], detached) == git_repo_remote.repository_url
