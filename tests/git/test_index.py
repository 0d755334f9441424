from __future__ import annotations

import pytest

from gitfixtures import git_add, git_commited_files, git_commits, git_staged
from gitfixtures.core.utils.subprocess import run_git_command


@pytest.mark.requires_git
class TestStagedAndAdd:
    def test_staged_empty_then_added_file(self, git_repo_local) -> None:
        cwd = git_repo_local.cwd
        (cwd / "a.txt").write_text("a\n", encoding="utf-8")

        assert git_staged(cwd=cwd) == []

        git_add(["a.txt"], cwd=cwd)

        assert git_staged(cwd=cwd) == ["a.txt"]

    def test_add_forces_ignored_files(self, git_repo_local) -> None:
        cwd = git_repo_local.cwd
        (cwd / ".gitignore").write_text("*.log\n", encoding="utf-8")
        (cwd / "debug.log").write_text("x\n", encoding="utf-8")

        git_add(["debug.log"], cwd=cwd)

        assert git_staged(cwd=cwd) == ["debug.log"]

    def test_modified_files_are_not_reported(self, git_repo_local) -> None:
        cwd = git_repo_local.cwd
        (cwd / "a.txt").write_text("a\n", encoding="utf-8")
        git_add(["a.txt"], cwd=cwd)
        run_git_command(["commit", "-m", "add a", "--no-gpg-sign"], cwd=cwd)
        (cwd / "a.txt").write_text("changed\n", encoding="utf-8")
        git_add(["a.txt"], cwd=cwd)

        assert git_staged(cwd=cwd) == []


@pytest.mark.requires_git
class TestCommitedFiles:
    def test_files_of_commit(self, git_repo_local) -> None:
        cwd = git_repo_local.cwd
        git_commits(["root"], cwd=cwd)
        (cwd / "x.txt").write_text("x\n", encoding="utf-8")
        (cwd / "sub").mkdir()
        (cwd / "sub" / "y.txt").write_text("y\n", encoding="utf-8")
        git_add(["x.txt", "sub/y.txt"], cwd=cwd)
        run_git_command(["commit", "-m", "two files", "--no-gpg-sign"], cwd=cwd)

        files = git_commited_files("HEAD", cwd=cwd)

        assert set(files) == {"x.txt", "sub/y.txt"}

    def test_empty_commit_has_no_files(self, git_repo_local) -> None:
        cwd = git_repo_local.cwd
        git_commits(["root", "empty"], cwd=cwd)

        assert git_commited_files("HEAD", cwd=cwd) == []
