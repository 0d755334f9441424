"""
gitfixtures - throwaway git repositories for test suites

Wraps the ``git`` command line to create temporary repositories (plain or
shallow clones of a seeded bare remote), generate commits, parse the log,
tag, push and inspect the index.
"""

from gitfixtures.core.exceptions import (
    ConfigError,
    GitCommandError,
    GitFixturesError,
    GitOutputParseError,
)
from gitfixtures.core.git import (
    Commit,
    GitRepo,
    Person,
    git_add,
    git_checkout,
    git_commited_files,
    git_commits,
    git_detached_head,
    git_get_commits,
    git_push,
    git_remote_head,
    git_repo,
    git_shallow_clone,
    git_show_head,
    git_staged,
    git_tag_version,
    init_bare_repo,
)
from gitfixtures.core.utils.tempdirs import cleanup_temp_dirs

__version__ = "1.0.0"
__all__ = [
    "__version__",
    "Commit",
    "GitRepo",
    "Person",
    "git_repo",
    "init_bare_repo",
    "git_commits",
    "git_get_commits",
    "git_checkout",
    "git_tag_version",
    "git_shallow_clone",
    "git_detached_head",
    "git_remote_head",
    "git_show_head",
    "git_staged",
    "git_commited_files",
    "git_add",
    "git_push",
    "cleanup_temp_dirs",
    "GitFixturesError",
    "GitCommandError",
    "GitOutputParseError",
    "ConfigError",
]
