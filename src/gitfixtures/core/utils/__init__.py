"""Shared utilities: process execution, temp directories, config file helpers."""
from __future__ import annotations

from .subprocess import git_environment, host_identity_configured, run_git_command, run_with_timeout
from .tempdirs import cleanup_temp_dirs, registered_temp_dirs, temp_directory

__all__ = [
    "run_with_timeout",
    "run_git_command",
    "git_environment",
    "host_identity_configured",
    "temp_directory",
    "registered_temp_dirs",
    "cleanup_temp_dirs",
]
