"""Project root resolution.

The project root is where per-project configuration lives
(``<root>/.gitfixtures/config/*.yaml``). Temporary repositories created by the
git helpers are never treated as project roots.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

PROJECT_ROOT_ENV = "GITFIXTURES_PROJECT_ROOT"
PROJECT_CONFIG_DIRNAME = ".gitfixtures"


def resolve_project_root(start: Optional[Path] = None) -> Path:
    """Resolve the project root.

    Resolution priority:
    1. ``GITFIXTURES_PROJECT_ROOT`` environment variable
    2. Closest ancestor of ``start`` (default: cwd) holding a ``.gitfixtures`` dir
    3. ``start`` itself
    """
    env_root = os.environ.get(PROJECT_ROOT_ENV)
    if env_root:
        return Path(env_root).expanduser().resolve()

    here = Path(start or Path.cwd()).expanduser().resolve()
    for candidate in (here, *here.parents):
        if (candidate / PROJECT_CONFIG_DIRNAME).is_dir():
            return candidate
    return here


def get_project_config_dir(repo_root: Path) -> Path:
    """Return ``<repo_root>/.gitfixtures/config``."""
    return Path(repo_root) / PROJECT_CONFIG_DIRNAME / "config"


__all__ = [
    "PROJECT_ROOT_ENV",
    "PROJECT_CONFIG_DIRNAME",
    "resolve_project_root",
    "get_project_config_dir",
]
