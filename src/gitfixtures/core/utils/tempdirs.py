"""Temporary directories for throwaway repositories.

Every directory handed out by :func:`temp_directory` is recorded in a
process-wide registry. Nothing is removed implicitly; call
:func:`cleanup_temp_dirs` (the pytest fixtures do this on teardown) or leave
them to the OS temp cleanup.
"""
from __future__ import annotations

import logging
import os
import shutil
import stat
import sys
import tempfile
import threading
from pathlib import Path
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

_registry: List[Path] = []
_registry_lock = threading.Lock()


def temp_directory(prefix: Optional[str] = None) -> Path:
    """Create and register a fresh, empty temporary directory."""
    from gitfixtures.core.config.domains.temp import TempConfig

    cfg = TempConfig()
    base_dir = cfg.base_dir
    if base_dir is not None:
        base_dir.mkdir(parents=True, exist_ok=True)
    path = Path(
        tempfile.mkdtemp(
            prefix=prefix if prefix is not None else cfg.prefix,
            dir=str(base_dir) if base_dir is not None else None,
        )
    ).resolve()
    with _registry_lock:
        _registry.append(path)
    logger.debug("Created temp directory %s", path)
    return path


def registered_temp_dirs() -> List[Path]:
    """Directories created so far and not yet cleaned up, oldest first."""
    with _registry_lock:
        return list(_registry)


def _on_rm_error(func, path, _exc) -> None:  # type: ignore[no-untyped-def]
    # git writes read-only object files; Windows refuses to unlink them.
    os.chmod(path, stat.S_IWRITE)
    func(path)


def _remove_tree(path: Path) -> None:
    if path.exists():
        if sys.version_info >= (3, 12):
            shutil.rmtree(path, onexc=_on_rm_error)
        else:
            shutil.rmtree(path, onerror=_on_rm_error)


def cleanup_temp_dirs(paths: Optional[Iterable[Path]] = None) -> List[Path]:
    """Remove registered temp directories.

    Args:
        paths: Only remove these (must have been registered). All when None.

    Returns:
        The directories that were removed from the registry.
    """
    with _registry_lock:
        if paths is None:
            targets = list(_registry)
        else:
            wanted = {Path(p).resolve() for p in paths}
            targets = [p for p in _registry if p in wanted]
        for p in targets:
            _registry.remove(p)

    for p in targets:
        _remove_tree(p)
        logger.debug("Removed temp directory %s", p)
    return targets


__all__ = ["temp_directory", "registered_temp_dirs", "cleanup_temp_dirs"]
