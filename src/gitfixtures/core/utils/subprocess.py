"""Subprocess helpers with config-driven timeouts.

This module provides safe subprocess execution with:
- Config-driven timeout management
- Process-group termination when a timeout expires
- A git wrapper that merges the environment and raises GitCommandError
- No shell=True (security)
"""
from __future__ import annotations

import logging
import os
import signal
import subprocess
from functools import lru_cache
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Mapping, Optional, Sequence

from gitfixtures.core.exceptions import GitCommandError

logger = logging.getLogger(__name__)


def _flatten_cmd(cmd: Sequence[Any]) -> List[str]:
    return [str(p) for p in cmd]


def _popen_process_group_kwargs() -> Dict[str, Any]:
    if os.name == "posix":
        return {"start_new_session": True}
    if os.name == "nt":
        creationflags = getattr(subprocess, "CREATE_NEW_PROCESS_GROUP", None)
        if isinstance(creationflags, int):
            return {"creationflags": creationflags}
    return {}


def _terminate_process_group(proc: subprocess.Popen[Any]) -> None:
    if proc.poll() is not None:
        return
    if os.name == "posix":
        try:
            os.killpg(proc.pid, signal.SIGTERM)
        except OSError:
            proc.terminate()
        try:
            proc.wait(timeout=0.2)
        except subprocess.TimeoutExpired:
            try:
                os.killpg(proc.pid, signal.SIGKILL)
            except OSError:
                proc.kill()
            proc.wait(timeout=0.2)
        return

    proc.kill()
    proc.wait(timeout=0.2)


def run_with_timeout(
    cmd: Sequence[Any],
    *,
    timeout: float,
    cwd: Optional[Path | str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> subprocess.CompletedProcess:
    """Run ``cmd`` capturing text output without hanging on timeout.

    Unlike ``subprocess.run``, the child is started in its own process group
    so that grandchildren (git spawns helpers for clone/fetch/push) are killed
    with it when the timeout expires.

    Raises:
        subprocess.TimeoutExpired: When the command exceeds ``timeout``.
        FileNotFoundError: When the executable cannot be found.
    """
    argv = _flatten_cmd(cmd)
    proc = subprocess.Popen(
        argv,
        cwd=str(cwd) if cwd is not None else None,
        env=dict(env) if env is not None else None,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
        errors="replace",
        **_popen_process_group_kwargs(),
    )
    try:
        stdout, stderr = proc.communicate(timeout=timeout)
    except subprocess.TimeoutExpired as exc:
        _terminate_process_group(proc)
        try:
            stdout, stderr = proc.communicate(timeout=0.2)
        except subprocess.TimeoutExpired:
            stdout = exc.output
            stderr = exc.stderr
        raise subprocess.TimeoutExpired(argv, timeout, output=stdout, stderr=stderr) from None

    return subprocess.CompletedProcess(
        argv,
        proc.returncode if proc.returncode is not None else 0,
        stdout=stdout,
        stderr=stderr,
    )


@lru_cache(maxsize=None)
def host_identity_configured(executable: str) -> bool:
    """Whether the host's git config already sets ``user.name`` and ``user.email``.

    Cached per executable; call ``host_identity_configured.cache_clear()`` after
    changing the host's git config.
    """
    from gitfixtures.core.config.domains.timeouts import TimeoutsConfig

    timeout = TimeoutsConfig().git_operations_seconds
    for key in ("user.name", "user.email"):
        result = run_with_timeout([executable, "config", "--get", key], timeout=timeout)
        if result.returncode != 0 or not result.stdout.strip():
            return False
    return True


def git_environment(env: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Build the environment for a git child process.

    Precedence (lowest to highest): configured commit identity, host
    environment, caller overrides. The configured identity only applies when
    the host's git config has no ``user.name``/``user.email`` of its own.
    """
    from gitfixtures.core.config.domains.git import GitConfig

    cfg = GitConfig()
    merged: Dict[str, str] = {}
    identity = cfg.identity
    if identity is not None and not host_identity_configured(cfg.executable):
        merged.update(identity.as_env())
    merged.update(os.environ)
    if env:
        merged.update({str(k): str(v) for k, v in env.items()})
    return merged


def run_git_command(
    args: Sequence[Any],
    *,
    cwd: Optional[Path | str] = None,
    env: Optional[Mapping[str, str]] = None,
    timeout: Optional[float] = None,
    check: bool = True,
) -> subprocess.CompletedProcess:
    """
    Run ``git <args>`` using the config-driven timeout bucket.

    Args:
        args: git arguments, without the executable
        cwd: Working directory (Path or str)
        env: Environment overrides merged on top of the host environment
        timeout: Timeout in seconds (defaults to timeouts.git_operations_seconds)
        check: Raise GitCommandError on non-zero exit

    Returns:
        CompletedProcess with text stdout/stderr

    Raises:
        GitCommandError: git exited non-zero and ``check`` is True.
        subprocess.TimeoutExpired: git did not finish in time.
    """
    from gitfixtures.core.config.domains.git import GitConfig
    from gitfixtures.core.config.domains.logging import LoggingConfig, truncate_text
    from gitfixtures.core.config.domains.timeouts import TimeoutsConfig

    argv = [GitConfig().executable, *_flatten_cmd(args)]
    if timeout is None:
        timeout = TimeoutsConfig().git_operations_seconds

    log_cfg = LoggingConfig()
    log_enabled = log_cfg.enabled and log_cfg.subprocess_enabled
    cwd_str = str(cwd) if cwd is not None else None

    if log_enabled:
        logger.debug("git start: %s (cwd=%s)", argv, cwd_str)
    start = perf_counter()
    try:
        result = run_with_timeout(argv, timeout=timeout, cwd=cwd, env=git_environment(env))
    except subprocess.TimeoutExpired:
        if log_enabled:
            logger.debug("git timeout after %.1fs: %s", timeout, argv)
        raise
    duration_ms = (perf_counter() - start) * 1000.0

    if log_enabled:
        logger.debug("git end: %s rc=%s (%.1fms)", argv, result.returncode, duration_ms)

    if check and result.returncode != 0:
        if log_enabled:
            logger.debug(
                "git failed: %s stderr=%s",
                argv,
                truncate_text(result.stderr or "", max_bytes=log_cfg.subprocess_max_output_bytes),
            )
        raise GitCommandError(
            result.returncode,
            argv,
            output=result.stdout,
            stderr=result.stderr,
            cwd=cwd_str,
        )
    return result


__all__ = [
    "run_with_timeout",
    "run_git_command",
    "git_environment",
    "host_identity_configured",
]
