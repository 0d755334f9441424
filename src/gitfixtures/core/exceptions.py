from __future__ import annotations

import subprocess
from typing import Any, Dict, Mapping, Optional, Sequence


class GitFixturesError(Exception):
    """Base exception for gitfixtures."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class GitCommandError(GitFixturesError, subprocess.CalledProcessError):
    """Raised when a git process exits with a non-zero status.

    Still an instance of :class:`subprocess.CalledProcessError`, so callers
    that only know about the standard library keep working.
    """

    def __init__(
        self,
        returncode: int,
        cmd: Sequence[str],
        output: Optional[str] = None,
        stderr: Optional[str] = None,
        *,
        cwd: Optional[str] = None,
    ) -> None:
        argv = [str(part) for part in cmd]
        message = f"Command {argv!r} returned non-zero exit status {returncode}"
        err = (stderr or "").strip()
        if err:
            message = f"{message}: {err}"
        # CalledProcessError.__init__ does not chain to Exception.__init__, so
        # the context is set here instead of through GitFixturesError.__init__.
        subprocess.CalledProcessError.__init__(self, returncode, argv, output=output, stderr=stderr)
        self.context = {"cmd": argv, "returncode": returncode, "cwd": cwd, "stderr": stderr or ""}
        self.message = message
        self.cwd = cwd

    def __str__(self) -> str:
        return self.message


class GitOutputParseError(GitFixturesError, ValueError):
    """Raised when git output does not have the expected line format."""

    def __init__(
        self,
        message: str = "",
        *,
        line: Optional[str] = None,
        command: Optional[Sequence[str]] = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if line is not None:
            ctx["line"] = line
        if command is not None:
            ctx["command"] = [str(part) for part in command]
        GitFixturesError.__init__(self, message, context=ctx)
        ValueError.__init__(self, message)
        self.line = line


class ConfigError(GitFixturesError, RuntimeError):
    """Raised when configuration cannot be loaded or fails validation."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        GitFixturesError.__init__(self, message, context=context)
        RuntimeError.__init__(self, message)


__all__ = [
    "GitFixturesError",
    "GitCommandError",
    "GitOutputParseError",
    "ConfigError",
]
