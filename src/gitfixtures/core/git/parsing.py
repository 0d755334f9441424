"""Parsers for line-oriented git output.

Each parser either returns typed values or raises GitOutputParseError with
the offending line; none of them lets a failed match surface as an
AttributeError/IndexError.
"""
from __future__ import annotations

import re
from datetime import datetime
from typing import List, Optional, Sequence, Tuple

from gitfixtures.core.exceptions import GitOutputParseError

from .models import Commit, Person

# Records are NUL-terminated (``git log -z``). The message is the last field and
# may itself contain FIELD_SEP.
RECORD_SEP = "\x00"
FIELD_SEP = "\x1f"

LOG_FIELDS = (
    ("hash", "%H"),
    ("short_hash", "%h"),
    ("tree", "%T"),
    ("author_name", "%an"),
    ("author_email", "%ae"),
    ("author_date", "%aI"),
    ("committer_name", "%cn"),
    ("committer_email", "%ce"),
    ("committer_date", "%cI"),
    ("git_tags", "%d"),
    ("message", "%B"),
)

LOG_FORMAT = "%x1f".join(placeholder for _, placeholder in LOG_FIELDS)

_SHA_LINE = re.compile(r"^(?P<head>\S+)")
_SHOW_COMMIT = re.compile(r"^commit (?P<commit>\S+)")
_STAGED_LINE = re.compile(r"^A\s+(?P<file>.+)$")


def _lines(stdout: str) -> List[str]:
    return [line.rstrip("\r") for line in (stdout or "").split("\n")]


def _parse_date(value: str, *, line: str, command: Optional[Sequence[str]]) -> datetime:
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError as exc:
        raise GitOutputParseError(
            f"Invalid ISO 8601 date in git log output: {value!r}", line=line, command=command
        ) from exc


def _split_message(message: str) -> Tuple[str, str]:
    """Subject (first paragraph on one line) and body of a raw commit message."""
    head, _, rest = message.strip("\n").partition("\n\n")
    subject = " ".join(line.strip() for line in head.split("\n"))
    return subject, rest.lstrip("\n").rstrip()


def parse_log(stdout: str, command: Optional[Sequence[str]] = None) -> List[Commit]:
    """Parse ``git log -z --format=LOG_FORMAT`` output, newest first."""
    commits: List[Commit] = []
    for record in (stdout or "").split(RECORD_SEP):
        record = record.lstrip("\n")
        if not record:
            continue
        values = record.split(FIELD_SEP, len(LOG_FIELDS) - 1)
        if len(values) != len(LOG_FIELDS):
            raise GitOutputParseError(
                f"Expected {len(LOG_FIELDS)} fields in git log record, got {len(values)}",
                line=record,
                command=command,
            )
        fields = dict(zip((name for name, _ in LOG_FIELDS), values))
        subject, body = _split_message(fields["message"])
        commits.append(
            Commit(
                hash=fields["hash"].strip(),
                short_hash=fields["short_hash"].strip(),
                tree=fields["tree"].strip(),
                author=Person(
                    name=fields["author_name"],
                    email=fields["author_email"],
                    date=_parse_date(fields["author_date"], line=record, command=command),
                ),
                committer=Person(
                    name=fields["committer_name"],
                    email=fields["committer_email"],
                    date=_parse_date(fields["committer_date"], line=record, command=command),
                ),
                subject=subject,
                body=body,
                message=fields["message"].strip(),
                git_tags=fields["git_tags"].strip(),
            )
        )
    return commits


def parse_remote_head(stdout: str, command: Optional[Sequence[str]] = None) -> Optional[str]:
    """SHA in the first column of the first ``git ls-remote`` line, if any."""
    for line in _lines(stdout):
        if not line:
            continue
        match = _SHA_LINE.match(line)
        if match is None:
            raise GitOutputParseError(
                "Unexpected git ls-remote line", line=line, command=command
            )
        return match.group("head")
    return None


def parse_show_head(stdout: str, command: Optional[Sequence[str]] = None) -> Optional[str]:
    """SHA from the first ``commit <sha>`` line of ``git show``, if any."""
    for line in _lines(stdout):
        if not line.startswith("commit"):
            continue
        match = _SHOW_COMMIT.match(line)
        if match is None:
            raise GitOutputParseError("Unexpected git show header", line=line, command=command)
        return match.group("commit")
    return None


def parse_staged(stdout: str, command: Optional[Sequence[str]] = None) -> List[str]:
    """Paths staged for addition (``A `` lines of ``git status --porcelain``)."""
    staged: List[str] = []
    for line in _lines(stdout):
        if not line.startswith("A "):
            continue
        match = _STAGED_LINE.match(line)
        if match is None:
            raise GitOutputParseError("Unexpected git status line", line=line, command=command)
        staged.append(match.group("file"))
    return staged


def parse_name_only(stdout: str) -> List[str]:
    """Non-empty lines of a ``--name-only`` listing."""
    return [line for line in _lines(stdout) if line]


__all__ = [
    "LOG_FORMAT",
    "parse_log",
    "parse_remote_head",
    "parse_show_head",
    "parse_staged",
    "parse_name_only",
]
