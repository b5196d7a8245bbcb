"""Append-only commit log.

Records are ``id|author|message`` lines. Backslash, pipe and line breaks
inside a field are backslash-escaped, so plain messages keep the simple
format while arbitrary text still round-trips.
"""

from __future__ import annotations

from ..utils.log import log_debug
from .repository import Repository
from .types import CorruptLogError, LogEntry


SEPARATOR = "|"

_ESCAPES = {
    "\\": "\\\\",
    SEPARATOR: "\\|",
    "\n": "\\n",
    "\r": "\\r",
}
_UNESCAPES = {"\\": "\\", SEPARATOR: SEPARATOR, "n": "\n", "r": "\r"}


def escape_field(value: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in value)


def encode_entry(entry: LogEntry) -> str:
    """Serialize an entry as one log line (without the newline)."""
    return SEPARATOR.join(escape_field(v) for v in (entry.commit_id, entry.author, entry.message))


def split_record(line: str) -> list[str] | None:
    """Split a record on unescaped separators and unescape each field.

    Returns None if the line contains a dangling or unknown escape.
    """
    fields: list[str] = []
    current: list[str] = []
    chars = iter(line)
    for ch in chars:
        if ch == "\\":
            nxt = next(chars, None)
            if nxt is None or nxt not in _UNESCAPES:
                return None
            current.append(_UNESCAPES[nxt])
        elif ch == SEPARATOR:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
    fields.append("".join(current))
    return fields


def decode_entry(line: str, line_number: int = 0) -> LogEntry:
    fields = split_record(line)
    if fields is None or len(fields) != 3 or not fields[0]:
        raise CorruptLogError(line_number, line)
    return LogEntry(commit_id=fields[0], author=fields[1], message=fields[2])


class CommitLog:
    """Ordered commit history, oldest first."""

    def __init__(self, repo: Repository):
        self.repo = repo

    def append(self, commit_id: str, author: str, message: str) -> LogEntry:
        entry = LogEntry(commit_id=commit_id, author=author, message=message)
        with open(self.repo.log_path, "a", encoding="utf-8", newline="\n") as f:
            f.write(encode_entry(entry) + "\n")
        log_debug(f"Logged commit {commit_id}")
        return entry

    def all(self) -> list[LogEntry]:
        """Every entry in append order.

        Raises:
            CorruptLogError: A line cannot be parsed
        """
        entries: list[LogEntry] = []
        with open(self.repo.log_path, encoding="utf-8", newline="") as f:
            for number, raw in enumerate(f, 1):
                line = raw.rstrip("\r\n")
                if not line.strip():
                    continue
                entries.append(decode_entry(line, number))
        return entries

    def latest(self) -> LogEntry | None:
        entries = self.all()
        return entries[-1] if entries else None
