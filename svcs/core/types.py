"""Shared types and errors for the SVCS core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SvcsError(Exception):
    """Base class for every error raised by the SVCS core."""


class ValidationError(SvcsError):
    """The request itself is malformed."""


class EmptyMessageError(ValidationError):
    """A commit was requested without a message."""

    def __init__(self) -> None:
        super().__init__("Commit message must not be empty")


class InvalidPathError(ValidationError):
    """A path exists but cannot be tracked."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot track '{path}': {reason}")
        self.path = path
        self.reason = reason


class NotFoundError(SvcsError):
    """A referenced file or commit does not exist."""


class PathNotFoundError(NotFoundError):
    def __init__(self, path: str):
        super().__init__(f"Can't find '{path}'")
        self.path = path


class CommitNotFoundError(NotFoundError):
    def __init__(self, commit_id: str):
        super().__init__(f"Commit does not exist: {commit_id}")
        self.commit_id = commit_id


class StorageError(SvcsError):
    """Repository control data is unreadable or inconsistent."""


class CorruptLogError(StorageError):
    def __init__(self, line_number: int, line: str):
        super().__init__(f"Malformed commit log record at line {line_number}: {line!r}")
        self.line_number = line_number
        self.line = line


class SnapshotExistsError(StorageError):
    def __init__(self, commit_id: str):
        super().__init__(f"Snapshot already exists: {commit_id}")
        self.commit_id = commit_id


class CommitStatus(str, Enum):
    """What a commit request ended up doing."""
    COMMITTED = "committed"
    NOTHING_TO_COMMIT = "nothing_to_commit"


@dataclass(frozen=True)
class LogEntry:
    """One commit log record."""
    commit_id: str
    author: str
    message: str


@dataclass(frozen=True)
class CommitOutcome:
    """Result of a commit request."""
    status: CommitStatus
    commit_id: str | None = None
    file_count: int = 0

    @property
    def committed(self) -> bool:
        return self.status is CommitStatus.COMMITTED

    @classmethod
    def nothing_to_commit(cls) -> CommitOutcome:
        return cls(status=CommitStatus.NOTHING_TO_COMMIT)


@dataclass(frozen=True)
class CheckoutResult:
    """Result of restoring a commit into the working directory."""
    commit_id: str
    file_count: int
