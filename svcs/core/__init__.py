"""Core modules for SVCS."""

from .repository import Repository
from .index import TrackedFileIndex
from .snapshot_store import SnapshotStore
from .changes import ChangeDetector
from .commit_log import CommitLog
from .engine import CommitEngine

__all__ = [
    "Repository",
    "TrackedFileIndex",
    "SnapshotStore",
    "ChangeDetector",
    "CommitLog",
    "CommitEngine",
]
