"""Commit engine - main orchestrator.

Coordinates the index, change detector, snapshot store and commit log for
commit and checkout.
"""

from __future__ import annotations

import hashlib
import time

from ..utils.fs import atomic_write
from ..utils.log import log_debug
from .changes import DEFAULT_DIGEST, ChangeDetector
from .commit_log import CommitLog
from .index import TrackedFileIndex
from .repository import Repository
from .snapshot_store import SnapshotStore
from .types import (
    CheckoutResult,
    CommitOutcome,
    CommitStatus,
    EmptyMessageError,
    LogEntry,
    PathNotFoundError,
    StorageError,
)


MAX_ID_ATTEMPTS = 16


def generate_commit_id(author: str) -> str:
    """Derive a commit id from the wall clock and the author name.

    Not a content hash: identical content committed twice gets two ids.
    """
    sha = hashlib.sha1()
    sha.update(str(time.time_ns()).encode("utf-8"))
    sha.update(author.encode("utf-8"))
    return sha.hexdigest()


class CommitEngine:
    """Runs commit and checkout against one repository."""
    
    def __init__(self, repo: Repository, digest: str = DEFAULT_DIGEST):
        """Initialize engine.
        
        Args:
            repo: Repository to operate on
            digest: hashlib algorithm used for change detection
        """
        self.repo = repo
        self.index = TrackedFileIndex(repo)
        self.store = SnapshotStore(repo)
        self.log = CommitLog(repo)
        self.detector = ChangeDetector(repo, self.store, algorithm=digest)
    
    def commit(self, message: str, author: str = "") -> CommitOutcome:
        """Snapshot the tracked files if anything changed.
        
        Args:
            message: Commit message, must not be blank
            author: Active user name
            
        Returns:
            CommitOutcome, either committed with the new id or nothing to commit

        Raises:
            EmptyMessageError: The message is blank
            PathNotFoundError: A tracked file is missing from the working directory
        """
        if not message or not message.strip():
            raise EmptyMessageError()

        tracked = self.index.list()
        if not tracked:
            log_debug("Index is empty")
            return CommitOutcome.nothing_to_commit()

        latest = self.log.latest()
        last_id = latest.commit_id if latest else None
        if not self.detector.has_changes(tracked, last_id):
            log_debug(f"No changes since {last_id}")
            return CommitOutcome.nothing_to_commit()

        files = self._read_working_files(tracked)
        commit_id = self._new_commit_id(author)

        with self.store.transaction(commit_id, files):
            self.log.append(commit_id, author, message)

        return CommitOutcome(
            status=CommitStatus.COMMITTED,
            commit_id=commit_id,
            file_count=len(files),
        )

    def checkout(self, commit_id: str) -> CheckoutResult:
        """Restore a commit's files into the working directory.

        Existing files are overwritten. Files restored before a failure stay
        restored.

        Raises:
            CommitNotFoundError: No snapshot exists for ``commit_id``
        """
        files = self.store.read(commit_id)

        for rel_path, content in files.items():
            atomic_write(self.repo.root / rel_path, content)

        log_debug(f"Restored {len(files)} files from {commit_id}")
        return CheckoutResult(commit_id=commit_id, file_count=len(files))

    def history(self) -> list[LogEntry]:
        """Log entries, most recent first."""
        return list(reversed(self.log.all()))

    def _read_working_files(self, tracked: list[str]) -> dict[str, bytes]:
        files: dict[str, bytes] = {}
        for rel_path in tracked:
            path = self.repo.root / rel_path
            if not path.is_file():
                raise PathNotFoundError(rel_path)
            files[rel_path] = path.read_bytes()
        return files

    def _new_commit_id(self, author: str) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            commit_id = generate_commit_id(author)
            if not self.store.snapshot_dir(commit_id).exists():
                return commit_id
        raise StorageError("Could not generate an unused commit id")
