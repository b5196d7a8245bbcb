"""Change detection against the most recent snapshot."""

from __future__ import annotations

from typing import Sequence

from ..utils.fs import file_digest, is_fixed_digest
from ..utils.log import log_debug
from .repository import Repository
from .snapshot_store import SnapshotStore
from .types import PathNotFoundError


DEFAULT_DIGEST = "sha256"


class ChangeDetector:
    """Decides whether the tracked files differ from a snapshot."""

    def __init__(self, repo: Repository, store: SnapshotStore, algorithm: str = DEFAULT_DIGEST):
        if not is_fixed_digest(algorithm):
            log_debug(f"Digest {algorithm!r} unavailable, using {DEFAULT_DIGEST}")
            algorithm = DEFAULT_DIGEST
        self.repo = repo
        self.store = store
        self.algorithm = algorithm

    def has_changes(self, tracked_paths: Sequence[str], last_commit_id: str | None) -> bool:
        """Compare current file contents with the snapshot of ``last_commit_id``.

        Args:
            tracked_paths: Paths from the index
            last_commit_id: Id of the latest logged commit, None if there is none

        Returns:
            True on the first differing file, or when there is no prior commit

        Raises:
            PathNotFoundError: A tracked file is missing from the working directory
        """
        if not last_commit_id:
            log_debug("No previous commit")
            return True

        for rel_path in tracked_paths:
            current = self.repo.root / rel_path
            if not current.is_file():
                raise PathNotFoundError(rel_path)

            stored = self.store.stored_file(last_commit_id, rel_path)
            if stored is None:
                log_debug(f"{rel_path} is not in {last_commit_id}")
                return True

            if file_digest(current, self.algorithm) != file_digest(stored, self.algorithm):
                log_debug(f"{rel_path} changed since {last_commit_id}")
                return True

        return False
