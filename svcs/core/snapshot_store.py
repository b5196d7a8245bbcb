"""Snapshot storage for SVCS.

Each commit owns one directory under ``vcs/commits/`` named by its id, holding
a verbatim copy of every tracked file under its tracked path.
"""

from __future__ import annotations

import os
import re
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Mapping

from ..utils.log import log_debug
from .repository import Repository
from .types import CommitNotFoundError, SnapshotExistsError


COMMIT_ID_RE = re.compile(r"^[0-9a-f]+$")


def is_valid_commit_id(commit_id: str) -> bool:
    return bool(COMMIT_ID_RE.match(commit_id or ""))


class SnapshotStore:
    """Manages immutable commit snapshots."""
    
    def __init__(self, repo: Repository):
        """Initialize snapshot store.
        
        Args:
            repo: Repository whose ``commits`` directory holds the snapshots
        """
        self.repo = repo
        self.storage_dir = repo.commits_dir
    
    def snapshot_dir(self, commit_id: str) -> Path:
        return self.storage_dir / commit_id

    def exists(self, commit_id: str) -> bool:
        if not is_valid_commit_id(commit_id):
            return False
        return self.snapshot_dir(commit_id).is_dir()
    
    def write(self, commit_id: str, files: Mapping[str, bytes]) -> Path:
        """Write a new snapshot.

        Files are staged in a hidden directory and renamed into place once all
        of them are written, so a partial snapshot never appears under its id.
        
        Args:
            commit_id: Id of the commit that owns the snapshot
            files: Tracked path -> content
            
        Returns:
            Path of the snapshot directory

        Raises:
            SnapshotExistsError: A snapshot with this id was already written
        """
        if not is_valid_commit_id(commit_id):
            raise ValueError(f"Invalid commit id: {commit_id!r}")

        target = self.snapshot_dir(commit_id)
        if target.exists():
            raise SnapshotExistsError(commit_id)

        self.storage_dir.mkdir(parents=True, exist_ok=True)
        staging = Path(tempfile.mkdtemp(dir=self.storage_dir, prefix=f".{commit_id}.", suffix=".tmp"))
        try:
            for rel_path, content in files.items():
                dst = staging / rel_path
                dst.parent.mkdir(parents=True, exist_ok=True)
                dst.write_bytes(content)
            os.rename(staging, target)
        except Exception:
            shutil.rmtree(staging, ignore_errors=True)
            raise

        log_debug(f"Wrote snapshot {commit_id} ({len(files)} files)")
        return target

    def read(self, commit_id: str) -> dict[str, bytes]:
        """Read every file of a snapshot.
        
        Returns:
            Tracked path -> stored content, ordered by path

        Raises:
            CommitNotFoundError: No snapshot with this id exists
        """
        if not self.exists(commit_id):
            raise CommitNotFoundError(commit_id)

        snapshot_dir = self.snapshot_dir(commit_id)
        files: dict[str, bytes] = {}
        for root, dirs, names in os.walk(snapshot_dir):
            dirs.sort()
            for name in sorted(names):
                src = Path(root) / name
                files[src.relative_to(snapshot_dir).as_posix()] = src.read_bytes()
        return files

    def stored_file(self, commit_id: str, rel_path: str) -> Path | None:
        """Location of one stored file, or None if the snapshot lacks it."""
        if not self.exists(commit_id):
            return None
        path = self.snapshot_dir(commit_id) / rel_path
        return path if path.is_file() else None
    
    def list(self) -> list[str]:
        """Ids of all snapshots, sorted by name.

        Hidden staging directories are skipped.
        """
        if not self.storage_dir.exists():
            return []
        return sorted(
            entry.name
            for entry in self.storage_dir.iterdir()
            if entry.is_dir() and not entry.name.startswith(".")
        )
    
    def delete(self, commit_id: str) -> bool:
        """Remove a snapshot.

        Only used to undo a snapshot whose commit never made it into the log.
        """
        if not self.exists(commit_id):
            return False
        shutil.rmtree(self.snapshot_dir(commit_id))
        return True

    @contextmanager
    def transaction(self, commit_id: str, files: Mapping[str, bytes]) -> Iterator[Path]:
        """Write a snapshot that is removed again if the block raises.

        The caller appends the log entry inside the block, which keeps
        snapshots and log entries one-to-one.
        """
        path = self.write(commit_id, files)
        try:
            yield path
        except BaseException:
            log_debug(f"Rolling back snapshot {commit_id}")
            self.delete(commit_id)
            raise
