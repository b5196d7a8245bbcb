"""Tracked-file index.

One path per line, append-only. Paths are stored relative to the repository
root in POSIX form.
"""

from __future__ import annotations

from pathlib import Path

from ..utils.log import log_debug
from .repository import VCS_DIRNAME, Repository
from .types import InvalidPathError, PathNotFoundError


class TrackedFileIndex:
    """Ordered set of paths the user has opted into versioning."""

    def __init__(self, repo: Repository):
        self.repo = repo

    def list(self) -> list[str]:
        """Tracked paths in the order they were first tracked.

        Duplicate lines in the index file are collapsed.
        """
        seen: set[str] = set()
        paths: list[str] = []
        with open(self.repo.index_path, encoding="utf-8") as f:
            for line in f:
                path = line.rstrip("\r\n")
                if path and path not in seen:
                    seen.add(path)
                    paths.append(path)
        return paths

    def track(self, path: str) -> str:
        """Append a path to the index.

        Args:
            path: Path relative to the repository root, or absolute inside it

        Returns:
            The normalized path that was recorded

        Raises:
            PathNotFoundError: The path does not exist
            InvalidPathError: The path is not a trackable file
        """
        rel_path = self.normalize(path)
        with open(self.repo.index_path, "a", encoding="utf-8") as f:
            f.write(rel_path + "\n")
        log_debug(f"Tracking {rel_path}")
        return rel_path

    def normalize(self, path: str) -> str:
        """Validate a path and turn it into its index form."""
        candidate = Path(path)
        if not candidate.is_absolute():
            candidate = self.repo.root / candidate

        if not candidate.exists():
            raise PathNotFoundError(path)

        root = self.repo.root.resolve()
        resolved = candidate.resolve()
        try:
            rel = resolved.relative_to(root)
        except ValueError:
            raise InvalidPathError(path, "outside the repository") from None

        if rel.parts and rel.parts[0] == VCS_DIRNAME:
            raise InvalidPathError(path, "inside the control directory")
        if not resolved.is_file():
            raise InvalidPathError(path, "not a regular file")

        rel_path = rel.as_posix()
        if "\n" in rel_path or "\r" in rel_path:
            raise InvalidPathError(path, "line break in file name")
        return rel_path
