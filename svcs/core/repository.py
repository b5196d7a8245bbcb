"""Repository handle.

Names every control file of a repository so that no component relies on
ambient global paths.
"""

from __future__ import annotations

from pathlib import Path

from ..utils.fs import ensure_file
from ..utils.log import log_debug


VCS_DIRNAME = "vcs"


class Repository:
    """Paths and bootstrap for one working directory."""

    INDEX_NAME = "index.txt"
    LOG_NAME = "log.txt"
    CONFIG_NAME = "config.txt"
    COMMITS_NAME = "commits"

    def __init__(self, root: Path | str | None = None):
        """Initialize repository handle.

        Args:
            root: Working directory (defaults to cwd)
        """
        self.root = Path(root) if root else Path.cwd()

    def __repr__(self) -> str:
        return f"Repository({str(self.root)!r})"

    @property
    def vcs_dir(self) -> Path:
        return self.root / VCS_DIRNAME

    @property
    def index_path(self) -> Path:
        return self.vcs_dir / self.INDEX_NAME

    @property
    def log_path(self) -> Path:
        return self.vcs_dir / self.LOG_NAME

    @property
    def config_path(self) -> Path:
        return self.vcs_dir / self.CONFIG_NAME

    @property
    def commits_dir(self) -> Path:
        return self.vcs_dir / self.COMMITS_NAME

    def is_initialized(self) -> bool:
        return (
            self.commits_dir.is_dir()
            and self.index_path.is_file()
            and self.log_path.is_file()
            and self.config_path.is_file()
        )

    def init(self) -> bool:
        """Create any missing control files and directories.

        Existing files are never truncated.

        Returns:
            True if anything was created
        """
        created = not self.commits_dir.is_dir()
        self.commits_dir.mkdir(parents=True, exist_ok=True)
        for path in (self.config_path, self.index_path, self.log_path):
            created = ensure_file(path) or created
        if created:
            log_debug(f"Initialized repository at {self.vcs_dir}")
        return created
