"""Configuration loader for SVCS.

Two sources, highest priority first:
1. The repository identity file (``vcs/config.txt``), a single whole-file value
2. Global settings (``~/.svcs/config.json``)
"""

from __future__ import annotations

from ..core.repository import Repository
from ..core.types import ValidationError
from ..utils.env import get_global_svcs_dir
from ..utils.fs import atomic_write, load_json_object
from .types import SvcsConfig


class ConfigLoader:
    """Loads and stores SVCS configuration."""
    
    def __init__(self, repo: Repository):
        self.repo = repo
    
    def load(self) -> SvcsConfig:
        """Load configuration from all sources.

        Nothing is cached; every call re-reads the files.
        """
        config = SvcsConfig.from_dict(load_json_object(get_global_svcs_dir() / "config.json"))

        local_name = self.read_identity()
        if local_name:
            config.username = local_name
        return config

    def read_identity(self) -> str | None:
        """Read the repository identity file.

        Raises:
            OSError: The identity file cannot be read
        """
        name = self.repo.config_path.read_text(encoding="utf-8").strip()
        return name or None

    def get_username(self) -> str | None:
        return self.load().username

    def set_username(self, name: str) -> str:
        """Replace the repository identity.

        Returns:
            The stored name

        Raises:
            ValidationError: The name is empty
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Username must not be empty")
        atomic_write(self.repo.config_path, name)
        return name
