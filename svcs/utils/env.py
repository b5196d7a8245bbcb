"""Environment lookups for SVCS."""

from __future__ import annotations

import os
from pathlib import Path


TRUTHY = ("1", "true", "yes", "on")


def is_debug_mode() -> bool:
    """SVCS_DEBUG set to 1/true/yes/on (any case)."""
    return os.environ.get("SVCS_DEBUG", "").strip().lower() in TRUTHY


def enable_debug_mode() -> None:
    os.environ["SVCS_DEBUG"] = "1"


def get_global_svcs_dir() -> Path:
    """Per-user settings directory, ``~/.svcs``."""
    return Path.home() / ".svcs"


def get_repository_root() -> Path:
    """Resolve the working directory the CLI operates on.

    SVCS_ROOT wins over the current directory.
    """
    val = os.environ.get("SVCS_ROOT", "").strip()
    if val:
        return Path(val).expanduser()
    return Path.cwd()
