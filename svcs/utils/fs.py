"""File system utilities for SVCS.

Atomic writes, control-file creation, content hashing and JSON settings.
"""

from __future__ import annotations

import hashlib
import json
import os
import tempfile
from pathlib import Path
from typing import Any


CHUNK_SIZE = 64 * 1024


def atomic_write(file_path: Path | str, content: str | bytes) -> None:
    """Replace a file's content in one rename.

    Text is written as UTF-8, bytes verbatim. Missing parent directories are
    created.
    """
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = content.encode("utf-8") if isinstance(content, str) else content

    # Temp file must live in the target directory for os.replace to be atomic
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp_path, path)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


def ensure_file(file_path: Path | str) -> bool:
    """Create an empty file (and its parents) unless it already exists.

    Returns:
        True if the file was created
    """
    path = Path(file_path)
    if path.exists():
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch()
    return True


def is_fixed_digest(algorithm: str) -> bool:
    """Whether ``algorithm`` can be built by hashlib and has a fixed size.

    Variable-length algorithms (shake_*) need a length for ``digest()`` and
    are not usable for equality testing here.
    """
    try:
        return hashlib.new(algorithm).digest_size > 0
    except (ValueError, TypeError):
        return False


def file_digest(file_path: Path | str, algorithm: str = "sha256") -> bytes:
    """Hash a file's content in chunks.

    Args:
        file_path: File to hash
        algorithm: Fixed-size algorithm name accepted by hashlib.new

    Returns:
        Raw digest bytes
    """
    h = hashlib.new(algorithm)
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
            h.update(chunk)
    return h.digest()


def load_json_object(file_path: Path | str) -> dict[str, Any]:
    """Read a JSON object from disk.

    A missing, unreadable or malformed file, or one whose top level is not
    an object, yields an empty dict.
    """
    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}
