"""Configuration schemas for SVCS."""

from __future__ import annotations

from dataclasses import dataclass

from ..utils.fs import is_fixed_digest


DEFAULT_DIGEST = "sha256"


@dataclass
class SvcsConfig:
    """Effective settings for one invocation."""
    username: str | None = None
    digest: str = DEFAULT_DIGEST

    @classmethod
    def from_dict(cls, data: dict) -> SvcsConfig:
        """Create SvcsConfig from the global settings dictionary.

        Digest names hashlib cannot build, or whose output length is not
        fixed, fall back to the default.
        """
        user_data = data.get("user", {})
        name = user_data.get("name") if isinstance(user_data, dict) else None

        digest = data.get("digest", DEFAULT_DIGEST)
        if not isinstance(digest, str) or not is_fixed_digest(digest):
            digest = DEFAULT_DIGEST

        return cls(
            username=(name.strip() or None) if isinstance(name, str) else None,
            digest=digest,
        )
