"""Configuration management for SVCS."""

from .types import SvcsConfig
from .loader import ConfigLoader

__all__ = [
    "SvcsConfig",
    "ConfigLoader",
]
