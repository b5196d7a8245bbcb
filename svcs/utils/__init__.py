"""Utility modules for SVCS."""

from .fs import atomic_write, ensure_file, file_digest, is_fixed_digest, load_json_object
from .env import enable_debug_mode, get_global_svcs_dir, get_repository_root, is_debug_mode
from .log import log_debug, log_error

__all__ = [
    "atomic_write",
    "ensure_file",
    "file_digest",
    "is_fixed_digest",
    "load_json_object",
    "enable_debug_mode",
    "get_global_svcs_dir",
    "get_repository_root",
    "is_debug_mode",
    "log_debug",
    "log_error",
]
