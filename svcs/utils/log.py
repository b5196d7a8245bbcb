"""Diagnostic output for SVCS.

User-facing messages are printed by the CLI on stdout. Everything here goes
to stderr.
"""

from __future__ import annotations

import sys

from .env import is_debug_mode


def log_debug(message: str) -> None:
    """Log debug message to stderr.
    
    Only prints if SVCS_DEBUG is enabled.
    """
    if is_debug_mode():
        print(f"[svcs] {message}", file=sys.stderr)


def log_error(message: str) -> None:
    """Report an unrecoverable failure to the user."""
    print(f"Error: {message}", file=sys.stderr)
