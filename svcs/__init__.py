"""SVCS - a minimal single-user version control system.

Tracks a set of files, snapshots them into immutable commits on demand,
and restores any earlier snapshot.
"""

__version__ = "1.0.0"
