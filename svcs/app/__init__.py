"""Command line interface for SVCS."""
