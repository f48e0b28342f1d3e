"""Helpers for automating GitHub releases from a local git checkout."""

__version__ = "0.1.0"
