"""Local git metadata readers."""

from .local import head, parse_remote_url, remote

__all__ = ["head", "parse_remote_url", "remote"]
