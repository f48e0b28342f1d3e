"""Read repository coordinates straight from ``.git`` metadata files.

No git binary is involved: ``remote`` scans ``.git/config`` for the first
``url = ...`` line and ``head`` reads ``.git/HEAD``. Both are best-effort and
return empty strings when the files are missing or unrecognised.

Usage:
    owner, repo = remote(console, Path.cwd())
    branch = head(console, Path.cwd())
"""

from __future__ import annotations

import re
from pathlib import Path

from ghrelease.output.console import ConsoleProtocol

__all__ = ["remote", "head", "parse_remote_url"]

_URL_RE = re.compile(r"url = (.+)")

_REMOTE_PREFIXES = ("git@github.com:", "https://github.com/")
_HEAD_REF_PREFIX = "ref: refs/heads/"


def _read_text(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


def parse_remote_url(url: str) -> tuple[str, str]:
    """Split a GitHub remote URL into ``(owner, repo)``.

    Accepts ``git@github.com:owner/repo.git`` and
    ``https://github.com/owner/repo.git``; returns ("", "") otherwise.
    """
    value = url.strip()
    for prefix in _REMOTE_PREFIXES:
        value = value.removeprefix(prefix)
    value = value.removesuffix(".git")

    parts = value.split("/")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        return "", ""
    return parts[0], parts[1]


def remote(console: ConsoleProtocol, workdir: Path) -> tuple[str, str]:
    """Return the default ``(owner, repo)`` of the checkout at ``workdir``."""
    path = workdir / ".git" / "config"
    console.debug(f"loading git config: {path}")
    text = _read_text(path)
    if text is None:
        return "", ""

    match = _URL_RE.search(text)
    if match is None:
        console.debug("found 0 remote url")
        return "", ""

    url = match.group(1).strip()
    console.debug(f"used remote url: {url}")
    return parse_remote_url(url)


def head(console: ConsoleProtocol, workdir: Path) -> str:
    """Return the branch currently checked out at ``workdir``.

    A detached HEAD yields the commit sha as written in ``.git/HEAD``.
    """
    path = workdir / ".git" / "HEAD"
    console.debug(f"loading git HEAD: {path}")
    text = _read_text(path)
    if text is None:
        return ""

    lines = text.splitlines()
    if not lines:
        return ""
    return lines[0].replace(_HEAD_REF_PREFIX, "").strip()
