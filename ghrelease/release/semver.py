from __future__ import annotations

import re
from dataclasses import dataclass

from ghrelease.core.result import Err, Ok, Result

_NUM = r"(0|[1-9]\d*)"
_IDENT = r"[0-9A-Za-z-]+"
_SEMVER_RE = re.compile(
    rf"^{_NUM}\.{_NUM}\.{_NUM}"
    rf"(?:-({_IDENT}(?:\.{_IDENT})*))?"
    rf"(?:\+({_IDENT}(?:\.{_IDENT})*))?$"
)


@dataclass(frozen=True, slots=True)
class ParseError:
    text: str
    message: str

    def __str__(self) -> str:
        return f"{self.message}: {self.text!r}"


@dataclass(frozen=True, slots=True)
class SemVer:
    major: int
    minor: int
    patch: int
    prerelease: str = ""
    build: str = ""

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += f"-{self.prerelease}"
        if self.build:
            text += f"+{self.build}"
        return text

    def bump_patch(self) -> SemVer:
        # Pre-release and build suffixes describe the old version only.
        return SemVer(self.major, self.minor, self.patch + 1)


def parse_version(text: str) -> Result[SemVer, ParseError]:
    """Parse ``MAJOR.MINOR.PATCH[-pre][+build]`` (no ``v`` prefix)."""
    m = _SEMVER_RE.match(text)
    if m is None:
        return Err(ParseError(text=text, message="invalid semantic version"))
    return Ok(
        SemVer(
            major=int(m.group(1)),
            minor=int(m.group(2)),
            patch=int(m.group(3)),
            prerelease=m.group(4) or "",
            build=m.group(5) or "",
        )
    )


def next_patch_tag(tag: str) -> Result[str, ParseError]:
    """``v1.2.3`` -> ``v1.2.4``; the ``v`` prefix is kept iff present."""
    prefixed = tag.startswith("v")
    parsed = parse_version(tag.removeprefix("v"))
    if isinstance(parsed, Err):
        return parsed

    nxt = str(parsed.value.bump_patch())
    return Ok(f"v{nxt}" if prefixed else nxt)
