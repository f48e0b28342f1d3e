from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from ghrelease.core.structured import StrDict, get_bool, get_int, get_str, get_table


@dataclass(frozen=True, slots=True)
class RepoCoordinate:
    owner: str
    repo: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def is_complete(self) -> bool:
        return bool(self.owner) and bool(self.repo)


@dataclass(frozen=True, slots=True)
class ReleaseRequest:
    """Body of ``POST /repos/{owner}/{repo}/releases``."""

    tag_name: str
    target_commitish: str
    prerelease: bool = False

    def to_payload(self) -> StrDict:
        payload: StrDict = {"tag_name": self.tag_name, "prerelease": self.prerelease}
        # An empty target lets GitHub fall back to the default branch.
        if self.target_commitish:
            payload["target_commitish"] = self.target_commitish
        return payload


@dataclass(frozen=True, slots=True)
class Release:
    id: int
    tag_name: str
    html_url: str = ""
    prerelease: bool = False
    author_login: str = ""
    published_at: str = ""

    @classmethod
    def from_payload(cls, data: Mapping[str, object]) -> Release | None:
        """Parse a GitHub release object; None when ``id`` or ``tag_name`` is missing."""
        release_id = get_int(data, "id")
        tag = get_str(data, "tag_name")
        if release_id is None or tag is None:
            return None

        author = get_table(data, "author") or {}
        return cls(
            id=release_id,
            tag_name=tag,
            html_url=get_str(data, "html_url") or "",
            prerelease=get_bool(data, "prerelease") or False,
            author_login=get_str(author, "login") or "",
            published_at=get_str(data, "published_at") or "",
        )
