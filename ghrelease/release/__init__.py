"""Release versioning and creation."""

from .semver import ParseError, SemVer, next_patch_tag, parse_version
from .service import (
    create_prerelease,
    create_release,
    delete_release_by_tag,
    next_patch_version,
)

__all__ = [
    "ParseError",
    "SemVer",
    "create_prerelease",
    "create_release",
    "delete_release_by_tag",
    "next_patch_tag",
    "next_patch_version",
    "parse_version",
]
