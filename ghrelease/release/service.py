"""Release automation entry points.

Each function opens its own client (unless one is injected), performs a short
sequence of blocking API calls and returns a Result. Nothing is cached
between calls.
"""

from __future__ import annotations

from ghrelease.core.config import Config
from ghrelease.core.result import Err, Ok, Result
from ghrelease.github.client import GitHubClient, new_token_client
from ghrelease.github.errors import ApiError, GitHubError, is_tag_name_already_exists
from ghrelease.github.model import Release, ReleaseRequest, RepoCoordinate
from ghrelease.output.console import ConsoleProtocol
from ghrelease.release.semver import ParseError, next_patch_tag

__all__ = [
    "create_prerelease",
    "create_release",
    "delete_release_by_tag",
    "next_patch_version",
]


def _client(token: str, client: GitHubClient | None, config: Config | None) -> GitHubClient:
    if client is not None:
        return client
    return new_token_client(token, config)


def next_patch_version(
    console: ConsoleProtocol,
    token: str,
    coord: RepoCoordinate,
    *,
    client: GitHubClient | None = None,
    config: Config | None = None,
) -> Result[str, GitHubError | ParseError]:
    """Return the tag following the latest published release.

    Returns Ok("") without any network call when the token, owner or repo is
    empty: callers treat that as "release automation disabled".
    """
    if not token or not coord.is_complete:
        return Ok("")

    gh = _client(token, client, config)
    console.debug(f"fetching latest release of {coord.slug}")
    latest = gh.latest_release(coord)
    if isinstance(latest, Err):
        return latest

    release = latest.value
    console.debug(
        f"found {release.tag_name} drafted by {release.author_login} "
        f"published at {release.published_at}"
    )
    return next_patch_tag(release.tag_name)


def create_release(
    console: ConsoleProtocol,
    token: str,
    coord: RepoCoordinate,
    branch: str,
    tag: str,
    *,
    client: GitHubClient | None = None,
    config: Config | None = None,
) -> Result[Release, GitHubError]:
    """Create a regular release. Tag conflicts are returned, never resolved."""
    gh = _client(token, client, config)
    request = ReleaseRequest(tag_name=tag, target_commitish=branch)

    console.debug(f"creating release {tag} for {coord.slug} branch: {branch}")
    result = gh.create_release(coord, request)
    if isinstance(result, Err):
        return result

    console.info(f"Successfully created release: {result.value.html_url}")
    return result


def delete_release_by_tag(
    gh: GitHubClient, coord: RepoCoordinate, tag: str
) -> Result[None, GitHubError]:
    """Delete the release published under ``tag`` and then the tag ref itself."""
    found = gh.release_by_tag(coord, tag)
    if isinstance(found, Err):
        return found

    deleted = gh.delete_release(coord, found.value.id)
    if isinstance(deleted, Err):
        return deleted

    return gh.delete_ref(coord, f"tags/{tag}")


def create_prerelease(
    console: ConsoleProtocol,
    token: str,
    coord: RepoCoordinate,
    branch: str,
    tag: str,
    force: bool,
    *,
    client: GitHubClient | None = None,
    config: Config | None = None,
) -> Result[Release, GitHubError]:
    """Create a pre-release, optionally replacing one that holds the same tag.

    With ``force`` and a "tag_name already_exists" rejection, the existing
    release and its tag are deleted and creation is retried exactly once.
    Every other failure is returned as-is.
    """
    gh = _client(token, client, config)
    request = ReleaseRequest(tag_name=tag, target_commitish=branch, prerelease=True)

    console.debug(f"creating pre-release {tag} for {coord.slug} branch: {branch}")
    result = gh.create_release(coord, request)
    if isinstance(result, Err):
        error = result.error
        if not isinstance(error, ApiError):
            return result
        if not (force and is_tag_name_already_exists(error)):
            return result

        console.debug(f"tag name {tag} already exists, force to delete it..")
        deleted = delete_release_by_tag(gh, coord, tag)
        if isinstance(deleted, Err):
            return deleted

        console.debug(f"creating pre-release {tag} again for {coord.slug} branch: {branch}")
        result = gh.create_release(coord, request)
        if isinstance(result, Err):
            return result

    console.info(f"Successfully created pre-release: {result.value.html_url}")
    return result
