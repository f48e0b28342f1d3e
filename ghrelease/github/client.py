"""Typed wrapper over the GitHub REST endpoints used for releases.

Endpoints consumed:
- GET    /repos/{owner}/{repo}/releases/latest
- GET    /repos/{owner}/{repo}/releases/tags/{tag}
- POST   /repos/{owner}/{repo}/releases
- DELETE /repos/{owner}/{repo}/releases/{id}
- DELETE /repos/{owner}/{repo}/git/refs/{ref}

Errors from the HTTP layer are returned untouched so callers can inspect
``ApiError.errors``.
"""

from __future__ import annotations

from urllib.parse import quote

from ghrelease.core.config import Config
from ghrelease.core.result import Err, Ok, Result
from ghrelease.core.structured import as_str_dict
from ghrelease.github.errors import GitHubError, TransportError
from ghrelease.github.http import HttpClient, RealHttpClient
from ghrelease.github.model import Release, ReleaseRequest, RepoCoordinate

__all__ = ["GitHubClient", "new_token_client"]


def _repo_path(coord: RepoCoordinate) -> str:
    return f"/repos/{quote(coord.owner, safe='')}/{quote(coord.repo, safe='')}"


class GitHubClient:
    def __init__(self, http: HttpClient) -> None:
        self.http = http

    def _release(
        self,
        method: str,
        path: str,
        payload: object | None = None,
    ) -> Result[Release, GitHubError]:
        result = self.http.request(method, path, payload)
        if isinstance(result, Err):
            return result

        data = as_str_dict(result.value)
        release = Release.from_payload(data) if data is not None else None
        if release is None:
            return Err(TransportError(url=path, message="unexpected release payload"))
        return Ok(release)

    def latest_release(self, coord: RepoCoordinate) -> Result[Release, GitHubError]:
        """Latest published, non-draft, non-prerelease release."""
        return self._release("GET", f"{_repo_path(coord)}/releases/latest")

    def release_by_tag(self, coord: RepoCoordinate, tag: str) -> Result[Release, GitHubError]:
        return self._release("GET", f"{_repo_path(coord)}/releases/tags/{quote(tag, safe='')}")

    def create_release(
        self, coord: RepoCoordinate, request: ReleaseRequest
    ) -> Result[Release, GitHubError]:
        return self._release("POST", f"{_repo_path(coord)}/releases", request.to_payload())

    def delete_release(self, coord: RepoCoordinate, release_id: int) -> Result[None, GitHubError]:
        result = self.http.request("DELETE", f"{_repo_path(coord)}/releases/{release_id}")
        if isinstance(result, Err):
            return result
        return Ok(None)

    def delete_ref(self, coord: RepoCoordinate, ref: str) -> Result[None, GitHubError]:
        """Delete a git reference such as ``tags/v1.2.3`` (no ``refs/`` prefix)."""
        result = self.http.request("DELETE", f"{_repo_path(coord)}/git/refs/{quote(ref)}")
        if isinstance(result, Err):
            return result
        return Ok(None)


def new_token_client(token: str, config: Config | None = None) -> GitHubClient:
    """Build a client authenticating every request with ``token``."""
    github = (config or Config()).github
    http = RealHttpClient(
        token,
        api_url=github.api_url,
        user_agent=github.user_agent,
        timeout=github.timeout,
    )
    return GitHubClient(http)
