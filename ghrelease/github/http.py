"""Authenticated HTTP client for the GitHub REST API.

This module provides:
- HttpClient: Protocol for JSON requests (injectable for tests)
- RealHttpClient: Real implementation using urllib with a bearer token
- MockHttpClient: Mock implementation recording every call
"""

from __future__ import annotations

import json
import ssl
import urllib.error
import urllib.request
from collections import deque
from typing import Protocol, runtime_checkable

from ghrelease.core.config import DEFAULT_API_URL, DEFAULT_USER_AGENT
from ghrelease.core.result import Err, Ok, Result
from ghrelease.github.errors import ApiError, GitHubError, TransportError, parse_api_error

__all__ = [
    "HttpClient",
    "RealHttpClient",
    "MockHttpClient",
    "MockCall",
]

_ACCEPT = "application/vnd.github+json"
_API_VERSION = "2022-11-28"


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for GitHub API requests.

    ``path`` is relative to the API root (``/repos/o/r/releases``). The
    response body is decoded JSON, or None for empty bodies (``204``).
    """

    def request(
        self,
        method: str,
        path: str,
        payload: object | None = None,
    ) -> Result[object | None, GitHubError]: ...


class RealHttpClient:
    """HTTP client sending ``Authorization: Bearer <token>`` on every request.

    No retries and no backoff. With ``timeout=None`` a stalled connection
    blocks the caller until the server answers.
    """

    def __init__(
        self,
        token: str,
        *,
        api_url: str = DEFAULT_API_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | None = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self._token = token
        self._ssl_context = ssl.create_default_context()

    def _headers(self, *, has_body: bool) -> dict[str, str]:
        headers = {
            "Accept": _ACCEPT,
            "User-Agent": self.user_agent,
            "X-GitHub-Api-Version": _API_VERSION,
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _open(self, req: urllib.request.Request) -> bytes:
        if self.timeout is None:
            with urllib.request.urlopen(req, context=self._ssl_context) as response:
                return response.read()
        with urllib.request.urlopen(
            req,
            timeout=self.timeout,
            context=self._ssl_context,
        ) as response:
            return response.read()

    def request(
        self,
        method: str,
        path: str,
        payload: object | None = None,
    ) -> Result[object | None, GitHubError]:
        url = f"{self.api_url}{path}"
        data = json.dumps(payload).encode("utf-8") if payload is not None else None

        try:
            req = urllib.request.Request(
                url,
                data=data,
                method=method,
                headers=self._headers(has_body=data is not None),
            )
            body = self._open(req)
        except urllib.error.HTTPError as e:
            return Err(parse_api_error(url, e.code, str(e.reason), e.read()))
        except urllib.error.URLError as e:
            return Err(TransportError(url=url, message=str(e.reason)))
        except TimeoutError:
            return Err(TransportError(url=url, message="Request timed out"))
        except ValueError as e:
            return Err(TransportError(url=url, message=str(e)))
        except OSError as e:
            return Err(TransportError(url=url, message=str(e)))

        if not body:
            return Ok(None)
        try:
            return Ok(json.loads(body.decode("utf-8")))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Err(TransportError(url=url, message=f"JSON parse error: {e}"))


type MockCall = tuple[str, str, object | None]


class MockHttpClient:
    """Mock HTTP client for testing.

    Responses are queued per ``(method, path)`` and consumed in order; the
    last queued response keeps answering once the queue is drained. Unknown
    routes answer 404.

    Usage:
        client = MockHttpClient()
        client.add("POST", "/repos/o/r/releases", conflict_error)
        client.add("POST", "/repos/o/r/releases", {"id": 1, "tag_name": "v1"})
    """

    def __init__(self, api_url: str = DEFAULT_API_URL) -> None:
        self.api_url = api_url
        self._responses: dict[tuple[str, str], deque[object | None]] = {}
        self.calls: list[MockCall] = []

    def add(self, method: str, path: str, response: object | None) -> None:
        """Queue a JSON body (or ApiError/TransportError) for a route."""
        self._responses.setdefault((method, path), deque()).append(response)

    def calls_to(self, method: str, path: str) -> list[MockCall]:
        return [c for c in self.calls if c[0] == method and c[1] == path]

    def request(
        self,
        method: str,
        path: str,
        payload: object | None = None,
    ) -> Result[object | None, GitHubError]:
        self.calls.append((method, path, payload))

        queue = self._responses.get((method, path))
        if not queue:
            return Err(ApiError(url=f"{self.api_url}{path}", status=404, message="Not Found"))

        response = queue.popleft() if len(queue) > 1 else queue[0]
        if isinstance(response, (ApiError, TransportError)):
            return Err(response)
        return Ok(response)
