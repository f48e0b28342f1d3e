"""GitHub REST access: HTTP transport, error values and typed client."""

from .client import GitHubClient, new_token_client
from .errors import (
    ApiError,
    FieldError,
    GitHubError,
    TransportError,
    field_errors,
    is_tag_name_already_exists,
)
from .http import HttpClient, MockHttpClient, RealHttpClient
from .model import Release, ReleaseRequest, RepoCoordinate

__all__ = [
    "ApiError",
    "FieldError",
    "GitHubClient",
    "GitHubError",
    "HttpClient",
    "MockHttpClient",
    "RealHttpClient",
    "Release",
    "ReleaseRequest",
    "RepoCoordinate",
    "TransportError",
    "field_errors",
    "is_tag_name_already_exists",
    "new_token_client",
]
