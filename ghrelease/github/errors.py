"""GitHub API error values.

Two failure shapes are distinguished:

- ``TransportError``: the request never produced an HTTP response (DNS, TLS,
  timeout, connection reset) or the response body could not be decoded.
- ``ApiError``: GitHub answered with an HTTP error status. Validation failures
  (422) carry per-field details, e.g. creating a release whose tag exists:

      {"message": "Validation Failed",
       "errors": [{"resource": "Release", "code": "already_exists", "field": "tag_name"}]}
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from ghrelease.core.structured import as_obj_list, as_str_dict, get_str

__all__ = [
    "ApiError",
    "FieldError",
    "GitHubError",
    "TransportError",
    "field_errors",
    "is_tag_name_already_exists",
    "parse_api_error",
]

TAG_NAME_FIELD = "tag_name"
ALREADY_EXISTS_CODE = "already_exists"


@dataclass(frozen=True, slots=True)
class FieldError:
    """One entry of the ``errors`` array of a GitHub error body."""

    resource: str
    field: str
    code: str


@dataclass(frozen=True, slots=True)
class ApiError:
    """Structured error response from the GitHub API.

    Attributes:
        url: The URL that failed
        status: HTTP status code
        message: ``message`` from the body, or the HTTP reason phrase
        errors: Field-level details, empty when the body has none
    """

    url: str
    status: int
    message: str
    errors: tuple[FieldError, ...] = ()

    def __str__(self) -> str:
        text = f"HTTP {self.status}: {self.message} ({self.url})"
        if self.errors:
            details = ", ".join(f"{e.field} {e.code}" for e in self.errors)
            text = f"{text} [{details}]"
        return text


@dataclass(frozen=True, slots=True)
class TransportError:
    """Failure before or while reading an HTTP response."""

    url: str
    message: str

    def __str__(self) -> str:
        return f"{self.message} ({self.url})"


type GitHubError = ApiError | TransportError


def _parse_field_errors(raw: object) -> tuple[FieldError, ...]:
    items = as_obj_list(raw)
    if items is None:
        return ()

    out: list[FieldError] = []
    for item in items:
        d = as_str_dict(item)
        if d is None:
            # GitHub occasionally sends plain strings here; they carry no field/code.
            continue
        out.append(
            FieldError(
                resource=get_str(d, "resource") or "",
                field=get_str(d, "field") or "",
                code=get_str(d, "code") or "",
            )
        )
    return tuple(out)


def parse_api_error(url: str, status: int, reason: str, body: bytes) -> ApiError:
    """Build an ApiError from an HTTP error response, parsing the body best-effort."""
    try:
        obj: object = json.loads(body.decode("utf-8")) if body else None
    except (json.JSONDecodeError, UnicodeDecodeError):
        obj = None

    data = as_str_dict(obj)
    if data is None:
        return ApiError(url=url, status=status, message=reason)

    return ApiError(
        url=url,
        status=status,
        message=get_str(data, "message") or reason,
        errors=_parse_field_errors(data.get("errors")),
    )


def field_errors(error: object) -> tuple[tuple[str, str], ...] | None:
    """Extract ``(field, code)`` pairs from any error value that carries them.

    Returns None for errors with no structured details (transport failures,
    foreign error types).
    """
    match error:
        case ApiError(errors=errors):
            return tuple((e.field, e.code) for e in errors)
        case _:
            return None


def is_tag_name_already_exists(error: object) -> bool:
    """True iff ``error`` reports that the release tag name is already taken."""
    pairs = field_errors(error)
    if pairs is None:
        return False
    return (TAG_NAME_FIELD, ALREADY_EXISTS_CODE) in pairs
