"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from ghrelease.core.config import resolve_token
from ghrelease.core.errors import ErrorCode
from ghrelease.core.result import Err, Result
from ghrelease.git.local import head, remote
from ghrelease.github.model import RepoCoordinate
from ghrelease.release.semver import ParseError

if TYPE_CHECKING:
    from ghrelease.cli.context import CLIContext


def exit_with_error(ctx: CLIContext, message: str, *, code: ErrorCode) -> NoReturn:
    ctx.console.error(message)
    raise typer.Exit(code=int(code))


def exit_on_error[T, E](result: Result[T, E], ctx: CLIContext) -> T:
    """Unwrap ``result`` or exit, mapping parse failures to PARSE_ERROR.

    Every other error comes from the GitHub API or the network.
    """
    if isinstance(result, Err):
        error = result.error
        code = ErrorCode.PARSE_ERROR if isinstance(error, ParseError) else ErrorCode.NETWORK_ERROR
        exit_with_error(ctx, str(error), code=code)
    return result.value


def resolve_coordinate(ctx: CLIContext, owner: str | None, repo: str | None) -> RepoCoordinate:
    """Explicit ``--owner/--repo`` win; missing parts come from ``.git/config``."""
    if owner and repo:
        return RepoCoordinate(owner=owner, repo=repo)

    remote_owner, remote_repo = remote(ctx.console, ctx.workdir)
    return RepoCoordinate(owner=owner or remote_owner, repo=repo or remote_repo)


def resolve_branch(ctx: CLIContext, branch: str | None) -> str:
    if branch:
        return branch
    return head(ctx.console, ctx.workdir)


def require_token(ctx: CLIContext, token: str | None) -> str:
    value = resolve_token(ctx.config, token)
    if not value:
        exit_with_error(
            ctx,
            f"missing GitHub token (pass --token or set {ctx.config.github.token_env})",
            code=ErrorCode.USER_ERROR,
        )
    return value


def require_coordinate(ctx: CLIContext, coord: RepoCoordinate) -> RepoCoordinate:
    if not coord.is_complete:
        exit_with_error(
            ctx,
            "cannot determine owner/repo (pass --owner/--repo or run inside a GitHub checkout)",
            code=ErrorCode.USER_ERROR,
        )
    return coord
