from __future__ import annotations

import typer

from ghrelease.cli.commands._helpers import (
    exit_on_error,
    exit_with_error,
    require_coordinate,
    require_token,
    resolve_branch,
    resolve_coordinate,
)
from ghrelease.cli.context import CLIContext, get_context
from ghrelease.core.config import resolve_token
from ghrelease.core.errors import ErrorCode
from ghrelease.github.client import GitHubClient, new_token_client
from ghrelease.github.model import RepoCoordinate
from ghrelease.release.service import create_prerelease, create_release, next_patch_version

_OWNER = typer.Option(None, "--owner", help="Repository owner (default: from .git/config)")
_REPO = typer.Option(None, "--repo", help="Repository name (default: from .git/config)")
_TOKEN = typer.Option(None, "--token", help="GitHub token (default: $GITHUB_TOKEN)")
_TAG = typer.Option(None, "--tag", help="Tag to release (default: next patch version)")
_BRANCH = typer.Option(None, "--branch", help="Target branch (default: current HEAD)")


def next_version(
    ctx: typer.Context,
    owner: str | None = _OWNER,
    repo: str | None = _REPO,
    token: str | None = _TOKEN,
) -> None:
    """Print the tag following the latest published release."""
    cli = get_context(ctx)
    coord = resolve_coordinate(cli, owner, repo)
    value = resolve_token(cli.config, token)

    client = new_token_client(value, cli.config) if value else None
    tag = exit_on_error(next_patch_version(cli.console, value, coord, client=client), cli)
    if not tag:
        cli.console.debug("release automation disabled (missing token, owner or repo)")
        return
    typer.echo(tag)


def _prepare(
    cli: CLIContext,
    *,
    owner: str | None,
    repo: str | None,
    token: str | None,
    tag: str | None,
    branch: str | None,
) -> tuple[GitHubClient, str, RepoCoordinate, str, str]:
    value = require_token(cli, token)
    coord = require_coordinate(cli, resolve_coordinate(cli, owner, repo))
    client = new_token_client(value, cli.config)

    if not tag:
        tag = exit_on_error(next_patch_version(cli.console, value, coord, client=client), cli)

    target = resolve_branch(cli, branch)
    if not target:
        exit_with_error(cli, "cannot determine branch (pass --branch)", code=ErrorCode.USER_ERROR)
    return client, value, coord, tag, target


def release(
    ctx: typer.Context,
    tag: str | None = _TAG,
    branch: str | None = _BRANCH,
    owner: str | None = _OWNER,
    repo: str | None = _REPO,
    token: str | None = _TOKEN,
) -> None:
    """Create a release."""
    cli = get_context(ctx)
    client, value, coord, tag, target = _prepare(
        cli, owner=owner, repo=repo, token=token, tag=tag, branch=branch
    )
    created = exit_on_error(
        create_release(cli.console, value, coord, target, tag, client=client),
        cli,
    )
    typer.echo(created.html_url)


def prerelease(
    ctx: typer.Context,
    tag: str | None = _TAG,
    branch: str | None = _BRANCH,
    owner: str | None = _OWNER,
    repo: str | None = _REPO,
    token: str | None = _TOKEN,
    force: bool = typer.Option(
        False,
        "--force",
        help="Delete an existing release and tag with the same name, then recreate",
    ),
) -> None:
    """Create a pre-release."""
    cli = get_context(ctx)
    client, value, coord, tag, target = _prepare(
        cli, owner=owner, repo=repo, token=token, tag=tag, branch=branch
    )
    created = exit_on_error(
        create_prerelease(cli.console, value, coord, target, tag, force, client=client),
        cli,
    )
    typer.echo(created.html_url)
