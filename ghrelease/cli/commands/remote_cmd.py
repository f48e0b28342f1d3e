from __future__ import annotations

import typer

from ghrelease.cli.commands._helpers import exit_with_error
from ghrelease.cli.context import get_context
from ghrelease.core.errors import ErrorCode
from ghrelease.git.local import head, remote as read_remote


def remote(ctx: typer.Context) -> None:
    """Print the GitHub owner/repo and current branch of the checkout."""
    cli = get_context(ctx)
    owner, repo = read_remote(cli.console, cli.workdir)
    if not owner or not repo:
        exit_with_error(
            cli,
            f"no GitHub remote found in {cli.workdir / '.git' / 'config'}",
            code=ErrorCode.USER_ERROR,
        )

    typer.echo(f"{owner}/{repo}")
    branch = head(cli.console, cli.workdir)
    if branch:
        typer.echo(branch)
