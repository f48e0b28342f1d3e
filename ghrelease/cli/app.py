from __future__ import annotations

from pathlib import Path

import typer

from ghrelease import __version__
from ghrelease.cli.commands.release_cmd import next_version, prerelease, release
from ghrelease.cli.commands.remote_cmd import remote
from ghrelease.cli.context import build_context
from ghrelease.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Create GitHub releases from a local git checkout.",
)


# Commands
app.command()(remote)
app.command("next-version")(next_version)
app.command()(release)
app.command()(prerelease)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print debug output."),
    workdir: Path | None = typer.Option(
        None,
        "--workdir",
        help="Git checkout to read (default: current directory)",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    root = workdir if workdir is not None else Path.cwd()
    try:
        root = root.expanduser().resolve()
    except OSError as e:
        typer.echo(f"error: invalid --workdir: {e}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    if not root.is_dir():
        typer.echo(f"error: --workdir '{root}' is not a directory", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    ctx.obj = build_context(workdir=root, verbose=verbose)


def main() -> None:
    app()
