from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from ghrelease.core.config import Config, load_config_or_default
from ghrelease.core.errors import ErrorCode
from ghrelease.core.result import Err
from ghrelease.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    workdir: Path
    config: Config
    console: ConsoleProtocol


def build_context(*, workdir: Path, verbose: bool) -> CLIContext:
    console = RichConsole(verbose=verbose)

    config_result = load_config_or_default(workdir)
    if isinstance(config_result, Err):
        console.error(config_result.error.message)
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

    return CLIContext(workdir=workdir, config=config_result.value, console=console)


def get_context(ctx: typer.Context) -> CLIContext:
    obj = ctx.find_root().obj
    if isinstance(obj, CLIContext):
        return obj
    # Commands invoked without the root callback (direct tests) use defaults.
    return build_context(workdir=Path.cwd(), verbose=False)
