from __future__ import annotations

import os
from pathlib import Path

import typer

from rel import __version__
from rel.cli.commands.bump import bump
from rel.cli.commands.changelog import changelog
from rel.cli.commands.resolve import resolve
from rel.cli.context import CONFIG_ENV, REPO_ENV, VERBOSE_ENV
from rel.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


app.command()(resolve)
app.command()(changelog)
app.command()(bump)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show version and exit.",
    ),
    repo: Path | None = typer.Option(
        None,
        "--repo",
        help="Repository directory (defaults to the current directory).",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Config file (defaults to <repo>/.release.toml).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show diagnostic output."),
) -> None:
    if repo is not None:
        try:
            root = repo.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --repo: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        if not root.is_dir():
            typer.echo(f"error: --repo '{root}' is not a directory", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        os.environ[REPO_ENV] = str(root)

    if config is not None:
        os.environ[CONFIG_ENV] = str(config.expanduser())

    if verbose:
        os.environ[VERBOSE_ENV] = "1"


def main() -> None:
    app()
