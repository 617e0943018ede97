from __future__ import annotations

import typer

from rel.cli.commands._helpers import exit_on_plugin_error
from rel.cli.context import build_context
from rel.core.result import Err, Ok
from rel.services.release import ReleaseService


def changelog(
    remote: str | None = typer.Option(None, "--remote", help="Remote name or URL to use."),
    command: str | None = typer.Option(
        None,
        "--command",
        help="Changelog command; ${latestTag} is replaced by the latest tag.",
    ),
) -> None:
    """Print the changelog since the latest tag."""
    ctx = build_context(remote=remote, changelog=command)
    service = ReleaseService(repo_root=ctx.repo_root, config=ctx.config, console=ctx.console)

    match service.changelog():
        case Err(e):
            exit_on_plugin_error(e, ctx)
        case Ok(None):
            ctx.console.info("changelog disabled (git.changelog is empty)")
        case Ok(text):
            ctx.console.print(text)
