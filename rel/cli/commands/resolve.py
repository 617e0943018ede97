from __future__ import annotations

import typer

from rel.cli.commands._helpers import exit_on_plugin_error, print_report
from rel.cli.context import build_context
from rel.core.result import Err, Ok
from rel.services.release import ReleaseService


def resolve(
    remote: str | None = typer.Option(None, "--remote", help="Remote name or URL to use."),
    tag_name: str | None = typer.Option(None, "--tag-name", help="Tag template, e.g. v${version}."),
) -> None:
    """Resolve remote, latest tag and tag template."""
    ctx = build_context(remote=remote, tag_name=tag_name)
    service = ReleaseService(repo_root=ctx.repo_root, config=ctx.config, console=ctx.console)

    match service.resolve():
        case Err(e):
            exit_on_plugin_error(e, ctx)
        case Ok(report):
            ctx.console.header("Release facts")
            print_report(report, ctx)
