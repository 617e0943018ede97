"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from rel.output.console import Style
from rel.output.errors import plugin_error_exit_code, print_plugin_error

if TYPE_CHECKING:
    from rel.cli.context import CLIContext
    from rel.plugin.errors import PluginError
    from rel.services.release import ResolutionReport


def exit_on_plugin_error(error: PluginError, ctx: CLIContext) -> NoReturn:
    """Report a plugin error and exit with its code."""
    print_plugin_error(error, ctx.console)
    raise typer.Exit(code=plugin_error_exit_code(error))


def print_report(report: ResolutionReport, ctx: CLIContext) -> None:
    console = ctx.console
    console.print(f"remote: {report.remote_url}")
    console.print(f"repository: {report.repo.repository}", Style.DIM)
    console.print(f"latest tag: {report.latest_tag or '(none)'}")
    console.print(f"latest version: {report.latest_version or '(none)'}")
    console.print(f"tag template: {report.tag_template}", Style.DIM)
    if report.version is not None:
        console.print(f"version: {report.version}")
    if report.tag_name is not None:
        console.print(f"tag name: {report.tag_name}")
