"""Error presentation utilities.

Keeps "no remote configured" and "remote unreachable" apart in both the
message and the exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rel.core.config import ConfigError
from rel.core.errors import ErrorCode
from rel.output.console import Style
from rel.plugin.errors import (
    ChangelogError,
    InvalidVersion,
    NetworkError,
    PluginError,
    RemoteUrlError,
)

if TYPE_CHECKING:
    from rel.output.console import ConsoleProtocol

__all__ = [
    "config_error_exit_code",
    "plugin_error_exit_code",
    "print_config_error",
    "print_plugin_error",
]


def print_plugin_error(error: PluginError, console: ConsoleProtocol) -> None:
    """Print a plugin error with a hint where one helps."""
    match error:
        case RemoteUrlError(candidate=candidate):
            if candidate:
                console.error(f"Could not get remote Git url for '{candidate}'")
            else:
                console.error("Could not get remote Git url")
            console.print(
                "hint: add a remote (git remote add origin <url>) or set git.push_repo",
                Style.DIM,
            )
        case NetworkError(remote_url=url, detail=detail):
            console.error(f"Unable to fetch from {url}")
            if detail:
                console.print(detail, Style.DIM)
            console.print("hint: check your network and credentials for this remote", Style.DIM)
        case ChangelogError(command=command, returncode=rc, detail=detail):
            console.error(f"changelog command failed (exit {rc}): {command}")
            if detail:
                console.print(detail, Style.DIM)
        case InvalidVersion(value=value, latest=latest):
            console.error(f"Invalid version or increment: {value}")
            if latest:
                console.print(f"latest version: {latest}", Style.DIM)
            console.print("hint: use major, minor, patch or X.Y.Z", Style.DIM)


def plugin_error_exit_code(error: PluginError) -> int:
    match error:
        case RemoteUrlError() | InvalidVersion():
            return int(ErrorCode.USER_ERROR)
        case NetworkError():
            return int(ErrorCode.NETWORK_ERROR)
        case ChangelogError():
            return int(ErrorCode.ENV_ERROR)


def print_config_error(error: ConfigError, console: ConsoleProtocol) -> None:
    console.error(error.message)


def config_error_exit_code(error: ConfigError) -> int:
    return int(ErrorCode.USER_ERROR)
