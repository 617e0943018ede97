from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from rel.core.config import CONFIG_FILENAME, Config, load_config_or_default
from rel.core.result import Err
from rel.output.console import ConsoleProtocol, RichConsole
from rel.output.errors import config_error_exit_code, print_config_error

REPO_ENV = "REL_REPO"
CONFIG_ENV = "REL_CONFIG"
VERBOSE_ENV = "REL_VERBOSE"


@dataclass(frozen=True, slots=True)
class CLIContext:
    repo_root: Path
    config: Config
    console: ConsoleProtocol


def repo_root() -> Path:
    env = os.environ.get(REPO_ENV)
    if env:
        return Path(env).expanduser().resolve()
    return Path.cwd().resolve()


def build_context(
    *,
    remote: str | None = None,
    tag_name: str | None = None,
    changelog: str | None = None,
) -> CLIContext:
    """Load config for the selected repository and apply command-line overrides."""
    root = repo_root()
    console = RichConsole(verbose=os.environ.get(VERBOSE_ENV) == "1")

    config_path = Path(os.environ.get(CONFIG_ENV) or root / CONFIG_FILENAME)
    config_result = load_config_or_default(config_path)
    if isinstance(config_result, Err):
        print_config_error(config_result.error, console)
        raise typer.Exit(code=config_error_exit_code(config_result.error))

    config = config_result.value.with_overrides(
        push_repo=remote,
        tag_name=tag_name,
        changelog=changelog,
    )
    console.debug(f"repository: {root}")
    return CLIContext(repo_root=root, config=config, console=console)
