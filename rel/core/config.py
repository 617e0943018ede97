"""Typed configuration loading.

Options live in ``.release.toml`` at the repository root:

    [git]
    push_repo = "upstream"
    tag_name = "release-${version}"
    changelog = "git log --oneline ${latestTag}...HEAD"
    fetch_timeout = 60

Every key is optional. An empty ``changelog`` disables changelog generation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_float, get_raw_str, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_CHANGELOG",
    "DEFAULT_FETCH_TIMEOUT_SECONDS",
    "Config",
    "ConfigError",
    "GitOptions",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = ".release.toml"

DEFAULT_CHANGELOG = 'git log --pretty=format:"* %s (%h)" ${latestTag}...HEAD'
DEFAULT_FETCH_TIMEOUT_SECONDS = 3 * 60.0


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class GitOptions:
    """Options read by the git plugin.

    Attributes:
        push_repo: Explicit remote name or URL; None means auto-detect
        tag_name: Explicit tag template; None means infer from latest tag
        changelog: Shell command producing the changelog; None disables it
        fetch_timeout: Seconds allowed for ``git fetch``
    """

    push_repo: str | None = None
    tag_name: str | None = None
    changelog: str | None = DEFAULT_CHANGELOG
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT_SECONDS


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    git: GitOptions = field(default_factory=GitOptions)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        git: StrDict = get_table(data, "git") or {}

        changelog = get_raw_str(git, "changelog")
        if changelog is None:
            changelog = DEFAULT_CHANGELOG

        return cls(
            git=GitOptions(
                push_repo=get_str(git, "push_repo"),
                tag_name=get_str(git, "tag_name"),
                changelog=changelog or None,
                fetch_timeout=get_float(git, "fetch_timeout") or DEFAULT_FETCH_TIMEOUT_SECONDS,
            )
        )

    def with_overrides(
        self,
        *,
        push_repo: str | None = None,
        tag_name: str | None = None,
        changelog: str | None = None,
    ) -> Config:
        """Return a copy with command-line values taking precedence.

        ``None`` keeps the file value; ``changelog=""`` disables the changelog.
        """
        git = self.git
        if push_repo:
            git = replace(git, push_repo=push_repo)
        if tag_name:
            git = replace(git, tag_name=tag_name)
        if changelog is not None:
            git = replace(git, changelog=changelog.strip() or None)
        return replace(self, git=git)


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the config file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Load config from file, or defaults when the file does not exist.

    A file that exists but cannot be parsed is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
