from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RemoteUrlError:
    """No remote URL could be resolved through any fallback step."""

    candidate: str | None = None


@dataclass(frozen=True, slots=True)
class NetworkError:
    """The remote was resolved but ``git fetch`` against it failed."""

    remote_url: str
    detail: str = ""


@dataclass(frozen=True, slots=True)
class ChangelogError:
    command: str
    detail: str
    returncode: int


@dataclass(frozen=True, slots=True)
class InvalidVersion:
    value: str
    latest: str | None = None


InitError = RemoteUrlError | NetworkError

PluginError = RemoteUrlError | NetworkError | ChangelogError | InvalidVersion
