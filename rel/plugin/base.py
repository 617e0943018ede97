"""Plugin interface for version-control backends.

A release pipeline drives a plugin through a fixed sequence:

    init()                -> resolve and publish facts
    get_latest_version()  -> starting point for the next version
    bump(version)         -> publish version and tag name
    get_changelog()       -> release notes for the new version

Each backend (git today) implements VersionControlPlugin; PluginBase supplies
the shared wiring to the context stores and the console.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import ClassVar, Protocol

from rel.core.result import Result
from rel.output.console import ConsoleProtocol
from rel.plugin.context import ContextStore, PipelineConfig
from rel.plugin.errors import ChangelogError, InitError

__all__ = ["PluginBase", "VersionControlPlugin"]


class VersionControlPlugin(Protocol):
    """Interface every version-control backend provides."""

    def init(self) -> Result[None, InitError]:
        """Resolve remote, validate it, resolve tags and publish the results."""
        ...

    def get_name(self) -> str | None:
        """Project name derived from the remote."""
        ...

    def get_latest_version(self) -> str | None: ...

    def bump(self, version: str) -> None:
        """Publish ``version`` and the tag name rendered from it."""
        ...

    def get_changelog(self) -> Result[str | None, ChangelogError]: ...


class PluginBase:
    """Context and console plumbing shared by plugins.

    Attributes:
        config: Pipeline-wide options and shared context
        context: This plugin's own store, namespaced by ``namespace``
        console: Output sink
    """

    namespace: ClassVar[str] = "plugin"

    def __init__(self, *, config: PipelineConfig, console: ConsoleProtocol) -> None:
        self.config = config
        self.console = console
        self.context = ContextStore(self.namespace)

    def set_context(self, values: Mapping[str, object] | None = None, /, **kwargs: object) -> None:
        self.context.set(values, **kwargs)

    def get_context(self, path: str, default: object = None) -> object:
        return self.context.get(path, default)
