"""Release fact resolution service.

Drives a GitPlugin the way a release pipeline does (init, then bump or
changelog) and returns what was resolved as a ResolutionReport. Nothing is
written to the repository.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rel.core.config import Config
from rel.core.result import Err, Ok, Result
from rel.git.repository import Repository
from rel.git.url import RemoteDescriptor
from rel.output.console import ConsoleProtocol
from rel.plugin.context import PipelineConfig
from rel.plugin.errors import ChangelogError, InitError, InvalidVersion
from rel.plugin.git import GitPlugin
from rel.services.semver import next_version

__all__ = ["ReleaseService", "ResolutionReport"]


@dataclass(frozen=True, slots=True)
class ResolutionReport:
    """Facts published by the git plugin."""

    remote_url: str
    repo: RemoteDescriptor
    latest_tag: str | None
    latest_version: str | None
    tag_template: str
    version: str | None = None
    tag_name: str | None = None


class ReleaseService:
    """Runs the resolution steps for one repository.

    ``init`` runs at most once per service; later calls reuse its outcome,
    matching the single-run lifecycle of the plugin context.
    """

    def __init__(
        self,
        *,
        repo_root: Path,
        config: Config,
        console: ConsoleProtocol,
        plugin: GitPlugin | None = None,
    ) -> None:
        if plugin is None:
            plugin = GitPlugin(
                Repository(repo_root),
                config=PipelineConfig(options=config),
                console=console,
            )
        self.plugin = plugin
        self.pipeline = plugin.config
        self._console = console
        self._initialized: Result[None, InitError] | None = None

    def resolve(self) -> Result[ResolutionReport, InitError]:
        if self._initialized is None:
            self._console.debug("resolving remote, tags and tag template")
            self._initialized = self.plugin.init()
        if isinstance(self._initialized, Err):
            return self._initialized
        return Ok(self._report())

    def changelog(self) -> Result[str | None, InitError | ChangelogError]:
        resolved = self.resolve()
        if isinstance(resolved, Err):
            return resolved
        return self.plugin.get_changelog()

    def bump(self, increment: str) -> Result[ResolutionReport, InitError | InvalidVersion]:
        """Resolve, compute the next version from ``increment`` and bump it."""
        resolved = self.resolve()
        if isinstance(resolved, Err):
            return resolved

        version = next_version(self.plugin.get_latest_version(), increment)
        if isinstance(version, Err):
            return version

        self.plugin.bump(version.value)
        return Ok(self._report())

    def _report(self) -> ResolutionReport:
        ctx = self.plugin.context
        repo = ctx.get("repo")
        assert isinstance(repo, RemoteDescriptor)
        return ResolutionReport(
            remote_url=ctx.get_str("remote_url") or repo.url,
            repo=repo,
            latest_tag=ctx.get_str("latest_tag_name"),
            latest_version=self.plugin.get_latest_version(),
            tag_template=ctx.get_str("tag_template") or "",
            version=ctx.get_str("version"),
            tag_name=ctx.get_str("tag_name"),
        )
