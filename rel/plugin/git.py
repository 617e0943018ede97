"""Git backend: remote, tag and changelog resolution.

Usage:
    plugin = GitPlugin(Repository(Path(".")), config=PipelineConfig(), console=RichConsole())
    match plugin.init():
        case Err(RemoteUrlError()):
            ...  # nothing configured
        case Err(NetworkError(remote_url=url)):
            ...  # configured but unreachable
        case Ok(_):
            plugin.bump("1.0.0")
            plugin.context.get("tag_name")
"""

from __future__ import annotations

from typing import ClassVar

from rel.core.config import GitOptions
from rel.core.result import Err, Ok, Result, first_present
from rel.core.template import (
    VERSION_PLACEHOLDER,
    format_template,
    has_placeholder,
    render_command,
)
from rel.git.repository import Repository
from rel.git.url import parse_remote_url
from rel.output.console import ConsoleProtocol
from rel.plugin.base import PluginBase
from rel.plugin.context import PipelineConfig
from rel.plugin.errors import ChangelogError, InitError, NetworkError, RemoteUrlError

__all__ = [
    "CHANGELOG_FALLBACK",
    "DEFAULT_REMOTE",
    "GitPlugin",
    "derive_tag_template",
    "is_remote_name",
    "strip_version_prefix",
]

DEFAULT_REMOTE = "origin"
CHANGELOG_FALLBACK = 'git log --pretty=format:"* %s (%h)"'
LATEST_TAG_VARIABLE = "latestTag"


def is_remote_name(remote: str) -> bool:
    """A bare remote name has no path separator; anything else is a URL."""
    return "/" not in remote


def derive_tag_template(latest_tag: str | None, explicit: str | None = None) -> str:
    """Template for the next tag.

    An explicit template wins. Otherwise the ``v`` prefix convention of the
    latest tag is kept; with no latest tag the template has no prefix.
    """
    if explicit:
        return explicit
    if latest_tag and latest_tag.startswith("v"):
        return f"v{VERSION_PLACEHOLDER}"
    return VERSION_PLACEHOLDER


def strip_version_prefix(tag: str | None) -> str | None:
    """Bare version from a tag name: ``v2.3.0`` -> ``2.3.0``."""
    if not tag:
        return None
    return tag[1:] if tag.startswith("v") else tag


class GitPlugin(PluginBase):
    """VersionControlPlugin for git repositories."""

    namespace: ClassVar[str] = "git"

    def __init__(
        self,
        repository: Repository,
        *,
        config: PipelineConfig,
        console: ConsoleProtocol,
    ) -> None:
        super().__init__(config=config, console=console)
        self.repository = repository

    @property
    def options(self) -> GitOptions:
        return self.config.options.git

    def init(self) -> Result[None, InitError]:
        """Resolve the remote, fetch from it, resolve tags, publish.

        Returns:
            Ok(None) once everything is published
            Err(RemoteUrlError) when no remote could be resolved
            Err(NetworkError) when the remote could not be fetched
        """
        remote_url = self.resolve_remote_url(self.options.push_repo)
        if not remote_url:
            return Err(RemoteUrlError(candidate=self.options.push_repo))

        validated = self.validate(remote_url)
        if isinstance(validated, Err):
            return validated

        repo = parse_remote_url(remote_url)
        latest_tag_name = self.get_latest_tag_name()
        tag_template = derive_tag_template(latest_tag_name, self.options.tag_name)

        self.set_context(
            remote_url=remote_url,
            repo=repo,
            latest_tag_name=latest_tag_name,
            tag_template=tag_template,
        )
        self.config.set_context(latest_tag=latest_tag_name)
        return Ok(None)

    def get_name(self) -> str | None:
        return self.context.get_str("repo.project")

    def get_latest_version(self) -> str | None:
        return strip_version_prefix(self.context.get_str("latest_tag_name"))

    def get_latest_tag_name(self) -> str | None:
        """Nearest tag; None when the repository has no tags yet."""
        return self.repository.latest_tag()

    def resolve_remote_url(self, explicit_remote: str | None = None) -> str | None:
        """Resolve the push remote to a URL.

        Order: explicit remote, the current branch's remote, ``origin``.
        A bare name is turned into its URL; a URL is returned unchanged.
        """
        remote = (
            first_present(
                lambda: explicit_remote,
                self._current_branch_remote,
            )
            or DEFAULT_REMOTE
        )
        if not is_remote_name(remote):
            return remote
        return self.repository.remote_url(remote)

    def _current_branch_remote(self) -> str | None:
        branch = self.repository.current_branch()
        return self.repository.branch_remote(branch) if branch else None

    def validate(self, remote_url: str) -> Result[None, NetworkError]:
        """Check that the remote is reachable by fetching from it."""
        match self.repository.fetch(timeout=self.options.fetch_timeout):
            case Err(e):
                self.console.debug(f"git {e.command} (exit {e.returncode}): {e.message}")
                return Err(NetworkError(remote_url=remote_url, detail=e.message))
            case Ok(_):
                return Ok(None)

    def get_changelog(self) -> Result[str | None, ChangelogError]:
        """Run the configured changelog command.

        Returns:
            Ok(None) when no changelog command is configured
            Ok(output) on success
            Err(ChangelogError) when the command fails
        """
        command = self.options.changelog
        if not command:
            return Ok(None)

        latest_tag = self.context.get_str("latest_tag_name")
        if not latest_tag and has_placeholder(command, LATEST_TAG_VARIABLE):
            command = CHANGELOG_FALLBACK

        rendered = render_command(command, {LATEST_TAG_VARIABLE: latest_tag})
        match self.repository.run_command(rendered):
            case Err(e):
                return Err(
                    ChangelogError(command=rendered, detail=e.message, returncode=e.returncode)
                )
            case Ok(output):
                return Ok(output)

    def bump(self, version: str) -> None:
        """Render the tag name for ``version`` and publish both.

        A template that renders empty falls back to the bare version.
        """
        tag_template = self.context.get_str("tag_template") or ""
        tag_name = format_template(tag_template, {"version": version}) or version
        self.set_context(version=version, tag_name=tag_name)
        self.config.set_context(tag_name=tag_name)
