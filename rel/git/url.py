"""Git remote URL parsing.

Turns the resolved remote URL into a RemoteDescriptor. Supported forms:
- scp-like:   git@github.com:owner/project.git
- URL:        https://github.com/owner/project.git, ssh://git@host:2222/owner/project
- local path: /srv/git/project.git, file:///srv/git/project.git
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

__all__ = ["RemoteDescriptor", "parse_remote_url"]

_SCP_RE = re.compile(r"^(?:(?P<user>[^@/]+)@)?(?P<host>[^:/]+):(?P<path>(?!//).+)$")
_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


@dataclass(frozen=True, slots=True)
class RemoteDescriptor:
    """Structured view of a remote URL.

    Attributes:
        url: The URL as resolved
        protocol: "https", "http", "ssh", "git" or "file"
        host: Host name ("" for local remotes)
        owner: Namespace path ("group/subgroup" on nested hosts; "" if none)
        project: Repository name without ".git"
    """

    url: str
    protocol: str
    host: str
    owner: str
    project: str

    @property
    def repository(self) -> str:
        """owner/project, or just project when there is no owner."""
        return f"{self.owner}/{self.project}" if self.owner else self.project


def _split_path(path: str) -> tuple[str, str]:
    parts = [p for p in path.strip("/").split("/") if p]
    if not parts:
        return ("", "")
    project = parts[-1]
    if project.endswith(".git"):
        project = project[: -len(".git")]
    return ("/".join(parts[:-1]), project)


def parse_remote_url(url: str) -> RemoteDescriptor:
    """Parse a git remote URL.

    Never fails: unrecognized input yields a descriptor with the last path
    segment as project.
    """
    raw = url.strip()

    parts = None
    if _SCHEME_RE.match(raw):
        try:
            parts = urlsplit(raw)
        except ValueError:
            # unbalanced "[" in the host
            parts = None

    if parts is not None:
        protocol = parts.scheme.lower()
        if protocol.startswith("git+"):
            protocol = protocol[len("git+") :]
        owner, project = _split_path(parts.path)
        return RemoteDescriptor(
            url=raw,
            protocol=protocol,
            host=parts.hostname or "",
            owner="" if protocol == "file" else owner,
            project=project,
        )

    m = _SCP_RE.match(raw)
    if m is not None and not raw.startswith(("/", ".")):
        owner, project = _split_path(m.group("path"))
        return RemoteDescriptor(
            url=raw,
            protocol="ssh",
            host=m.group("host"),
            owner=owner,
            project=project,
        )

    _, project = _split_path(raw)
    return RemoteDescriptor(url=raw, protocol="file", host="", owner="", project=project)
