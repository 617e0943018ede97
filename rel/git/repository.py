"""Git repository abstraction.

Every git command the release engine needs goes through Repository. Commands
run in the repository directory with exactly the argv shown in each method,
so logs and fakes can match on them.

Lookups whose failure only means "not configured" (branch, branch remote,
remote URL, latest tag) return ``None``. Operations whose failure must be
reported (fetch, configured commands) return Result types.

Usage:
    repo = Repository(Path("."))

    branch = repo.current_branch()
    remote = repo.branch_remote(branch) if branch else None

    match repo.fetch():
        case Ok(_):
            ...
        case Err(e):
            print(f"fetch failed: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rel.core.result import Err, Ok, Result
from rel.platform.process import ProcessError
from rel.platform.process import run as run_process
from rel.platform.process import run_shell

_GIT_TIMEOUT_SECONDS = 30.0
_GIT_NETWORK_TIMEOUT_SECONDS = 3 * 60.0
_COMMAND_TIMEOUT_SECONDS = 2 * 60.0

__all__ = ["GitError", "Repository"]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git (or configured) command.

    Attributes:
        command: The command that failed
        message: Error message (stderr, or a generic fallback)
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1

    @classmethod
    def from_process(cls, command: str, error: ProcessError, fallback: str) -> GitError:
        return cls(
            command=command,
            message=error.stderr.strip() or error.stdout.strip() or fallback,
            returncode=error.returncode,
        )


class Repository:
    """Git repository abstraction.

    Attributes:
        path: Working directory commands run in
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def current_branch(self) -> str | None:
        """Get current branch name.

        Returns None on detached HEAD or error.
        """
        branch = self._lookup(["rev-parse", "--abbrev-ref", "HEAD"])
        return None if branch == "HEAD" else branch

    def branch_remote(self, branch: str) -> str | None:
        """Name of the remote configured for ``branch``, if any."""
        return self._lookup(["config", "--get", f"branch.{branch}.remote"])

    def remote_get_url(self, name: str) -> Result[str, GitError]:
        """URL of remote ``name`` as reported by ``git remote get-url``."""
        return self._result(["remote", "get-url", name], fallback=f"no such remote: {name}")

    def remote_config_url(self, name: str) -> Result[str, GitError]:
        """URL of remote ``name`` read directly from ``remote.<name>.url``."""
        return self._result(
            ["config", "--get", f"remote.{name}.url"],
            fallback=f"remote.{name}.url is not set",
        )

    def remote_url(self, name: str) -> str | None:
        """Resolve a remote name to its URL.

        Falls back to the config key only when ``get-url`` fails; an empty but
        successful ``get-url`` is returned as is.
        """
        result = self.remote_get_url(name).or_else(lambda _: self.remote_config_url(name))
        return result.ok()

    def fetch(self, *, timeout: float = _GIT_NETWORK_TIMEOUT_SECONDS) -> Result[str, GitError]:
        """Fetch from the default remote.

        Returns:
            Ok(output) on success
            Err(GitError) on failure
        """
        return self._result(["fetch"], fallback="fetch failed", timeout=timeout)

    def latest_tag(self) -> str | None:
        """Nearest tag reachable from HEAD; None when there are no tags."""
        return self._lookup(["describe", "--tags", "--abbrev=0"])

    def run_command(self, command: str) -> Result[str, GitError]:
        """Run a configured shell command line in the repository.

        Returns:
            Ok(stdout stripped) on success
            Err(GitError) on failure
        """
        result = run_shell(command, cwd=self.path, timeout=_COMMAND_TIMEOUT_SECONDS)
        match result:
            case Err(e):
                return Err(GitError.from_process(command, e, fallback="command failed"))
            case Ok(stdout):
                return Ok(stdout.strip())

    def _lookup(self, args: list[str]) -> str | None:
        """Run a git query; failure or empty output yields None."""
        match self._run(args):
            case Ok(stdout):
                return stdout.strip() or None
            case Err(_):
                return None

    def _result(
        self,
        args: list[str],
        *,
        fallback: str,
        timeout: float = _GIT_TIMEOUT_SECONDS,
    ) -> Result[str, GitError]:
        match self._run(args, timeout=timeout):
            case Err(e):
                return Err(GitError.from_process(" ".join(args), e, fallback=fallback))
            case Ok(stdout):
                return Ok(stdout.strip())

    def _run(
        self,
        args: list[str],
        *,
        timeout: float = _GIT_TIMEOUT_SECONDS,
    ) -> Result[str, ProcessError]:
        """Run a git command in this repository."""
        return run_process(["git", *args], cwd=self.path, timeout=timeout)
