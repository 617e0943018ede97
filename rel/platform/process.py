"""Subprocess execution with Result-based error handling.

Wraps subprocess.run, captures output, and returns a structured error instead
of raising.

Usage:
    result = run(["git", "fetch"], cwd=Path("."), timeout=180.0)
    match result:
        case Ok(stdout):
            print(stdout)
        case Err(error):
            print(f"Failed: {error.stderr}")
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from rel.core.result import Err, Ok, Result

__all__ = ["ProcessError", "run", "run_shell"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed (a single item for shell lines).
        returncode: Exit code, or -1 when the process could not run or timed out.
        stdout: Standard output (may be empty).
        stderr: Standard error (contains error details).
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:4])
        if len(self.command) > 4:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


def _execute(
    cmd: list[str] | str,
    cwd: Path,
    env: dict[str, str] | None,
    timeout: float | None,
    *,
    shell: bool,
) -> Result[str, ProcessError]:
    command = (cmd,) if isinstance(cmd, str) else tuple(cmd)
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=env,
            shell=shell,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        return Err(
            ProcessError(
                command=command,
                returncode=-1,
                stdout=e.stdout if isinstance(e.stdout, str) else "",
                stderr=f"Command timed out after {timeout}s",
            )
        )
    except OSError as e:
        return Err(ProcessError(command=command, returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=command,
                returncode=proc.returncode,
                stdout=proc.stdout,
                stderr=proc.stderr,
            )
        )

    return Ok(proc.stdout)


def run(
    cmd: list[str],
    cwd: Path,
    env: dict[str, str] | None = None,
    *,
    timeout: float | None = None,
) -> Result[str, ProcessError]:
    """Execute a command and return stdout or error.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Environment variables (uses current env if None).
        timeout: Maximum seconds to wait (None for no limit).

    Returns:
        Ok(stdout) on success, Err(ProcessError) on failure.
    """
    return _execute(cmd, cwd, env, timeout, shell=False)


def run_shell(
    command: str,
    cwd: Path,
    env: dict[str, str] | None = None,
    *,
    timeout: float | None = None,
) -> Result[str, ProcessError]:
    """Execute a user-provided command line through the shell.

    Only for commands that come from configuration (e.g. the changelog
    command), which may use quoting and pipes.
    """
    return _execute(command, cwd, env, timeout, shell=True)
