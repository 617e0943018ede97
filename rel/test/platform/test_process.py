"""Tests for rel.platform.process module."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from rel.core.result import Err, Ok
from rel.platform.process import ProcessError, run, run_shell

PY = sys.executable


class TestProcessError:
    def test_str_short_command(self) -> None:
        error = ProcessError(
            command=("git", "fetch"),
            returncode=128,
            stdout="",
            stderr="fatal: could not read from remote repository",
        )
        assert str(error) == "git fetch failed (exit 128)"

    def test_str_long_command_truncated(self) -> None:
        error = ProcessError(
            command=("git", "config", "--get", "remote.origin.url", "--local"),
            returncode=1,
            stdout="",
            stderr="",
        )
        assert str(error) == "git config --get remote.origin.url ... failed (exit 1)"

    def test_frozen(self) -> None:
        error = ProcessError(("cmd",), 1, "", "")
        with pytest.raises(AttributeError):
            error.returncode = 2  # type: ignore[misc]


class TestRun:
    def test_success_returns_stdout(self, tmp_path: Path) -> None:
        result = run([PY, "-c", "print('hello')"], cwd=tmp_path)

        assert isinstance(result, Ok)
        assert "hello" in result.value

    def test_failure_returns_error(self, tmp_path: Path) -> None:
        result = run([PY, "-c", "import sys; sys.exit(42)"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == 42

    def test_captures_stderr(self, tmp_path: Path) -> None:
        result = run(
            [PY, "-c", "import sys; sys.stderr.write('error msg'); sys.exit(1)"],
            cwd=tmp_path,
        )

        assert isinstance(result, Err)
        assert "error msg" in result.error.stderr

    def test_command_not_found(self, tmp_path: Path) -> None:
        result = run(["nonexistent_command_12345"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == -1
        assert len(result.error.stderr) > 0

    def test_uses_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "marker.txt").write_text("content")

        result = run([PY, "-c", "import os; print(os.listdir('.'))"], cwd=tmp_path)

        assert isinstance(result, Ok)
        assert "marker.txt" in result.value

    def test_timeout(self, tmp_path: Path) -> None:
        result = run([PY, "-c", "import time; time.sleep(10)"], cwd=tmp_path, timeout=0.2)

        assert isinstance(result, Err)
        assert result.error.returncode == -1
        assert "timed out" in result.error.stderr.lower()


class TestRunShell:
    def test_pipes_and_quotes(self, tmp_path: Path) -> None:
        upper = f'"{PY}" -c "import sys; print(sys.stdin.read().upper())"'
        result = run_shell(f'"{PY}" -c "print(\'a b\')" | {upper}', cwd=tmp_path)

        assert isinstance(result, Ok)
        assert "A B" in result.value

    def test_failure_keeps_command_line(self, tmp_path: Path) -> None:
        command = f'"{PY}" -c "import sys; sys.exit(3)"'

        result = run_shell(command, cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.command == (command,)
        assert result.error.returncode == 3
