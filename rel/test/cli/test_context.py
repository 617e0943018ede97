from __future__ import annotations

from pathlib import Path

import pytest
import typer

from rel.cli.context import CONFIG_ENV, REPO_ENV, build_context
from rel.core.errors import ErrorCode


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (REPO_ENV, CONFIG_ENV):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(REPO_ENV, str(tmp_path))

    ctx = build_context()

    assert ctx.repo_root == tmp_path.resolve()
    assert ctx.config.git.push_repo is None


def test_reads_release_toml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".release.toml").write_text('[git]\npush_repo = "upstream"\n', encoding="utf-8")
    monkeypatch.setenv(REPO_ENV, str(tmp_path))

    assert build_context().config.git.push_repo == "upstream"


def test_flags_override_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".release.toml").write_text('[git]\npush_repo = "upstream"\n', encoding="utf-8")
    monkeypatch.setenv(REPO_ENV, str(tmp_path))

    ctx = build_context(remote="fork", tag_name="v${version}", changelog="")

    assert ctx.config.git.push_repo == "fork"
    assert ctx.config.git.tag_name == "v${version}"
    assert ctx.config.git.changelog is None


def test_explicit_config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    custom = tmp_path / "custom.toml"
    custom.write_text('[git]\ntag_name = "rel-${version}"\n', encoding="utf-8")
    monkeypatch.setenv(REPO_ENV, str(tmp_path))
    monkeypatch.setenv(CONFIG_ENV, str(custom))

    assert build_context().config.git.tag_name == "rel-${version}"


def test_broken_config_exits(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".release.toml").write_text("[git\n", encoding="utf-8")
    monkeypatch.setenv(REPO_ENV, str(tmp_path))

    with pytest.raises(typer.Exit) as exc:
        build_context()

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
