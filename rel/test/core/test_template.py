"""Tests for rel.core.template module."""

from __future__ import annotations

from rel.core.template import format_template, has_placeholder, render_command


class TestFormatTemplate:
    def test_prefixed(self) -> None:
        assert format_template("v${version}", {"version": "1.0.0"}) == "v1.0.0"

    def test_bare(self) -> None:
        assert format_template("${version}", {"version": "2.0.0"}) == "2.0.0"

    def test_missing_value_renders_empty(self) -> None:
        assert format_template("${name}-${version}", {"version": "1.0.0"}) == ""

    def test_malformed_renders_empty(self) -> None:
        assert format_template("v${version", {"version": "1.0.0"}) == ""

    def test_empty_template(self) -> None:
        assert format_template("", {"version": "1.0.0"}) == ""

    def test_none_value(self) -> None:
        assert format_template("x${latestTag}", {"latestTag": None}) == "x"

    def test_bare_dollar_name_is_literal(self) -> None:
        assert format_template("rel-$build-${version}", {"version": "1.1.0"}) == "rel-$build-1.1.0"

    def test_double_dollar_is_literal(self) -> None:
        assert format_template("$$${version}", {"version": "1.0.0"}) == "$$1.0.0"


class TestRenderCommand:
    def test_substitutes_known(self) -> None:
        command = render_command("git log ${latestTag}...HEAD", {"latestTag": "v1.0.0"})
        assert command == "git log v1.0.0...HEAD"

    def test_leaves_shell_variables(self) -> None:
        command = render_command("git log | awk '{print $1}' > $HOME/x", {"latestTag": "v1"})
        assert command == "git log | awk '{print $1}' > $HOME/x"

    def test_leaves_unknown_placeholders(self) -> None:
        assert render_command("echo ${other}", {"latestTag": "v1"}) == "echo ${other}"

    def test_keeps_double_dollar(self) -> None:
        assert render_command("echo $$ ${latestTag}", {"latestTag": "v1"}) == "echo $$ v1"


def test_has_placeholder() -> None:
    assert has_placeholder("git log ${latestTag}...HEAD", "latestTag") is True
    assert has_placeholder("git log $latestTag", "latestTag") is False
    assert has_placeholder("git log", "latestTag") is False
