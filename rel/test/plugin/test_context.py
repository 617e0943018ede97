"""Tests for plugin/context.py."""

from __future__ import annotations

from rel.core.config import Config, GitOptions
from rel.git.url import parse_remote_url
from rel.plugin.context import ContextStore, PipelineConfig


class TestContextStore:
    def test_set_and_get(self) -> None:
        store = ContextStore("git")
        store.set(tag_template="v${version}")
        assert store.get("tag_template") == "v${version}"

    def test_set_mapping_and_kwargs(self) -> None:
        store = ContextStore("git")
        store.set({"a": 1}, b=2)
        assert store.snapshot() == {"a": 1, "b": 2}

    def test_missing_key_default(self) -> None:
        store = ContextStore("git")
        assert store.get("missing") is None
        assert store.get("missing", "fallback") == "fallback"

    def test_dotted_path_into_object(self) -> None:
        store = ContextStore("git")
        store.set(repo=parse_remote_url("git@github.com:acme/app.git"))
        assert store.get("repo.project") == "app"
        assert store.get("repo.owner") == "acme"
        assert store.get("repo.nope", "x") == "x"

    def test_dotted_path_into_mapping(self) -> None:
        store = ContextStore("git")
        store.set(meta={"release": {"channel": "beta"}})
        assert store.get("meta.release.channel") == "beta"
        assert store.get("meta.release.missing") is None

    def test_none_does_not_erase(self) -> None:
        store = ContextStore("git")
        store.set(latest_tag_name="v1.0.0")
        store.set(latest_tag_name=None)
        assert store.get("latest_tag_name") == "v1.0.0"

    def test_values_can_be_replaced(self) -> None:
        store = ContextStore("git")
        store.set(version="1.0.0")
        store.set(version="1.0.1")
        assert store.get("version") == "1.0.1"

    def test_none_recorded_when_unset(self) -> None:
        store = ContextStore("git")
        store.set(latest_tag_name=None)
        assert "latest_tag_name" in store
        assert store.get("latest_tag_name", "default") is None

    def test_get_str(self) -> None:
        store = ContextStore("git")
        store.set(tag_name="v1.0.0", count=3)
        assert store.get_str("tag_name") == "v1.0.0"
        assert store.get_str("count") is None

    def test_snapshot_is_a_copy(self) -> None:
        store = ContextStore("git")
        store.set(a=1)
        snapshot = store.snapshot()
        snapshot["a"] = 2
        assert store.get("a") == 1


class TestPipelineConfig:
    def test_defaults(self) -> None:
        config = PipelineConfig()
        assert config.options == Config()
        assert config.context.namespace == "pipeline"

    def test_options(self) -> None:
        config = PipelineConfig(options=Config(git=GitOptions(push_repo="upstream")))
        assert config.options.git.push_repo == "upstream"

    def test_context_roundtrip(self) -> None:
        config = PipelineConfig()
        config.set_context(latest_tag="v1.0.0")
        assert config.get_context("latest_tag") == "v1.0.0"

    def test_instances_do_not_share_context(self) -> None:
        first = PipelineConfig()
        second = PipelineConfig()
        first.set_context(tag_name="v1.0.0")
        assert second.get_context("tag_name") is None
