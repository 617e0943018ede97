"""Shared state between release steps.

Two stores exist for every run, and they are never the same object:

- the plugin-local context (one ContextStore per plugin, namespaced by the
  plugin's name), holding everything the plugin resolved;
- the pipeline config (PipelineConfig), which outlives a single plugin and is
  what other release steps read.

Key contract
------------

Plugin-local context, written by GitPlugin:

    remote_url       init        read by: get_name (via repo), CLI report
    repo             init        read by: get_name, CLI report
    latest_tag_name  init        read by: get_latest_version, get_changelog
    tag_template     init        read by: bump
    version          bump        read by: CLI report
    tag_name         bump        read by: CLI report

Pipeline config context, written by GitPlugin:

    latest_tag       init        read by: version and changelog steps
    tag_name         bump        read by: tagging and publishing steps

Stores only grow: writing ``None`` over a value that is already set keeps the
existing value.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from rel.core.config import Config

__all__ = ["ContextStore", "PipelineConfig"]


class ContextStore:
    """Namespaced key/value store for resolved facts.

    ``get`` accepts dotted paths that descend into nested mappings or object
    attributes, e.g. ``get("repo.project")``.
    """

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        self._values: dict[str, object] = {}

    def set(self, values: Mapping[str, object] | None = None, /, **kwargs: object) -> None:
        """Merge values into the store."""
        merged = {**(values or {}), **kwargs}
        for key, value in merged.items():
            if value is None and self._values.get(key) is not None:
                continue
            self._values[key] = value

    def get(self, path: str, default: object = None) -> object:
        head, _, rest = path.partition(".")
        if head not in self._values:
            return default
        current: object = self._values[head]
        for part in rest.split(".") if rest else ():
            if isinstance(current, Mapping):
                if part not in current:
                    return default
                current = current[part]
            elif hasattr(current, part):
                current = getattr(current, part)
            else:
                return default
        return current

    def get_str(self, path: str) -> str | None:
        """Like get, narrowed to str (anything else reads as None)."""
        value = self.get(path)
        return value if isinstance(value, str) else None

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def snapshot(self) -> dict[str, object]:
        """Copy of the current values."""
        return dict(self._values)

    def __repr__(self) -> str:
        return f"ContextStore({self.namespace!r}, {self._values!r})"


def _pipeline_context() -> ContextStore:
    return ContextStore("pipeline")


@dataclass
class PipelineConfig:
    """Pipeline-wide options and the shared context.

    Passed explicitly to every plugin; nothing reads it from a global.
    """

    options: Config = field(default_factory=Config)
    context: ContextStore = field(default_factory=_pipeline_context)

    def set_context(self, values: Mapping[str, object] | None = None, /, **kwargs: object) -> None:
        self.context.set(values, **kwargs)

    def get_context(self, path: str, default: object = None) -> object:
        return self.context.get(path, default)
