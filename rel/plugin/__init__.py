"""Version-control plugins and the state they share with the pipeline."""

from rel.plugin.base import PluginBase, VersionControlPlugin
from rel.plugin.context import ContextStore, PipelineConfig
from rel.plugin.errors import (
    ChangelogError,
    InitError,
    InvalidVersion,
    NetworkError,
    PluginError,
    RemoteUrlError,
)
from rel.plugin.git import GitPlugin

__all__ = [
    # base
    "PluginBase",
    "VersionControlPlugin",
    # context
    "ContextStore",
    "PipelineConfig",
    # errors
    "ChangelogError",
    "InitError",
    "InvalidVersion",
    "NetworkError",
    "PluginError",
    "RemoteUrlError",
    # git
    "GitPlugin",
]
