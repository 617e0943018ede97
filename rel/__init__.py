"""Remote and version resolution for release pipelines."""

__version__ = "0.1.0"
