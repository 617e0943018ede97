"""Core types shared by every layer."""

from .config import Config, ConfigError, GitOptions, load_config, load_config_or_default
from .errors import ErrorCode
from .result import Err, Ok, Result, first_present, is_err, is_ok
from .template import format_template

__all__ = [
    # config
    "Config",
    "ConfigError",
    "GitOptions",
    "load_config",
    "load_config_or_default",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
    "first_present",
    "is_err",
    "is_ok",
    # template
    "format_template",
]
