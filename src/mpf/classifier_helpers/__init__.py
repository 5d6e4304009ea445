"""Helpers used by the argument classifier."""

from .cmdline_options import get_option_value, has_option, parse_port
from .config_file import ConfigFileReader, parse_config_options

__all__ = [
    "ConfigFileReader",
    "get_option_value",
    "has_option",
    "parse_config_options",
    "parse_port",
]
