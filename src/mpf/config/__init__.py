"""Environment-backed configuration helpers."""

from .errors import ConfigurationError
from .runtime import (
    DEFAULT_PROC_ROOT,
    Settings,
    env_bool,
    env_str,
    load_settings,
)

__all__ = [
    "ConfigurationError",
    "DEFAULT_PROC_ROOT",
    "Settings",
    "env_bool",
    "env_str",
    "load_settings",
]
