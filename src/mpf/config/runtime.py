from __future__ import annotations

"""Runtime helpers for working with environment-backed configuration."""


import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}

_DOTENV_CANDIDATES = (Path(".env"), Path("~") / ".mpf.env")

_DEFAULT_VALUES: dict[str, str] | None = None

DEFAULT_PROC_ROOT = "/proc"


def _load_default_values() -> dict[str, str]:
    """Load configuration values from .env-style files."""
    from .runtime_helpers import DotenvLoader

    global _DEFAULT_VALUES
    if _DEFAULT_VALUES is not None:
        return _DEFAULT_VALUES

    defaults: dict[str, str] = {}
    for candidate in _DOTENV_CANDIDATES:
        try:
            path = candidate.expanduser()
        except RuntimeError as exc:
            logger.debug("Skipping dotenv file %s: %s", candidate, exc)
            continue
        for key, value in DotenvLoader.load_from_file(path).items():
            defaults.setdefault(key, value)

    _DEFAULT_VALUES = defaults
    return defaults


def _default_value(name: str) -> Optional[str]:
    """Return the default value for *name* if declared in a dotenv file."""

    defaults = _load_default_values()
    return defaults.get(name)


def _normalize(value: str | None, *, strip: bool) -> str | None:
    if value is None:
        return None
    return value.strip() if strip else value


def env_str(
    name: str,
    or_value: str | None = None,
    *,
    required: bool = False,
    strip: bool = True,
    allow_blank: bool = False,
) -> str | None:
    """Fetch an environment variable as a string with validation."""

    value = _normalize(os.getenv(name), strip=strip)

    if value is None or (not allow_blank and value == ""):
        configured_default = _default_value(name)
        if configured_default is not None:
            value = _normalize(configured_default, strip=strip)

    if value is None or (not allow_blank and value == ""):
        if required:
            raise ConfigurationError.missing_value(name, "required environment variable is not set")
        return or_value
    return value


def env_bool(name: str, or_value: bool | None = None, *, required: bool = False) -> bool | None:
    """Fetch an environment variable and coerce it to ``bool``."""

    raw = env_str(name, strip=True, allow_blank=False)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError.missing_value(name, "required environment variable is not set")
        return or_value

    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError.invalid_value(
        name, raw, f"Allowed values: {sorted(_TRUE_VALUES | _FALSE_VALUES)}"
    )


@dataclass(frozen=True)
class Settings:
    """Process finder settings resolved from the environment."""

    proc_root: str = DEFAULT_PROC_ROOT
    read_config_files: bool = True
    verbose: bool = False
    log_file: str | None = None


def load_settings() -> Settings:
    """Resolve :class:`Settings` from ``MPF_*`` environment variables."""

    proc_root = env_str("MPF_PROC_ROOT", or_value=DEFAULT_PROC_ROOT)
    read_config_files = env_bool("MPF_READ_CONFIG_FILES", or_value=True)
    verbose = env_bool("MPF_VERBOSE", or_value=False)
    log_file = env_str("MPF_LOG_FILE")
    return Settings(
        proc_root=proc_root,
        read_config_files=bool(read_config_files),
        verbose=bool(verbose),
        log_file=log_file,
    )
