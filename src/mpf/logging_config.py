"""
Logging configuration for the command line tool.

Results are written to stdout, so every log handler installed here writes to
stderr or to a file:
- Console output: plain warnings by default, technical DEBUG output when verbose
- Optional file output (MPF_LOG_FILE) at DEBUG level
"""

import logging
import sys
import threading
from typing import List, Optional

from .config import ConfigurationError

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_INSTALLED_HANDLERS: List[logging.Handler] = []

_TECHNICAL_FORMAT = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _technical_formatter() -> logging.Formatter:
    return logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT)


def _build_console_handler(verbose: bool) -> logging.Handler:
    console_handler = logging.StreamHandler(sys.stderr)
    if verbose:
        console_handler.setFormatter(_technical_formatter())
        console_handler.setLevel(logging.DEBUG)
    else:
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        console_handler.setLevel(logging.WARNING)
    return console_handler


def _build_file_handler(log_file: str) -> logging.Handler:
    try:
        file_handler = logging.FileHandler(log_file, mode="a")
    except OSError as exc:
        raise ConfigurationError.invalid_value("MPF_LOG_FILE", log_file, str(exc)) from exc
    file_handler.setFormatter(_technical_formatter())
    file_handler.setLevel(logging.DEBUG)
    return file_handler


def _remove_installed_handlers(root_logger: logging.Logger) -> None:
    """Detach and close the handlers a previous setup_logging call added."""
    for handler in _INSTALLED_HANDLERS:
        root_logger.removeHandler(handler)
        try:
            handler.close()
        except OSError as exc:
            _MODULE_LOGGER.debug("Handler close failed: %s", exc)
    _INSTALLED_HANDLERS.clear()


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Configure the root logger for one command line invocation."""

    with _config_lock:
        root_logger = logging.getLogger()
        _remove_installed_handlers(root_logger)

        handlers = [_build_console_handler(verbose)]
        if log_file:
            handlers.append(_build_file_handler(log_file))

        for handler in handlers:
            root_logger.addHandler(handler)
            _INSTALLED_HANDLERS.append(handler)

        root_logger.setLevel(logging.DEBUG if verbose or log_file else logging.WARNING)
