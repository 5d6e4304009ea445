"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from mpf.config import runtime


@pytest.fixture(autouse=True)
def isolate_runtime_config(monkeypatch):
    """Keep developer .env files and MPF_* variables out of tests."""
    for name in ("MPF_PROC_ROOT", "MPF_READ_CONFIG_FILES", "MPF_VERBOSE", "MPF_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", ())
    runtime._DEFAULT_VALUES = None
    yield
    runtime._DEFAULT_VALUES = None
