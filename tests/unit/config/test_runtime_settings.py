from pathlib import Path

import pytest

from mpf.config import ConfigurationError, Settings, load_settings, runtime
from mpf.config.runtime_helpers import DotenvLoader


def test_load_settings_defaults():
    assert load_settings() == Settings(proc_root="/proc", read_config_files=True, verbose=False, log_file=None)


def test_load_settings_from_environment(monkeypatch):
    monkeypatch.setenv("MPF_PROC_ROOT", "/host/proc")
    monkeypatch.setenv("MPF_READ_CONFIG_FILES", "off")
    monkeypatch.setenv("MPF_VERBOSE", "yes")
    monkeypatch.setenv("MPF_LOG_FILE", "/tmp/mpf.log")

    settings = load_settings()

    assert settings == Settings(proc_root="/host/proc", read_config_files=False, verbose=True, log_file="/tmp/mpf.log")


def test_invalid_boolean_is_configuration_error(monkeypatch):
    monkeypatch.setenv("MPF_VERBOSE", "sometimes")
    with pytest.raises(ConfigurationError) as excinfo:
        load_settings()
    assert "MPF_VERBOSE" in str(excinfo.value)


def test_dotenv_defaults_apply_when_env_missing(monkeypatch, tmp_path):
    dotenv_path = tmp_path / ".env"
    dotenv_path.write_text("# comment\nexport MPF_PROC_ROOT='/dotenv/proc'\nMPF_VERBOSE=1\nnot a pair\n")
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", (dotenv_path, tmp_path / "missing.env"))
    monkeypatch.setenv("MPF_VERBOSE", "0")

    settings = load_settings()

    assert settings.proc_root == "/dotenv/proc"
    assert settings.verbose is False
    # Cached value is reused without re-reading files
    assert runtime._load_default_values() is runtime._load_default_values()


def test_first_dotenv_file_wins(monkeypatch, tmp_path):
    first = tmp_path / "first.env"
    second = tmp_path / "second.env"
    first.write_text("MPF_LOG_FILE=first.log\n")
    second.write_text("MPF_LOG_FILE=second.log\nMPF_PROC_ROOT=/second\n")
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", (first, second))

    settings = load_settings()

    assert settings.log_file == "first.log"
    assert settings.proc_root == "/second"


def test_unresolvable_home_dotenv_is_skipped(monkeypatch, tmp_path):
    dotenv_path = tmp_path / ".env"
    dotenv_path.write_text("MPF_PROC_ROOT=/dotenv/proc\n")
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", (Path("~nosuchuser_zz/.mpf.env"), dotenv_path))

    assert load_settings().proc_root == "/dotenv/proc"


def test_home_dotenv_is_expanded(monkeypatch, tmp_path):
    (tmp_path / ".mpf.env").write_text("MPF_LOG_FILE=home.log\n")
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", (Path("~/.mpf.env"),))

    assert load_settings().log_file == "home.log"


def test_env_str_blank_handling(monkeypatch):
    monkeypatch.setenv("MPF_TEST_STR", "  ")
    assert runtime.env_str("MPF_TEST_STR", or_value="fallback") == "fallback"
    assert runtime.env_str("MPF_TEST_STR", allow_blank=True) == ""
    assert runtime.env_str("MPF_TEST_STR", strip=False) == "  "


def test_dotenv_loader_read_failure(tmp_path):
    directory = tmp_path / "env-dir"
    directory.mkdir()
    with pytest.raises(ConfigurationError):
        DotenvLoader.load_from_file(directory)
