"""Tests for the psutil backed process source."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import psutil
import pytest

from mpf.exceptions import EnumerationError, ProcessAccessDeniedError, ProcessVanishedError
from mpf.process_source_helpers.psutil_source import PsutilProcessSource


def _mock_process(pid=7, cmdline=("mongod", "--port", "27017"), exe="/usr/local/bin/mongod", name="mongod", cwd="/"):
    proc = MagicMock()
    proc.pid = pid
    proc.cmdline.return_value = list(cmdline)
    if isinstance(exe, Exception):
        proc.exe.side_effect = exe
    else:
        proc.exe.return_value = exe
    proc.name.return_value = name
    if isinstance(cwd, Exception):
        proc.cwd.side_effect = cwd
    else:
        proc.cwd.return_value = cwd
    return proc


class TestListPids:
    """Tests for list_pids."""

    def test_returns_sorted_pids(self) -> None:
        with patch("psutil.pids", return_value=[30, 1, 7]):
            assert PsutilProcessSource().list_pids() == [1, 7, 30]

    def test_failure_is_enumeration_error(self) -> None:
        with patch("psutil.pids", side_effect=OSError("sysctl failed")):
            with pytest.raises(EnumerationError):
                PsutilProcessSource().list_pids()


class TestReadProcess:
    """Tests for read_process."""

    def test_reads_process(self) -> None:
        with patch("psutil.Process", return_value=_mock_process()):
            raw = PsutilProcessSource().read_process(7)

        assert raw.pid == 7
        assert raw.executable_path == "/usr/local/bin/mongod"
        assert raw.args == ("mongod", "--port", "27017")
        assert raw.cwd == "/"

    def test_exe_denied_falls_back_to_argv0(self) -> None:
        proc = _mock_process(exe=psutil.AccessDenied(7), cwd=psutil.AccessDenied(7))
        with patch("psutil.Process", return_value=proc):
            raw = PsutilProcessSource().read_process(7)

        assert raw.executable_path == "mongod"
        assert raw.cwd is None

    def test_empty_cmdline_falls_back_to_name(self) -> None:
        proc = _mock_process(cmdline=(), exe="", name="launchd")
        with patch("psutil.Process", return_value=proc):
            raw = PsutilProcessSource().read_process(1)

        assert raw.executable_path == "launchd"
        assert raw.args == ()

    def test_no_such_process_is_vanished(self) -> None:
        with patch("psutil.Process", side_effect=psutil.NoSuchProcess(8)):
            with pytest.raises(ProcessVanishedError):
                PsutilProcessSource().read_process(8)

    def test_zombie_is_vanished(self) -> None:
        proc = _mock_process()
        proc.cmdline.side_effect = psutil.ZombieProcess(9)
        with patch("psutil.Process", return_value=proc):
            with pytest.raises(ProcessVanishedError):
                PsutilProcessSource().read_process(9)

    def test_cmdline_access_denied(self) -> None:
        proc = _mock_process()
        proc.cmdline.side_effect = psutil.AccessDenied(10)
        with patch("psutil.Process", return_value=proc):
            with pytest.raises(ProcessAccessDeniedError) as excinfo:
                PsutilProcessSource().read_process(10)
        assert excinfo.value.pid == 10
