"""Tests for data model and exception types."""

from __future__ import annotations

import dataclasses

import pytest

from mpf.exceptions import (
    ApplicationError,
    EnumerationError,
    MalformedArgumentError,
    ProcessAccessDeniedError,
    ProcessError,
    ProcessVanishedError,
)
from mpf.models import FilterSpec, ProcessKind, RawProcess, ServerRole


def test_filter_spec_is_empty():
    assert FilterSpec().is_empty
    assert not FilterSpec(port=0).is_empty
    assert not FilterSpec(server_type=ServerRole.SHARD).is_empty


def test_models_are_immutable():
    raw = RawProcess(pid=1, executable_path="/usr/bin/mongod", args=("mongod",))
    with pytest.raises(dataclasses.FrozenInstanceError):
        raw.pid = 2  # type: ignore[misc]


def test_enum_values_match_cli_spellings():
    assert [kind.value for kind in ProcessKind] == ["mongod", "mongos", "legacyshell", "unknown"]
    assert [role.value for role in ServerRole] == ["standalone", "replica-set", "config", "shard"]


def test_process_errors_carry_pid():
    denied = ProcessAccessDeniedError(pid=42)
    vanished = ProcessVanishedError(pid=43)

    assert isinstance(denied, ProcessError)
    assert isinstance(vanished, ProcessError)
    assert denied.pid == 42
    assert "42" in str(denied)
    assert "43" in str(vanished)


def test_default_messages():
    assert str(EnumerationError()) == "The process table could not be enumerated"
    assert str(ApplicationError()) == ApplicationError.__doc__


def test_context_attributes():
    err = MalformedArgumentError(option="--port", value="abc")
    assert err.option == "--port"
    assert err.value == "abc"
    assert "abc" in str(err)

    err = EnumerationError("boom", proc_root="/proc")
    assert err.proc_root == "/proc"
