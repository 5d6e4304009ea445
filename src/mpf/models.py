"""Data model shared by the discovery pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ProcessKind(Enum):
    """Kind of MongoDB binary a process is running."""

    MONGOD = "mongod"
    MONGOS = "mongos"
    LEGACY_SHELL = "legacyshell"
    UNKNOWN = "unknown"


class ServerRole(Enum):
    """Deployment role of a mongod process."""

    STANDALONE = "standalone"
    REPLICA_SET = "replica-set"
    CONFIG_SERVER = "config"
    SHARD = "shard"


@dataclass(frozen=True)
class RawProcess:
    """Process record as reported by the operating system."""

    pid: int
    executable_path: str
    args: Tuple[str, ...] = ()
    cwd: Optional[str] = None


@dataclass(frozen=True)
class ProcessDescriptor:
    """Classified view of a process derived from its command line."""

    pid: int
    executable_name: str
    raw_args: Tuple[str, ...]
    process_kind: ProcessKind
    port: Optional[int] = None
    server_role: Optional[ServerRole] = None
    replica_set_name: Optional[str] = None
    config_file: Optional[str] = None

    @property
    def is_recognized(self) -> bool:
        return self.process_kind is not ProcessKind.UNKNOWN


@dataclass(frozen=True)
class FilterSpec:
    """Filter predicates; a field left as ``None`` matches anything."""

    port: Optional[int] = None
    process_type: Optional[ProcessKind] = None
    server_type: Optional[ServerRole] = None

    @property
    def is_empty(self) -> bool:
        return self.port is None and self.process_type is None and self.server_type is None


@dataclass(frozen=True)
class ConfigFileOptions:
    """Subset of a mongod/mongos YAML configuration file the classifier uses."""

    port: Optional[int] = None
    replica_set_name: Optional[str] = None
    cluster_role: Optional[ServerRole] = None


__all__ = [
    "ConfigFileOptions",
    "FilterSpec",
    "ProcessDescriptor",
    "ProcessKind",
    "RawProcess",
    "ServerRole",
]
