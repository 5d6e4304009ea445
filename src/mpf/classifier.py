"""Turn raw process records into classified process descriptors."""

from __future__ import annotations

import logging
import os
from typing import Dict, Optional, Sequence

from .classifier_helpers import ConfigFileReader, get_option_value, has_option, parse_port
from .exceptions import MalformedArgumentError
from .models import ConfigFileOptions, ProcessDescriptor, ProcessKind, RawProcess, ServerRole

logger = logging.getLogger(__name__)

KNOWN_BINARIES: Dict[str, ProcessKind] = {
    "mongod": ProcessKind.MONGOD,
    "mongos": ProcessKind.MONGOS,
    "mongo": ProcessKind.LEGACY_SHELL,
}

_EMPTY_CONFIG = ConfigFileOptions()


def process_kind_for(executable_name: str) -> ProcessKind:
    """Map an executable base name to its process kind (case-sensitive)."""
    return KNOWN_BINARIES.get(executable_name, ProcessKind.UNKNOWN)


def extract_port(pid: int, options: Sequence[str]) -> Optional[int]:
    value = get_option_value("--port", options)
    if value is None:
        return None
    try:
        return parse_port(value)
    except MalformedArgumentError as exc:
        logger.debug("Process %s: %s", pid, exc)
        return None


def extract_role(options: Sequence[str], file_options: ConfigFileOptions = _EMPTY_CONFIG) -> ServerRole:
    """
    Infer the deployment role of a mongod.

    Precedence is fixed: config server, then shard, then replica set, then
    standalone. Command line flags and config file settings are combined
    before the precedence is applied.
    """
    if has_option("--configsvr", options) or file_options.cluster_role is ServerRole.CONFIG_SERVER:
        return ServerRole.CONFIG_SERVER
    if has_option("--shardsvr", options) or file_options.cluster_role is ServerRole.SHARD:
        return ServerRole.SHARD
    if has_option("--replSet", options) or file_options.replica_set_name:
        return ServerRole.REPLICA_SET
    return ServerRole.STANDALONE


def extract_replica_set_name(options: Sequence[str], file_options: ConfigFileOptions = _EMPTY_CONFIG) -> Optional[str]:
    value = get_option_value("--replSet", options) or file_options.replica_set_name
    if not value:
        return None
    # Legacy "name/host1,host2" seed list syntax.
    return value.split("/", 1)[0] or None


def _read_config_file(
    raw: RawProcess, config_file: Optional[str], config_reader: Optional[ConfigFileReader]
) -> ConfigFileOptions:
    if config_file is None or config_reader is None:
        return _EMPTY_CONFIG
    file_options = config_reader.read(config_file, raw.cwd)
    if file_options is None:
        return _EMPTY_CONFIG
    return file_options


def classify(raw: RawProcess, *, config_reader: Optional[ConfigFileReader] = None) -> ProcessDescriptor:
    """
    Build a :class:`ProcessDescriptor` for *raw*.

    Classification is total: unrecognized executables become
    ``ProcessKind.UNKNOWN`` and unparseable option values leave the matching
    field unset. Dropping unknown processes is left to the matcher.

    Args:
        raw: Process record from a process source
        config_reader: When given, the file named by ``--config``/``-f`` is
            consulted for settings missing from the command line

    Returns:
        The classified descriptor.
    """
    executable_name = os.path.basename(raw.executable_path)
    kind = process_kind_for(executable_name)

    if kind is ProcessKind.UNKNOWN and executable_name.startswith("mongo"):
        logger.debug("Unexpected mongo like process found: %s %s", raw.pid, list(raw.args))

    options = raw.args[1:]
    if kind is ProcessKind.LEGACY_SHELL:
        # The shell's --port names the server it connects to, not a listening port.
        return ProcessDescriptor(
            pid=raw.pid,
            executable_name=executable_name,
            raw_args=raw.args,
            process_kind=kind,
        )

    port = extract_port(raw.pid, options)
    if kind is ProcessKind.UNKNOWN:
        return ProcessDescriptor(
            pid=raw.pid,
            executable_name=executable_name,
            raw_args=raw.args,
            process_kind=kind,
            port=port,
        )

    config_file = get_option_value("--config", options, aliases=("-f",))
    file_options = _read_config_file(raw, config_file, config_reader)
    if port is None:
        port = file_options.port

    server_role = None
    replica_set_name = None
    if kind is ProcessKind.MONGOD:
        server_role = extract_role(options, file_options)
        replica_set_name = extract_replica_set_name(options, file_options)

    return ProcessDescriptor(
        pid=raw.pid,
        executable_name=executable_name,
        raw_args=raw.args,
        process_kind=kind,
        port=port,
        server_role=server_role,
        replica_set_name=replica_set_name,
        config_file=config_file,
    )


__all__ = [
    "KNOWN_BINARIES",
    "classify",
    "extract_port",
    "extract_replica_set_name",
    "extract_role",
    "process_kind_for",
]
