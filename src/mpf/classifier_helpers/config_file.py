"""Best-effort reading of mongod/mongos configuration files.

Both the YAML format and the legacy ``key = value`` format are understood.
Only the settings that affect classification are extracted.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from ..exceptions import MalformedArgumentError
from ..models import ConfigFileOptions, ServerRole
from .cmdline_options import parse_port

logger = logging.getLogger(__name__)

_CLUSTER_ROLES = {
    "configsvr": ServerRole.CONFIG_SERVER,
    "shardsvr": ServerRole.SHARD,
}
_LEGACY_TRUE = {"true", "1", "yes", "on"}


class ConfigFileReader:
    """Loads the configuration file named by a process's ``--config`` option."""

    def read(self, path: str, cwd: Optional[str] = None) -> Optional[ConfigFileOptions]:
        """
        Load and parse *path*, resolving relative paths against *cwd*.
        The path is used literally; ``~`` is not expanded.

        Returns:
            The extracted options, or None when the file cannot be used.
        """
        resolved = Path(path)
        if not resolved.is_absolute():
            if cwd is None:
                logger.debug("Cannot resolve relative config file %s without a working directory", path)
                return None
            resolved = Path(cwd) / resolved

        try:
            text = resolved.read_text(errors="replace")
        except OSError as exc:
            logger.debug("Cannot read config file %s: %s", resolved, exc)
            return None

        try:
            payload = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            logger.debug("Config file %s is not valid YAML: %s", resolved, exc)
            payload = None

        if isinstance(payload, Mapping):
            return parse_config_options(payload)
        return parse_legacy_config(text)


def _section(payload: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = payload.get(name)
    if isinstance(value, Mapping):
        return value
    return {}


def _port_from(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return parse_port(str(value))
    except MalformedArgumentError as exc:
        logger.debug("Ignoring config file port: %s", exc)
        return None


def parse_config_options(payload: Mapping[str, Any]) -> ConfigFileOptions:
    """Extract classification settings from a parsed YAML configuration."""
    net = _section(payload, "net")
    replication = _section(payload, "replication")
    sharding = _section(payload, "sharding")

    replica_set_name = replication.get("replSetName")
    cluster_role = sharding.get("clusterRole")

    return ConfigFileOptions(
        port=_port_from(net.get("port")),
        replica_set_name=str(replica_set_name) if replica_set_name else None,
        cluster_role=_CLUSTER_ROLES.get(str(cluster_role)) if cluster_role else None,
    )


def parse_legacy_config(text: str) -> Optional[ConfigFileOptions]:
    """Extract classification settings from a pre-2.6 ``key = value`` file."""
    values: dict[str, str] = {}
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, raw_value = stripped.split("=", 1)
        values.setdefault(key.strip(), raw_value.strip())

    if not values:
        return None

    cluster_role = None
    if values.get("configsvr", "").lower() in _LEGACY_TRUE:
        cluster_role = ServerRole.CONFIG_SERVER
    elif values.get("shardsvr", "").lower() in _LEGACY_TRUE:
        cluster_role = ServerRole.SHARD

    return ConfigFileOptions(
        port=_port_from(values.get("port")),
        replica_set_name=values.get("replSet") or None,
        cluster_role=cluster_role,
    )
