"""Rendering of scan results for the terminal."""

from __future__ import annotations

import sys
from typing import Any, Dict, Iterable, List, Optional, TextIO

import orjson

from .models import FilterSpec, ProcessDescriptor, ProcessKind


def _enum_value(value: Any) -> Any:
    return None if value is None else value.value


def descriptor_to_dict(descriptor: ProcessDescriptor) -> Dict[str, Any]:
    return {
        "pid": descriptor.pid,
        "process_type": descriptor.process_kind.value,
        "executable": descriptor.executable_name,
        "port": descriptor.port,
        "server_type": _enum_value(descriptor.server_role),
        "replica_set_name": descriptor.replica_set_name,
        "config_file": descriptor.config_file,
        "args": list(descriptor.raw_args),
    }


def build_summary(descriptors: Iterable[ProcessDescriptor]) -> Dict[str, List[Any]]:
    """Group descriptors into the mongod / mongos / shell summary document."""
    summary: Dict[str, List[Any]] = {"mongod": [], "mongos": [], "shell": []}
    for descriptor in descriptors:
        if descriptor.process_kind is ProcessKind.MONGOD:
            summary["mongod"].append(
                {
                    "pid": descriptor.pid,
                    "port": descriptor.port,
                    "server_type": _enum_value(descriptor.server_role),
                    "replica_set_name": descriptor.replica_set_name,
                }
            )
        elif descriptor.process_kind is ProcessKind.MONGOS:
            summary["mongos"].append({"pid": descriptor.pid, "port": descriptor.port})
        elif descriptor.process_kind is ProcessKind.LEGACY_SHELL:
            summary["shell"].append(descriptor.pid)
    return summary


def render_summary(descriptors: Iterable[ProcessDescriptor]) -> str:
    return orjson.dumps(build_summary(descriptors), option=orjson.OPT_INDENT_2).decode()


def render_descriptors(descriptors: Iterable[ProcessDescriptor]) -> str:
    payload = [descriptor_to_dict(descriptor) for descriptor in descriptors]
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode()


def render_pids(descriptors: Iterable[ProcessDescriptor]) -> str:
    return "\n".join(str(descriptor.pid) for descriptor in descriptors)


def print_report(
    descriptors: List[ProcessDescriptor],
    spec: FilterSpec,
    *,
    as_json: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Write scan results to *stream* (stdout by default).

    Without filters the grouped JSON summary is printed. With filters the
    matching pids are printed one per line, or as a JSON list of descriptors
    when *as_json* is set. Nothing is printed for an empty pid list.
    """
    out = stream if stream is not None else sys.stdout
    if spec.is_empty:
        print(render_summary(descriptors), file=out)
    elif as_json:
        print(render_descriptors(descriptors), file=out)
    elif descriptors:
        print(render_pids(descriptors), file=out)
