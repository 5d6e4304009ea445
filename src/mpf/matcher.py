"""Filter predicates over classified processes."""

from __future__ import annotations

from typing import Iterable, List

from .models import FilterSpec, ProcessDescriptor, ProcessKind


def matches(descriptor: ProcessDescriptor, spec: FilterSpec) -> bool:
    """
    Return True if *descriptor* satisfies every field set in *spec*.

    Unrecognized processes only match when ``spec.process_type`` explicitly
    asks for ``ProcessKind.UNKNOWN``.
    """
    if not descriptor.is_recognized and spec.process_type is not ProcessKind.UNKNOWN:
        return False
    if spec.process_type is not None and descriptor.process_kind is not spec.process_type:
        return False
    if spec.port is not None and descriptor.port != spec.port:
        return False
    if spec.server_type is not None and descriptor.server_role is not spec.server_type:
        return False
    return True


def filter_descriptors(descriptors: Iterable[ProcessDescriptor], spec: FilterSpec) -> List[ProcessDescriptor]:
    """Return the descriptors matching *spec*, preserving order."""
    return [descriptor for descriptor in descriptors if matches(descriptor, spec)]


__all__ = ["filter_descriptors", "matches"]
