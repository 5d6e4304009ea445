"""Process scanning: enumerate, classify and filter in one pass."""

from __future__ import annotations

import logging
import time
from typing import List, Optional

from .classifier import classify
from .classifier_helpers import ConfigFileReader
from .config import Settings, load_settings
from .matcher import filter_descriptors
from .models import FilterSpec, ProcessDescriptor, RawProcess
from .process_source import ProcessSource, get_process_source

logger = logging.getLogger(__name__)


class ProcessScanner:
    """Runs a single point-in-time scan of the process table."""

    def __init__(self, source: ProcessSource, *, read_config_files: bool = True):
        self._source = source
        self._config_reader = ConfigFileReader() if read_config_files else None

    def scan(self, spec: FilterSpec) -> List[ProcessDescriptor]:
        """
        Return the processes matching *spec*, ordered by ascending pid.

        Per-process failures are logged and the process omitted.

        Raises:
            EnumerationError: When the process table cannot be listed.
        """
        logger.debug("Performing process scan with %s", spec)
        start_time = time.time()

        descriptors: List[ProcessDescriptor] = []
        skipped: List[int] = []
        for raw in self._source.enumerate(on_skip=lambda pid, _exc: skipped.append(pid)):
            descriptor = self._classify(raw)
            if descriptor is None:
                skipped.append(raw.pid)
                continue
            descriptors.append(descriptor)

        matched = sorted(filter_descriptors(descriptors, spec), key=lambda descriptor: descriptor.pid)
        scan_time = time.time() - start_time
        logger.debug(
            f"Process scan completed in {scan_time:.3f}s: {len(descriptors)} inspected, {len(skipped)} skipped, {len(matched)} matched"
        )
        return matched

    def _classify(self, raw: RawProcess) -> Optional[ProcessDescriptor]:
        try:
            descriptor = classify(raw, config_reader=self._config_reader)
        except (RuntimeError, ValueError, OSError) as exc:
            logger.debug("Cannot classify process %s: %s", raw.pid, exc)
            return None
        if descriptor.is_recognized:
            logger.debug(
                "%s - %s - %s - %s",
                descriptor.pid,
                descriptor.process_kind.value,
                descriptor.executable_name,
                list(descriptor.raw_args),
            )
        return descriptor


def scan(
    spec: FilterSpec,
    *,
    source: Optional[ProcessSource] = None,
    settings: Optional[Settings] = None,
) -> List[ProcessDescriptor]:
    """Scan the host's process table with the platform source."""
    if settings is None:
        settings = load_settings()
    if source is None:
        source = get_process_source(proc_root=settings.proc_root)
    scanner = ProcessScanner(source, read_config_files=settings.read_config_files)
    return scanner.scan(spec)


__all__ = ["ProcessScanner", "scan"]
