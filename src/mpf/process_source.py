"""
Platform process enumeration.

Two native facilities are hidden behind one ``ProcessSource`` contract:
- Linux: direct reads of the /proc pseudo-filesystem
- macOS (and anything else psutil supports): psutil, which wraps libproc and
  sysctl(KERN_PROCARGS2)

The rest of the pipeline only sees ``RawProcess`` records.
"""

from __future__ import annotations

import logging
import platform
from abc import ABC, abstractmethod
from typing import Callable, Iterator, List, Optional

from .exceptions import ProcessAccessDeniedError, ProcessError, ProcessVanishedError
from .models import RawProcess

logger = logging.getLogger(__name__)

SkipCallback = Callable[[int, Exception], None]


class ProcessSource(ABC):
    """Enumerates processes visible to the calling user."""

    @abstractmethod
    def list_pids(self) -> List[int]:
        """
        Return the pids currently in the process table.

        Raises:
            EnumerationError: When the process table cannot be read at all.
        """

    @abstractmethod
    def read_process(self, pid: int) -> RawProcess:
        """
        Read the executable path and argument vector of a single process.

        Raises:
            ProcessVanishedError: The process exited after it was listed.
            ProcessAccessDeniedError: Its arguments cannot be read.
        """

    def enumerate(self, on_skip: Optional[SkipCallback] = None) -> Iterator[RawProcess]:
        """
        Lazily yield every readable process, skipping per-process failures.

        Args:
            on_skip: Called with the pid and the error of each skipped process

        Raises:
            EnumerationError: When the process table cannot be listed.
        """
        for pid in self.list_pids():
            try:
                raw = self.read_process(pid)
            except ProcessVanishedError as exc:
                logger.debug("Process %s vanished before inspection", pid)
                _report_skip(on_skip, pid, exc)
                continue
            except ProcessAccessDeniedError as exc:
                logger.debug("Access denied inspecting process %s", pid)
                _report_skip(on_skip, pid, exc)
                continue
            except (ProcessError, OSError) as exc:
                logger.debug("Skipping process %s: %s", pid, exc)
                _report_skip(on_skip, pid, exc)
                continue
            yield raw


def _report_skip(on_skip: Optional[SkipCallback], pid: int, exc: Exception) -> None:
    if on_skip is not None:
        on_skip(pid, exc)


def get_process_source(system: Optional[str] = None, *, proc_root: Optional[str] = None) -> ProcessSource:
    """Return the process source for *system* (defaults to the running platform)."""
    system = system or platform.system()
    if system == "Linux":
        from .process_source_helpers.procfs import ProcfsProcessSource

        if proc_root is None:
            return ProcfsProcessSource()
        return ProcfsProcessSource(proc_root)

    from .process_source_helpers.psutil_source import PsutilProcessSource

    if system != "Darwin":
        logger.debug("No native process source for %s; using psutil", system)
    return PsutilProcessSource()


__all__ = ["ProcessSource", "get_process_source"]
