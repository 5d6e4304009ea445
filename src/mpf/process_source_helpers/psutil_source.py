"""psutil-backed process source used on macOS and other non-Linux hosts."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import psutil

from ..exceptions import EnumerationError, ProcessAccessDeniedError, ProcessVanishedError
from ..models import RawProcess
from ..process_source import ProcessSource

logger = logging.getLogger(__name__)


class PsutilProcessSource(ProcessSource):
    """Reads the process table through psutil."""

    def list_pids(self) -> List[int]:
        try:
            return sorted(psutil.pids())
        except (psutil.Error, OSError) as exc:
            raise EnumerationError(f"Cannot list processes: {exc}") from exc

    def read_process(self, pid: int) -> RawProcess:
        try:
            proc = psutil.Process(pid)
            with proc.oneshot():
                args = tuple(proc.cmdline())
                executable_path = _executable_path(proc, args)
                cwd = _cwd(proc)
        except psutil.NoSuchProcess as exc:
            # ZombieProcess is a NoSuchProcess; its arguments are gone too.
            raise ProcessVanishedError(pid=pid) from exc
        except psutil.AccessDenied as exc:
            raise ProcessAccessDeniedError(pid=pid) from exc

        return RawProcess(pid=pid, executable_path=executable_path, args=args, cwd=cwd)


def _executable_path(proc: psutil.Process, args: Sequence[str]) -> str:
    try:
        exe = proc.exe()
    except psutil.AccessDenied:
        logger.debug("Access denied reading executable of process %s", proc.pid)
        exe = ""
    if exe:
        return exe
    if args:
        return args[0]
    return proc.name()


def _cwd(proc: psutil.Process) -> Optional[str]:
    try:
        return proc.cwd() or None
    except psutil.AccessDenied:
        return None
