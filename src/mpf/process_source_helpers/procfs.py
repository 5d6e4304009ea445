"""Linux process source backed by direct /proc reads."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Tuple

from ..classifier import KNOWN_BINARIES
from ..config.runtime import DEFAULT_PROC_ROOT
from ..exceptions import EnumerationError, ProcessAccessDeniedError, ProcessVanishedError
from ..models import RawProcess
from ..process_source import ProcessSource

logger = logging.getLogger(__name__)

_DELETED_SUFFIX = " (deleted)"


class ProcfsProcessSource(ProcessSource):
    """Reads pids, argument vectors and executable links from /proc."""

    def __init__(self, proc_root: str = DEFAULT_PROC_ROOT):
        self.proc_root = Path(proc_root)

    def list_pids(self) -> List[int]:
        try:
            entries = os.listdir(self.proc_root)
        except OSError as exc:
            raise EnumerationError(
                f"Cannot list processes under {self.proc_root}: {exc}",
                proc_root=str(self.proc_root),
            ) from exc
        return sorted(int(entry) for entry in entries if entry.isdecimal())

    def read_process(self, pid: int) -> RawProcess:
        proc_dir = self.proc_root / str(pid)
        args = self._read_cmdline(pid, proc_dir)

        executable_path = _read_link(proc_dir / "exe")
        if args and (executable_path is None or _invoked_as_known_binary(executable_path, args[0])):
            executable_path = args[0]
        if not executable_path:
            executable_path = self._read_comm(pid, proc_dir)

        return RawProcess(
            pid=pid,
            executable_path=executable_path,
            args=args,
            cwd=_read_link(proc_dir / "cwd"),
        )

    def _read_cmdline(self, pid: int, proc_dir: Path) -> Tuple[str, ...]:
        try:
            data = (proc_dir / "cmdline").read_bytes()
        except (FileNotFoundError, ProcessLookupError) as exc:
            raise ProcessVanishedError(pid=pid) from exc
        except PermissionError as exc:
            raise ProcessAccessDeniedError(pid=pid) from exc
        return split_cmdline(data)

    def _read_comm(self, pid: int, proc_dir: Path) -> str:
        try:
            return (proc_dir / "comm").read_text(errors="replace").rstrip("\n")
        except (FileNotFoundError, ProcessLookupError) as exc:
            raise ProcessVanishedError(pid=pid) from exc
        except PermissionError as exc:
            raise ProcessAccessDeniedError(pid=pid) from exc


def split_cmdline(data: bytes) -> Tuple[str, ...]:
    """Split the NUL separated contents of /proc/<pid>/cmdline."""
    if not data:
        return ()
    parts = data.split(b"\0")
    if parts[-1] == b"":
        parts.pop()
    return tuple(part.decode("utf-8", errors="replace") for part in parts)


def _invoked_as_known_binary(link_target: str, argv0: str) -> bool:
    """True when a symlinked MongoDB binary resolved to a differently named file."""
    return os.path.basename(link_target) not in KNOWN_BINARIES and os.path.basename(argv0) in KNOWN_BINARIES


def _read_link(path: Path) -> Optional[str]:
    """Return a /proc symlink target, or None when it is unreadable."""
    try:
        target = os.readlink(path)
    except OSError as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return None
    if target.endswith(_DELETED_SUFFIX):
        target = target[: -len(_DELETED_SUFFIX)]
    return target
