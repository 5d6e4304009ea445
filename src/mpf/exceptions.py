"""Exception classes for the process finder.

Per-process errors (``ProcessError`` and its subclasses) are contained by the
scanner and never reach the command line. ``EnumerationError`` is the only
scan failure that surfaces to the caller.

Exception classes support two patterns:
1. No-argument raise: raise EnumerationError()
2. Contextual attributes: err = ProcessVanishedError(pid=123); raise err
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all process finder errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class ProcessError(ApplicationError):
    """Process could not be inspected."""

    def __init__(self, message: str = "", *, pid: int | None = None, **kwargs: Any) -> None:
        if not message:
            message = f"Process {pid} could not be inspected"
        super().__init__(message, pid=pid, **kwargs)


class ProcessAccessDeniedError(ProcessError):
    """Permission to read the process arguments was refused."""

    def __init__(self, message: str = "", *, pid: int | None = None, **kwargs: Any) -> None:
        if not message:
            message = f"Access denied reading arguments of process {pid}"
        super().__init__(message, pid=pid, **kwargs)


class ProcessVanishedError(ProcessError):
    """Process exited between listing and inspection."""

    def __init__(self, message: str = "", *, pid: int | None = None, **kwargs: Any) -> None:
        if not message:
            message = f"Process {pid} exited before it could be inspected"
        super().__init__(message, pid=pid, **kwargs)


class MalformedArgumentError(ApplicationError):
    """Command line option value could not be parsed."""

    def __init__(self, message: str = "", *, option: str = "", value: Any = None, **kwargs: Any) -> None:
        if not message:
            message = f"Malformed value for {option}: {value!r}"
        super().__init__(message, option=option, value=value, **kwargs)


class EnumerationError(ApplicationError):
    """The process table could not be enumerated."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "The process table could not be enumerated"
        super().__init__(message, **kwargs)


__all__ = [
    "ApplicationError",
    "EnumerationError",
    "MalformedArgumentError",
    "ProcessAccessDeniedError",
    "ProcessError",
    "ProcessVanishedError",
]
