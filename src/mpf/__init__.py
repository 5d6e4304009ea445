"""MongoDB specific process finder.

Locates running mongod, mongos and legacy mongo shell processes and filters
them by port, process type and deployment role.
"""

__version__ = "0.2.2"

from .classifier import classify
from .exceptions import (
    ApplicationError,
    EnumerationError,
    ProcessAccessDeniedError,
    ProcessVanishedError,
)
from .matcher import matches
from .models import FilterSpec, ProcessDescriptor, ProcessKind, RawProcess, ServerRole
from .scanner import ProcessScanner, scan

__all__ = [
    "ApplicationError",
    "EnumerationError",
    "FilterSpec",
    "ProcessAccessDeniedError",
    "ProcessDescriptor",
    "ProcessKind",
    "ProcessScanner",
    "ProcessVanishedError",
    "RawProcess",
    "ServerRole",
    "__version__",
    "classify",
    "matches",
    "scan",
]
