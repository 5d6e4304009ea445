"""Command line entry point: ``mpf [OPTIONS]``.

Exit codes:
    0  scan completed (including when nothing matched)
    1  the process table could not be scanned, or configuration is invalid
    2  usage error
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .classifier_helpers import parse_port
from .config import ConfigurationError, load_settings
from .exceptions import EnumerationError, MalformedArgumentError
from .logging_config import setup_logging
from .models import FilterSpec, ProcessKind, ServerRole
from .report import print_report
from .scanner import scan

logger = logging.getLogger(__name__)

_PROCESS_TYPE_CHOICES = [kind.value for kind in ProcessKind if kind is not ProcessKind.UNKNOWN]
_SERVER_TYPE_CHOICES = [role.value for role in ServerRole]


def _port_argument(value: str) -> int:
    try:
        return parse_port(value)
    except MalformedArgumentError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mpf",
        description="Simple process picker for MongoDB development",
    )
    parser.add_argument("-p", "--port", type=_port_argument, help="Port of mongo daemon to search for")
    parser.add_argument(
        "--server-type",
        choices=_SERVER_TYPE_CHOICES,
        metavar="SERVER_TYPE",
        help=f"Server type, one of {'|'.join(_SERVER_TYPE_CHOICES)}",
    )
    parser.add_argument(
        "-t",
        "--type",
        dest="process_type",
        choices=_PROCESS_TYPE_CHOICES,
        metavar="PROCESS_TYPE",
        help=f"Process type, one of {'|'.join(_PROCESS_TYPE_CHOICES)}",
    )
    parser.add_argument("--json", action="store_true", help="Print matches as JSON instead of bare pids")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped and failed processes")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_filter_spec(args: argparse.Namespace) -> FilterSpec:
    return FilterSpec(
        port=args.port,
        process_type=ProcessKind(args.process_type) if args.process_type else None,
        server_type=ServerRole(args.server_type) if args.server_type else None,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    spec = build_filter_spec(args)
    if spec.process_type is ProcessKind.LEGACY_SHELL and spec.port is not None:
        parser.error("cannot use --port with the legacy shell")

    try:
        settings = load_settings()
        setup_logging(verbose=args.verbose or settings.verbose, log_file=settings.log_file)
    except ConfigurationError as exc:
        print(f"mpf: configuration error: {exc}", file=sys.stderr)
        return 1

    try:
        descriptors = scan(spec, settings=settings)
    except EnumerationError as exc:
        logger.error("mpf: unable to scan processes: %s", exc)
        return 1

    if not descriptors:
        logger.info("No matching processes")
    print_report(descriptors, spec, as_json=args.json)
    return 0
