"""Namespace package shim for src-layout imports.

Development checkouts sometimes import the package as `src.mpf`. Using
`pkgutil.extend_path` allows this `src` package to be split across multiple
directories on `sys.path`.
"""

from __future__ import annotations

from pkgutil import extend_path

__path__ = extend_path(__path__, __name__)  # type: ignore[name-defined]
