"""Long-option lookup over a process argument vector."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..exceptions import MalformedArgumentError

MAX_PORT = 65535


def _names(option: str, aliases: Iterable[str]) -> tuple[str, ...]:
    return (option, *aliases)


def get_option_value(option: str, args: Sequence[str], aliases: Iterable[str] = ()) -> Optional[str]:
    """
    Return the value given to *option* in *args*.

    ``--name value`` and ``--name=value`` are equivalent and may appear anywhere.
    The first occurrence wins. A flag followed by nothing, or by another option,
    has no value.

    Args:
        option: Option name including its dashes, e.g. ``--port``
        args: Argument tokens to search
        aliases: Alternative spellings such as ``-f`` for ``--config``

    Returns:
        The option value, or None when the option is absent or has no value.
    """
    names = _names(option, aliases)
    for index, token in enumerate(args):
        for name in names:
            if token == name:
                if index + 1 < len(args) and not args[index + 1].startswith("-"):
                    return args[index + 1]
                return None
            if token.startswith(name + "="):
                return token[len(name) + 1 :]
    return None


def has_option(option: str, args: Sequence[str], aliases: Iterable[str] = ()) -> bool:
    """Return True if *option* appears in *args* in either syntax."""
    names = _names(option, aliases)
    return any(token == name or token.startswith(name + "=") for token in args for name in names)


def parse_port(value: str) -> int:
    """
    Parse a TCP port number.

    Raises:
        MalformedArgumentError: When *value* is not a decimal integer in 0..65535.
    """
    text = value.strip()
    if not text.isascii() or not text.isdecimal():
        raise MalformedArgumentError(option="--port", value=value)
    port = int(text)
    if port > MAX_PORT:
        raise MalformedArgumentError(f"Port {port} is outside 0..{MAX_PORT}", option="--port", value=value)
    return port
