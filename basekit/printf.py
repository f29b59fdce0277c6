"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, Optional, TextIO

_CONVERSIONS = frozenset("cspdiuxX%")
_MISSING = object()


def _int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _uint32(value: int) -> int:
    return value % 2**32


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    return f"0x{address % 2**64:x}"


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec not in _CONVERSIONS:
        raise ValueError(f"unsupported conversion %{spec}")
    if spec == "%":
        return "%"
    value = next(values, _MISSING)
    if value is _MISSING:
        raise TypeError(f"not enough arguments for %{spec}")
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _pointer(value)
    number = _require_int(value, spec)
    if spec in "di":
        return str(_int32(number))
    if spec == "u":
        return str(_uint32(number))
    if spec == "x":
        return f"{_uint32(number):x}"
    return f"{_uint32(number):X}"


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions in ``fmt`` with ``args`` and return the text.

    A lone ``%`` at the end of ``fmt`` is kept as is; an unknown conversion
    raises ValueError and missing arguments raise TypeError.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    pieces: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    (sys.stdout if file is None else file).write(text)
    return len(text)