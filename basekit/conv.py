"""Conversions between text and numbers."""

from __future__ import annotations

import math
import re

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_WS = r"[ \t\n\v\f\r]*"
_INT_RE = re.compile(_WS + r"([+-]?)([0-9]*)")
_FLOAT_RE = re.compile(_WS + r"([+-]?)([0-9]*)(?:\.([0-9]*))?")


def _wrap_int32(value: int) -> int:
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one optional sign.

    Parsing stops at the first non-digit; text without digits gives 0. The
    result wraps around like a 32-bit signed integer.
    """
    match = _INT_RE.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _wrap_int32(value)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} is outside the 32-bit signed range")
    return str(n)


def atof(text: str) -> float:
    """Parse a leading decimal number with an optional fractional part.

    Whitespace and one sign may precede it; scientific notation is not
    understood. Values too large for a float become signed infinity.
    """
    match = _FLOAT_RE.match(text)
    sign = -1.0 if match.group(1) == "-" else 1.0
    result = 0.0
    for digit in match.group(2):
        result = result * 10.0 + int(digit)
    frac = 0.0
    divider = 1.0
    for digit in match.group(3) or "":
        frac = frac * 10.0 + int(digit)
        divider *= 10.0
    result += frac / divider
    if math.isinf(result):
        return math.copysign(math.inf, sign)
    return result * sign