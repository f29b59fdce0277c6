"""Writing characters, strings and numbers to text streams, plus ANSI colours."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Optional, TextIO, Union

from basekit.conv import itoa

CharLike = Union[str, int]


class Color(Enum):
    """ANSI terminal colour escape sequences."""

    BLK = "\033[30m"
    RED = "\033[31m"
    GRN = "\033[32m"
    YEL = "\033[33m"
    BLU = "\033[34m"
    MAG = "\033[35m"
    CYN = "\033[36m"
    WHT = "\033[37m"
    RESET = "\033[0m"

    BR_BLK = "\033[1;30m"
    BR_RED = "\033[1;31m"
    BR_GRN = "\033[1;32m"
    BR_YEL = "\033[1;33m"
    BR_BLU = "\033[1;34m"
    BR_MAG = "\033[1;35m"
    BR_CYN = "\033[1;36m"
    BR_WHT = "\033[1;37m"

    def paint(self, text: str) -> str:
        """Wrap ``text`` in this colour followed by the reset sequence."""
        return f"{self.value}{text}{Color.RESET.value}"


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: CharLike, stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a string or a code point, to ``stream``."""
    if isinstance(c, int):
        c = chr(c)
    elif not isinstance(c, str):
        raise TypeError(f"expected str or int, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` to ``stream``; None writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; None writes just the newline."""
    put_str(s, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of a 32-bit signed integer to ``stream``."""
    _target(stream).write(itoa(n))