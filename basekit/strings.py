"""String helpers: searching, slicing, joining, trimming and bounded copies."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence, Sequence
from itertools import zip_longest
from typing import Any, Optional, Union

CharLike = Union[str, int]


def _as_char(c: CharLike) -> str:
    """Turn a one-character string or a code point into a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c)
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def _codes(s: Union[str, bytes, bytearray]) -> list[int]:
    if isinstance(s, str):
        return [ord(ch) for ch in s]
    return list(s)


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return s[:]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    separator = _as_char(sep)
    return [part for part in s.split(separator) if part]


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the NUL character gives the index just past the end,
    where the terminator of the string sits.
    """
    ch = _as_char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == "\0" else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the NUL character gives the index just past the end.
    """
    ch = _as_char(c)
    if ch == "\0" and ch not in s:
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def striteri(buf: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Call ``func(index, item)`` for each item of ``buf`` in order.

    A result other than None replaces the item in place.
    """
    for index, item in enumerate(list(buf)):
        result = func(index, item)
        if result is not None:
            buf[index] = result


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def strlcpy(dest: MutableSequence[Any], src: Sequence[Any], size: int) -> int:
    """Replace ``dest`` with at most ``size - 1`` items of ``src``.

    ``size`` counts the room for a terminator, so a size of zero leaves
    ``dest`` untouched. Returns the full length of ``src``.
    """
    _check_size("size", size)
    if size > 0:
        dest[:] = src[: size - 1]
    return len(src)


def strlcat(dest: MutableSequence[Any], src: Sequence[Any], size: int) -> int:
    """Append ``src`` to ``dest`` so the total, plus a terminator, fits ``size``.

    Returns the length the result would have had without truncation; when
    ``dest`` already fills ``size`` nothing is appended and the result is
    ``size + len(src)``.
    """
    _check_size("size", size)
    dest_len = len(dest)
    src_len = len(src)
    if dest_len >= size:
        return size + src_len
    room = size - dest_len - 1
    dest[dest_len:] = src[:room]
    return dest_len + src_len


def strncmp(
    s1: Union[str, bytes, bytearray], s2: Union[str, bytes, bytearray], n: int
) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first pair of code points that differ, the
    end of a string counting as zero, or 0 when the compared parts match.
    """
    _check_size("n", n)
    pairs = zip_longest(_codes(s1), _codes(s2), fillvalue=0)
    for _, (a, b) in zip(range(n), pairs):
        if a != b:
            return a - b
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` within the first ``length`` characters of ``big``, or None.

    An empty ``little`` is found at index 0.
    """
    _check_size("length", length)
    if not little:
        return 0
    index = big[:length].find(little)
    return index if index >= 0 else None


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` from index ``start``.

    A start past the end of ``s`` gives an empty string.
    """
    _check_size("start", start)
    _check_size("length", length)
    if not s or start > len(s):
        return ""
    return s[start : start + length]