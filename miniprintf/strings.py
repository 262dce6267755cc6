"""String utilities with C string semantics: a NUL character ends a string."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, List, MutableSequence, Optional, Union

from miniprintf.chars import is_digit

CharLike = Union[int, str]

NUL = "\0"
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _terminated(s: str) -> str:
    """The part of ``s`` before its first NUL character."""
    head, _, _ = s.partition(NUL)
    return head


def _as_char(c: CharLike) -> str:
    """Convert ``c`` to one character; an int keeps only its low byte, as a C char does."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character string")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError("expected an int or a one-character string")


def _to_int32(value: int) -> int:
    """Wrap ``value`` into the range of a 32-bit signed integer."""
    return (value + 2**31) % 2**32 - 2**31


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, the end index when ``c`` is NUL, or None."""
    text = _terminated(s)
    char = _as_char(c)
    if char == NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, the end index when ``c`` is NUL, or None."""
    text = _terminated(s)
    char = _as_char(c)
    if char == NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code point difference where they part."""
    if n < 0:
        raise ValueError("n must not be negative")
    pairs = zip_longest(s1[:n], s2[:n], fillvalue=NUL)
    for a, b in pairs:
        if a != b or a == NUL:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` within the first ``length`` characters of ``big``, or None."""
    if length < 0:
        raise ValueError("length must not be negative")
    needle = _terminated(little)
    if not needle:
        return 0
    index = _terminated(big)[:length].find(needle)
    return None if index < 0 else index


def atoi(text: str) -> int:
    """Parse a leading decimal integer after whitespace and one optional sign."""
    rest = _terminated(text).lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not is_digit(ch):
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return _to_int32(result * sign)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty when ``start`` is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _terminated(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return _terminated(s1) + _terminated(s2)


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    chars = _terminated(charset)
    if not chars:
        return _terminated(s)
    return _terminated(s).strip(chars)


def split(s: str, sep: CharLike) -> List[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    char = _as_char(sep)
    text = _terminated(s)
    if char == NUL:
        return [text] if text else []
    return [word for word in text.split(char) if word]


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character of ``s``."""
    mapped = "".join(func(index, ch) for index, ch in enumerate(_terminated(s)))
    return _terminated(mapped)


def _terminated_length(buf: MutableSequence) -> int:
    for index, item in enumerate(buf):
        if item == 0 or item == NUL:
            return index
    return len(buf)


def striteri(buf: MutableSequence, func: Callable[[int, object], object]) -> None:
    """Call ``func(index, item)`` on each item of ``buf`` before its NUL.

    ``buf`` is a bytearray or a list of characters. A result other than None
    replaces the item in place.
    """
    length = _terminated_length(buf)
    for index, item in enumerate(islice(buf, length)):
        result = func(index, item)
        if result is not None:
            buf[index] = result