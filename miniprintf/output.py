"""Write characters, strings and integers straight to a file descriptor."""

from __future__ import annotations

import os
from typing import Union

CharLike = Union[int, str]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _write_all(fd: int, data: bytes) -> int:
    """Write every byte of ``data`` to ``fd`` and return how many were written."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def _char_bytes(c: CharLike) -> bytes:
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character string")
    if isinstance(c, int):
        return bytes([c & 0xFF])
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c.encode("utf-8")
    raise TypeError("expected an int or a one-character string")


def _terminated(s: str) -> str:
    head, _, _ = s.partition("\0")
    return head


def put_char(c: CharLike, fd: int) -> int:
    """Write one character to ``fd``; an int writes its low byte."""
    return _write_all(fd, _char_bytes(c))


def put_str(s: str, fd: int) -> int:
    """Write ``s`` up to its first NUL to ``fd``."""
    return _write_all(fd, _terminated(s).encode("utf-8"))


def put_endl(s: str, fd: int) -> int:
    """Write ``s`` followed by a newline to ``fd``."""
    return put_str(s, fd) + _write_all(fd, b"\n")


def put_nbr(n: int, fd: int) -> int:
    """Write the decimal text of a 32-bit signed integer to ``fd``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("expected an int")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return _write_all(fd, str(n).encode("ascii"))