"""Byte-buffer helpers working on bytearrays and NUL-terminated byte strings."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_span(name: str, data, n: int, start: int = 0) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if start < 0 or start + n > len(data):
        raise ValueError(f"{name} is too short for {n} bytes at offset {start}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``value``."""
    _check_span("buf", buf, n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def memcpy(dest: bytearray, src, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_span("dest", dest, n)
    _check_span("src", src, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``; regions may overlap."""
    _check_span("buf", buf, n, src)
    _check_span("buf", buf, n, dest)
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of ``value`` among the first ``n``, or None."""
    _check_span("data", data, n)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Difference of the first unequal bytes among the first ``n``, or 0 if they match."""
    _check_span("a", a, n)
    _check_span("b", b, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > SIZE_MAX:
        raise OverflowError("requested size does not fit in a size_t")
    return bytearray(total)


def strlen(buf) -> int:
    """Length of the NUL-terminated string at the start of ``buf``."""
    index = bytes(buf).find(0)
    return len(buf) if index < 0 else index


def strlcpy(dest: bytearray, src, size: int) -> int:
    """Copy ``src`` into ``dest`` holding at most ``size`` bytes with the NUL; return ``strlen(src)``."""
    src_len = strlen(src)
    if size == 0:
        return src_len
    if size < 0 or size > len(dest):
        raise ValueError("size exceeds the destination buffer")
    count = min(src_len, size - 1)
    dest[:count] = bytes(src[:count])
    dest[count] = 0
    return src_len


def strlcat(dest: bytearray, src, size: int) -> int:
    """Append ``src`` to the string in ``dest`` within ``size`` bytes; return the length it tried to make."""
    dst_len = strlen(dest)
    src_len = strlen(src)
    if size <= dst_len:
        return src_len + size
    if size > len(dest):
        raise ValueError("size exceeds the destination buffer")
    count = min(src_len, size - 1 - dst_len)
    dest[dst_len:dst_len + count] = bytes(src[:count])
    dest[dst_len + count] = 0
    return dst_len + src_len