"""A small printf: the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import os
import sys
from typing import Any, Callable, Dict, Iterable, Optional, Union

from miniprintf.strings import itoa

CharLike = Union[int, str]

_UINT_MASK = 2**32 - 1
_ULLONG_MASK = 2**64 - 1


def _require_int(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return int(value)


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def format_str(value: Optional[str]) -> str:
    """Text of a string argument up to its first NUL; None gives "(null)"."""
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    head, _, _ = value.partition("\0")
    return head


def format_ptr(value: Optional[int]) -> str:
    """Lowercase hex address with a "0x" prefix; a null address gives "(nil)"."""
    if value is None:
        return "(nil)"
    address = _require_int(value) & _ULLONG_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def format_int(value: int, plus: bool = False) -> str:
    """Decimal text of a signed 32-bit integer, with "+" before positives when ``plus``."""
    number = _to_int32(_require_int(value))
    if number == 0:
        return "0"
    text = itoa(number)
    if plus and number >= 0:
        return "+" + text
    return text


def format_uint(value: int) -> str:
    """Decimal text of an unsigned 32-bit integer."""
    return str(_require_int(value) & _UINT_MASK)


def format_hex(value: int, uppercase: bool = False) -> str:
    """Hex digits of an unsigned 32-bit integer."""
    number = _require_int(value) & _UINT_MASK
    return f"{number:X}" if uppercase else f"{number:x}"


def _char_bytes(value: CharLike) -> bytes:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {len(value)} characters")
        return value.encode("utf-8")
    return bytes([_require_int(value) & 0xFF])


def _text(func: Callable[[Any], str]) -> Callable[[Any], bytes]:
    return lambda arg: func(arg).encode("utf-8")


_HANDLERS: Dict[str, Callable[[Any], bytes]] = {
    "c": _char_bytes,
    "s": _text(format_str),
    "p": _text(format_ptr),
    "d": _text(format_int),
    "i": _text(format_int),
    "u": _text(format_uint),
    "x": _text(format_hex),
    "X": _text(lambda arg: format_hex(arg, True)),
}


def _render_bytes(fmt: Optional[str], args: Iterable[Any]) -> bytes:
    if fmt is None:
        raise TypeError("format must not be None")
    text, _, _ = fmt.partition("\0")
    pending = iter(args)
    chars = iter(text)
    out = bytearray()
    for ch in chars:
        if ch != "%":
            out += ch.encode("utf-8")
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            out += b"%"
            continue
        handler = _HANDLERS.get(spec)
        if handler is None:
            continue
        try:
            arg = next(pending)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        out += handler(arg)
    return bytes(out)


def render(fmt: str, *args: Any) -> str:
    """Return the text ``printf`` would write for ``fmt`` and ``args``.

    Bytes that are not valid UTF-8 (from %c with an int) come back as
    surrogate escapes, so encoding with "surrogateescape" gives the exact bytes.
    """
    return _render_bytes(fmt, args).decode("utf-8", errors="surrogateescape")


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return the number of bytes written."""
    data = _render_bytes(fmt, args)
    sys.stdout.flush()
    view = memoryview(data)
    while view:
        written = os.write(1, view)
        view = view[written:]
    return len(data)