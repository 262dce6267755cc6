# miniprintf

A compact `printf`-style formatter and the small toolkit that goes with it.
The toolkit covers ASCII character tests, byte-buffer routines, string helpers
with C string rules, output to a file descriptor and a singly linked list.
The package has no dependencies outside the standard library.

## Installation

From a checkout of the project:

```
pip install .
```

## Formatting

`miniprintf.formatter` understands a short, fixed set of conversions:

| Conversion | Argument | Output |
|------------|----------|--------|
| `%c` | one-character string, or an int (its low byte) | that character |
| `%s` | string or `None` | the text up to its first NUL, or `(null)` for `None` |
| `%p` | address as an int, or `None` | `0x` plus lower-case hex, or `(nil)` for zero or `None` |
| `%d`, `%i` | int, wrapped to signed 32 bits | decimal |
| `%u` | int, wrapped to unsigned 32 bits | decimal |
| `%x`, `%X` | int, wrapped to unsigned 32 bits | lower- or upper-case hex |
| `%%` | none | a literal `%` |

Any other character after `%` produces nothing and takes no argument. A `%`
at the very end of the format is dropped. Too few arguments raise
`TypeError`; extra arguments are ignored.

```python
from miniprintf.formatter import render, printf

render("%s has %d items (0x%x)", "cart", 42, 42)
# 'cart has 42 items (0x2a)'

printf("%c%c%c\n", "a", "b", "c")
# writes "abc\n" to standard output and returns 4
```

- `render(fmt, *args)` returns the formatted text. Bytes from `%c` that are
  not valid UTF-8 come back as surrogate escapes.
- `printf(fmt, *args)` writes the text to file descriptor 1 and returns the
  number of bytes written.
- The single conversions are available as `format_str(value)`,
  `format_ptr(value)`, `format_int(value, plus=False)`, `format_uint(value)`
  and `format_hex(value, uppercase=False)`. With `plus`, `format_int` puts
  `+` before positive numbers.

### What it does not do

There are no flags, field widths, precisions or length modifiers, and no
floating-point conversions. The package is a library only and installs no
command.

## The toolkit

- `miniprintf.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower`. Each takes an int code point or a
  one-character string; the case functions return the same kind they were
  given and change only ASCII letters.
- `miniprintf.memory`: `memset`, `bzero`, `memcpy`, `memchr`, `memcmp`,
  `calloc`, `strlen`, `strlcpy`, `strlcat` work on `bytearray` (or
  bytes-like) buffers, where a zero byte ends a string. `memmove(buf, dest,
  src, n)` moves bytes between two offsets of one buffer. `memchr` returns an
  index or `None`. Counts that run past a buffer raise `ValueError`;
  `calloc` raises `OverflowError` for sizes beyond 64 bits.
- `miniprintf.strings`: `strchr`, `strrchr`, `strncmp`, `strnstr`, `atoi`,
  `substr`, `strjoin`, `strtrim`, `split`, `itoa`, `strmapi`, `striteri`.
  A NUL character ends a string. Search functions return an index or `None`.
  `atoi` wraps its result to 32 bits; `itoa` raises `OverflowError` outside
  that range. `striteri(buf, func)` works on a bytearray or list in place,
  storing any result of `func` that is not `None`.
- `miniprintf.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write
  to a file descriptor and return the number of bytes written.
- `miniprintf.linkedlist`: `Node(content, next=None)`, `LinkedList(items=None)`
  with `add_front`, `add_back`, `last`, `clear(delete=None)`, `iterate`,
  `map(func, delete=None)`, `len()` and iteration over contents, and
  `delete_one(node, delete)`. `map` raises `ValueError` when `func` returns
  `None`, after clearing the nodes it had built.

```python
from miniprintf.strings import split, strtrim, atoi

split("  hello  world ", " ")   # ['hello', 'world']
strtrim("xxhixx", "x")          # 'hi'
atoi("  -42abc")                # -42
```

## Running the tests

```
pip install ".[test]"
python -m pytest
```