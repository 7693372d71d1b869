"""Character encoding, escaping and UTF-8 decoding helpers."""

from __future__ import annotations

from typing import Iterator

from conststr.byteseq import BytesLike, as_bytes
from conststr.printable import is_printable

_CONT_MASK = 0b0011_1111

_BACKSLASH_ESCAPES = {
    "\0": "\\0",
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\\": "\\\\",
}


def _check_char(ch: str) -> int:
    if not isinstance(ch, str):
        raise TypeError(f"expected a str of length 1, got {type(ch).__name__}")
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {len(ch)} characters")
    code = ord(ch)
    if 0xD800 <= code <= 0xDFFF:
        raise ValueError(f"surrogate code point U+{code:04X} is not a character")
    return code


def encode_utf8_char(ch: str) -> bytes:
    """Return the UTF-8 encoding of the character *ch*."""
    _check_char(ch)
    return ch.encode("utf-8")


def encode_utf16_char(ch: str) -> tuple[int, ...]:
    """Return the UTF-16 code units of *ch*: one unit, or a surrogate pair."""
    code = _check_char(ch)
    if code <= 0xFFFF:
        return (code,)
    code -= 0x1_0000
    return (0xD800 | (code >> 10), 0xDC00 | (code & 0x3FF))


def escape_unicode(ch: str) -> str:
    """Return *ch* as a ``\\u{...}`` escape with lowercase hex digits."""
    code = _check_char(ch)
    return f"\\u{{{code:x}}}"


def escape_debug(
    ch: str,
    escape_single_quote: bool = True,
    escape_double_quote: bool = True,
) -> str:
    """Return the debug escape of *ch*.

    Backslash, NUL, tab, carriage return and newline get backslash escapes,
    quotes are escaped when asked for, printable characters stay as they
    are and everything else becomes a ``\\u{...}`` escape.
    """
    _check_char(ch)
    if ch in _BACKSLASH_ESCAPES:
        return _BACKSLASH_ESCAPES[ch]
    if ch == '"' and escape_double_quote:
        return '\\"'
    if ch == "'" and escape_single_quote:
        return "\\'"
    if is_printable(ch):
        return ch
    return escape_unicode(ch)


def _next_code_point(data: bytes) -> tuple[int, int] | None:
    if not data:
        return None
    x = data[0]
    if x < 128:
        return x, 1

    consumed = 1

    def take() -> int:
        nonlocal consumed
        if consumed < len(data):
            value = data[consumed]
            consumed += 1
            return value
        return 0

    init = x & (0x7F >> 2)
    y = take()
    code = (init << 6) | (y & _CONT_MASK)
    if x >= 0xE0:
        z = take()
        y_z = ((y & _CONT_MASK) << 6) | (z & _CONT_MASK)
        code = (init << 12) | y_z
        if x >= 0xF0:
            w = take()
            code = ((init & 7) << 18) | (y_z << 6) | (w & _CONT_MASK)
    return code, consumed


def next_char(data: BytesLike) -> tuple[str, int] | None:
    """Decode the first character of UTF-8 *data*.

    Returns the character and the number of bytes it took, or None if
    *data* is empty.
    """
    decoded = _next_code_point(as_bytes(data))
    if decoded is None:
        return None
    code, count = decoded
    if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
        raise ValueError("invalid utf-8 sequence")
    return chr(code), count


def _iter_chars(data: BytesLike) -> Iterator[str]:
    remaining = as_bytes(data)
    while (item := next_char(remaining)) is not None:
        ch, count = item
        yield ch
        remaining = remaining[count:]


def count_chars(data: BytesLike) -> int:
    """Return the number of characters in UTF-8 *data*."""
    return sum(1 for _ in _iter_chars(data))


def utf16_len(s: BytesLike) -> int:
    """Return the number of UTF-16 code units needed to encode *s*."""
    return sum(2 if ord(ch) > 0xFFFF else 1 for ch in _iter_chars(s))


def to_chars(data: BytesLike) -> list[str]:
    """Return the characters of UTF-8 *data* as a list."""
    return list(_iter_chars(data))