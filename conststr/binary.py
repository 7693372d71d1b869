"""Encoding strings to code units and decoding hexadecimal text."""

from __future__ import annotations

from typing import Iterable

from conststr.byteseq import as_bytes
from conststr.escape import encode_utf16_char, to_chars

_ENCODINGS = ("utf8", "utf16")
_HEX_SKIP = frozenset(b" \r\n\t")


def _check_encoding(encoding: str) -> str:
    if encoding not in _ENCODINGS:
        raise ValueError(f"unsupported encoding {encoding!r}")
    return encoding


def _utf16_units(s: str) -> list[int]:
    return [unit for ch in to_chars(s) for unit in encode_utf16_char(ch)]


def encode(encoding: str, s: str) -> bytes | list[int]:
    """Encode *s* as ``"utf8"`` (bytes) or ``"utf16"`` (list of code units)."""
    if _check_encoding(encoding) == "utf8":
        return as_bytes(s)
    return _utf16_units(s)


def encode_z(encoding: str, s: str) -> bytes | list[int]:
    """Like :func:`encode`, with a terminating nul appended.

    Raises ValueError if *s* already contains a nul character.
    """
    if "\0" in s:
        raise ValueError("string must not contain a nul character")
    if _check_encoding(encoding) == "utf8":
        return as_bytes(s) + b"\0"
    return _utf16_units(s) + [0]


def _hex_value(b: int) -> int | None:
    if 0x30 <= b <= 0x39:
        return b - 0x30
    if 0x61 <= b <= 0x66:
        return b - 0x61 + 10
    if 0x41 <= b <= 0x46:
        return b - 0x41 + 10
    return None


def _decode_one(text: str) -> Iterable[int]:
    data = iter(as_bytes(text))
    for b in data:
        if b in _HEX_SKIP:
            continue
        high = _hex_value(b)
        if high is None:
            raise ValueError("invalid character")
        nxt = next(data, None)
        if nxt is None:
            raise ValueError("expected even number of hex characters")
        low = _hex_value(nxt)
        if low is None:
            raise ValueError("expected hex character")
        yield (high << 4) | low


def hex_decode(source: str | Iterable[str]) -> bytes:
    """Decode hexadecimal text, or a sequence of such texts, into bytes.

    Spaces, tabs, carriage returns and newlines between byte pairs are
    ignored. Raises ValueError on any other non-hex character or an odd
    number of hex digits.
    """
    texts = [source] if isinstance(source, str) else list(source)
    return bytes(value for text in texts for value in _decode_one(text))