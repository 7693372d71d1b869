"""Byte-level operations on strings and byte strings.

Strings are handled through their UTF-8 encoding, so positions reported
by these functions are byte offsets.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence, TypeVar, Union

BytesLike = Union[str, bytes, bytearray, memoryview]
_S = TypeVar("_S", str, bytes)
_T = TypeVar("_T", bound=Sequence)


class Ordering(Enum):
    """Result of a three-way comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def as_bytes(data: BytesLike) -> bytes:
    """Return *data* as bytes; strings are encoded as UTF-8."""
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected str or bytes-like object, got {type(data).__name__}")


def subslice(data: _T, start: int, end: int) -> _T:
    """Return ``data[start:end]``, raising IndexError if the range is out of bounds."""
    if not 0 <= start <= end <= len(data):
        raise IndexError(f"range {start}..{end} out of bounds for length {len(data)}")
    return data[start:end]


def equal(lhs: BytesLike, rhs: BytesLike) -> bool:
    """Return True if both operands hold the same bytes."""
    return as_bytes(lhs) == as_bytes(rhs)


def compare(lhs: BytesLike, rhs: BytesLike) -> Ordering:
    """Compare two operands lexicographically by their bytes."""
    left, right = as_bytes(lhs), as_bytes(rhs)
    if left < right:
        return Ordering.LESS
    if left > right:
        return Ordering.GREATER
    return Ordering.EQUAL


def contains(haystack: BytesLike, needle: BytesLike) -> bool:
    """Return True if *needle* occurs in *haystack*.

    An empty haystack contains nothing, not even the empty needle.
    """
    hay = as_bytes(haystack)
    if not hay:
        return False
    return as_bytes(needle) in hay


def starts_with(haystack: BytesLike, needle: BytesLike) -> bool:
    """Return True if *haystack* begins with *needle*."""
    return as_bytes(haystack).startswith(as_bytes(needle))


def ends_with(haystack: BytesLike, needle: BytesLike) -> bool:
    """Return True if *haystack* ends with *needle*."""
    return as_bytes(haystack).endswith(as_bytes(needle))


def _same_kind(original: BytesLike, data: bytes) -> str | bytes:
    return data.decode("utf-8") if isinstance(original, str) else data


def strip_prefix(s: BytesLike, prefix: BytesLike) -> str | bytes | None:
    """Return *s* without *prefix*, or None if *s* does not start with it."""
    data, head = as_bytes(s), as_bytes(prefix)
    if not data.startswith(head):
        return None
    return _same_kind(s, data[len(head):])


def strip_suffix(s: BytesLike, suffix: BytesLike) -> str | bytes | None:
    """Return *s* without *suffix*, or None if *s* does not end with it."""
    data, tail = as_bytes(s), as_bytes(suffix)
    if not data.endswith(tail):
        return None
    return _same_kind(s, data[: len(data) - len(tail)])


def next_match(haystack: BytesLike, needle: BytesLike) -> tuple[int, str | bytes] | None:
    """Find the first occurrence of *needle*.

    Returns the byte offset of the match and the remainder after it,
    or None if there is no match. The needle must not be empty.
    """
    pattern = as_bytes(needle)
    if not pattern:
        raise ValueError("needle must not be empty")
    data = as_bytes(haystack)
    index = data.find(pattern)
    if index < 0:
        return None
    return index, _same_kind(haystack, data[index + len(pattern):])


def num_to_hex_digit(x: int) -> int:
    """Return the ASCII code of the lowercase hex digit for 0..15."""
    if 0 <= x <= 9:
        return ord("0") + x
    if 10 <= x <= 15:
        return ord("a") + (x - 10)
    raise ValueError("invalid hex number")


def num_from_dec_digit(d: int) -> int:
    """Return the value of the ASCII decimal digit with code *d*."""
    if ord("0") <= d <= ord("9"):
        return d - ord("0")
    raise ValueError("invalid dec digit")