"""ASCII checks on strings and byte strings."""

from __future__ import annotations

from conststr.byteseq import BytesLike, as_bytes


def is_ascii(data: BytesLike) -> bool:
    """Return True if every byte of *data* is in the ASCII range."""
    return all(b < 0x80 for b in as_bytes(data))


def eq_ignore_ascii_case(lhs: BytesLike, rhs: BytesLike) -> bool:
    """Return True if both operands match, ignoring ASCII letter case."""
    left, right = as_bytes(lhs), as_bytes(rhs)
    return len(left) == len(right) and left.lower() == right.lower()