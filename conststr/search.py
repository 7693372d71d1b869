"""Searching, comparing and stripping strings."""

from __future__ import annotations

from conststr import byteseq
from conststr.byteseq import BytesLike, Ordering


def _require_str(value: object, what: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a str, got {type(value).__name__}")
    return value


def contains(haystack: str, pattern: str) -> bool:
    """Return True if *pattern* (a string or a character) occurs in *haystack*."""
    return byteseq.contains(
        _require_str(haystack, "haystack"), _require_str(pattern, "pattern")
    )


def starts_with(haystack: str, pattern: str) -> bool:
    """Return True if *haystack* begins with *pattern*."""
    return byteseq.starts_with(
        _require_str(haystack, "haystack"), _require_str(pattern, "pattern")
    )


def ends_with(haystack: str, pattern: str) -> bool:
    """Return True if *haystack* ends with *pattern*."""
    return byteseq.ends_with(
        _require_str(haystack, "haystack"), _require_str(pattern, "pattern")
    )


def strip_prefix(s: str, prefix: str) -> str | None:
    """Return *s* without *prefix*, or None if *s* does not start with it."""
    result = byteseq.strip_prefix(_require_str(s, "s"), _require_str(prefix, "prefix"))
    return None if result is None else str(result)


def strip_suffix(s: str, suffix: str) -> str | None:
    """Return *s* without *suffix*, or None if *s* does not end with it."""
    result = byteseq.strip_suffix(_require_str(s, "s"), _require_str(suffix, "suffix"))
    return None if result is None else str(result)


def compare(lhs: BytesLike, rhs: BytesLike) -> Ordering:
    """Compare two strings or byte strings lexicographically."""
    return byteseq.compare(lhs, rhs)


_OPERATORS: dict[str, frozenset[Ordering]] = {
    "<": frozenset({Ordering.LESS}),
    ">": frozenset({Ordering.GREATER}),
    "==": frozenset({Ordering.EQUAL}),
    "<=": frozenset({Ordering.LESS, Ordering.EQUAL}),
    ">=": frozenset({Ordering.GREATER, Ordering.EQUAL}),
}


def compare_op(op: str, lhs: BytesLike, rhs: BytesLike) -> bool:
    """Apply the comparison operator *op* (``<``, ``>``, ``==``, ``<=``, ``>=``)."""
    try:
        accepted = _OPERATORS[op]
    except KeyError:
        raise ValueError(f"unsupported comparison operator {op!r}") from None
    return compare(lhs, rhs) in accepted


def equal(lhs: BytesLike, rhs: BytesLike) -> bool:
    """Return True if both strings or byte strings are equal."""
    return byteseq.equal(lhs, rhs)