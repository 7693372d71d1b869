"""Case conversion of strings.

Words are found by an ASCII-aware splitter. Non-ASCII characters are kept
as they are and form words of their own.
"""

from __future__ import annotations

from enum import Enum, auto

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def _ascii_lower(s: str) -> str:
    return s.translate(_ASCII_LOWER)


def _ascii_upper(s: str) -> str:
    return s.translate(_ASCII_UPPER)


class AsciiCase(Enum):
    """The supported target cases."""

    LOWER = "lower"
    UPPER = "upper"
    LOWER_CAMEL = "lower_camel"
    UPPER_CAMEL = "upper_camel"
    SNAKE = "snake"
    KEBAB = "kebab"
    SHOUTY_SNAKE = "shouty_snake"
    SHOUTY_KEBAB = "shouty_kebab"

    @classmethod
    def from_name(cls, name: str) -> "AsciiCase":
        """Return the case called *name*, such as ``"snake"``."""
        try:
            return cls(name)
        except ValueError:
            raise ValueError("unsupported case") from None

    @property
    def separator(self) -> str | None:
        if self in (AsciiCase.SNAKE, AsciiCase.SHOUTY_SNAKE):
            return "_"
        if self in (AsciiCase.KEBAB, AsciiCase.SHOUTY_KEBAB):
            return "-"
        return None


class _Kind(Enum):
    NON_ASCII = auto()
    LOWER = auto()
    UPPER = auto()
    DIGIT = auto()
    DOT = auto()
    OTHER = auto()


def _kind(ch: str) -> _Kind:
    if ord(ch) >= 128:
        return _Kind.NON_ASCII
    if "a" <= ch <= "z":
        return _Kind.LOWER
    if "A" <= ch <= "Z":
        return _Kind.UPPER
    if "0" <= ch <= "9":
        return _Kind.DIGIT
    if ch == ".":
        return _Kind.DOT
    return _Kind.OTHER


def _is_boundary_word(word: str) -> bool:
    return all(_kind(ch) in (_Kind.OTHER, _Kind.DOT) for ch in word)


def _boundaries(s: str) -> list[int]:
    marks: list[int] = []
    prev2: _Kind | None = None
    prev: _Kind | None = None
    for i, ch in enumerate(s):
        cur = _kind(ch)
        if prev is None:
            marks.append(i)
        elif prev is not cur:
            if prev is _Kind.UPPER and cur is _Kind.LOWER:
                marks.append(i - 1)
            elif prev is _Kind.NON_ASCII and cur is _Kind.DIGIT:
                marks.append(i)
            elif prev in (_Kind.LOWER, _Kind.UPPER) and cur is _Kind.DIGIT:
                pass
            elif prev is _Kind.DIGIT and cur in (
                _Kind.LOWER,
                _Kind.UPPER,
                _Kind.NON_ASCII,
            ):
                pass
            elif cur is _Kind.DOT:
                pass
            elif prev is _Kind.DOT:
                if prev2 is None:
                    marks.append(i)
                else:
                    marks.extend((i - 1, i))
            else:
                marks.append(i)
        prev2, prev = prev, cur
    marks.append(len(s))
    return marks


def split_words(s: str) -> list[str]:
    """Split *s* into words, dropping runs of punctuation and whitespace."""
    marks = _boundaries(s)
    words = (s[start:end] for start, end in zip(marks, marks[1:]))
    return [word for word in words if not _is_boundary_word(word)]


def _resolve(case: AsciiCase | str) -> AsciiCase:
    return case if isinstance(case, AsciiCase) else AsciiCase.from_name(case)


def _convert_word(case: AsciiCase, word: str, first: bool) -> str:
    if case in (AsciiCase.SNAKE, AsciiCase.KEBAB):
        return _ascii_lower(word)
    if case in (AsciiCase.SHOUTY_SNAKE, AsciiCase.SHOUTY_KEBAB):
        return _ascii_upper(word)
    capitalize = case is AsciiCase.UPPER_CAMEL or not first
    head, tail = word[:1], word[1:]
    head = _ascii_upper(head) if capitalize else _ascii_lower(head)
    return head + _ascii_lower(tail)


def convert_ascii_case(case: AsciiCase | str, s: str) -> str:
    """Convert *s* to *case*; non-ASCII characters are not affected."""
    target = _resolve(case)
    if target is AsciiCase.LOWER:
        return _ascii_lower(s)
    if target is AsciiCase.UPPER:
        return _ascii_upper(s)
    words = [
        _convert_word(target, word, index == 0)
        for index, word in enumerate(split_words(s))
    ]
    return (target.separator or "").join(words)


def convert_case(case: AsciiCase | str, s: str) -> str:
    """Convert *s* to *case*.

    Lower and upper case apply full Unicode case mapping; the other cases
    use the same word splitting as :func:`convert_ascii_case`.
    """
    target = _resolve(case)
    if target is AsciiCase.LOWER:
        return s.lower()
    if target is AsciiCase.UPPER:
        return s.upper()
    return convert_ascii_case(target, s)