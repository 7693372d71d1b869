"""Classification of Unicode characters as printable or not.

A character is printable when it is displayed as itself by debug escaping;
everything else is shown as a ``\\u{...}`` escape.
"""

from __future__ import annotations

_SINGLETONS0U: tuple[tuple[int, int], ...] = (
    (0x00, 1), (0x03, 5), (0x05, 6), (0x06, 2), (0x07, 6), (0x08, 7),
    (0x09, 17), (0x0A, 28), (0x0B, 25), (0x0C, 26), (0x0D, 16), (0x0E, 13),
    (0x0F, 4), (0x10, 3), (0x12, 18), (0x13, 9), (0x16, 1), (0x17, 4),
    (0x18, 1), (0x19, 3), (0x1A, 7), (0x1B, 1), (0x1C, 2), (0x1F, 22),
    (0x20, 3), (0x2B, 3), (0x2D, 11), (0x2E, 1), (0x30, 3), (0x31, 2),
    (0x32, 1), (0xA7, 2), (0xA9, 2), (0xAA, 4), (0xAB, 8), (0xFA, 2),
    (0xFB, 5), (0xFD, 2), (0xFE, 3), (0xFF, 9),
)

_SINGLETONS0L = bytes.fromhex(
    """
    ad 78 79 8b 8d a2 30 57 58 8b 8c 90 1c dd 0e 0f
    4b 4c fb fc 2e 2f 3f 5c 5d 5f e2 84 8d 8e 91 92
    a9 b1 ba bb c5 c6 c9 ca de e4 e5 ff 00 04 11 12
    29 31 34 37 3a 3b 3d 49 4a 5d 84 8e 92 a9 b1 b4
    ba bb c6 ca ce cf e4 e5 00 04 0d 0e 11 12 29 31
    34 3a 3b 45 46 49 4a 5e 64 65 84 91 9b 9d c9 ce
    cf 0d 11 29 3a 3b 45 49 57 5b 5c 5e 5f 64 65 8d
    91 a9 b4 ba bb c5 c9 df e4 e5 f0 0d 11 45 49 64
    65 80 84 b2 bc be bf d5 d7 f0 f1 83 85 8b a4 a6
    be bf c5 c7 ce cf da db 48 98 bd cd c6 ce cf 49
    4e 4f 57 59 5e 5f 89 8e 8f b1 b6 b7 bf c1 c6 c7
    d7 11 16 17 5b 5c f6 f7 fe ff 80 6d 71 de df 0e
    1f 6e 6f 1c 1d 5f 7d 7e ae af 7f bb bc 16 17 1e
    1f 46 47 4e 4f 58 5a 5c 5e 7e 7f b5 c5 d4 d5 dc
    f0 f1 f5 72 73 8f 74 75 96 26 2e 2f a7 af b7 bf
    c7 cf d7 df 9a 40 97 98 30 8f 1f d2 d4 ce ff 4e
    4f 5a 5b 07 08 0f 10 27 2f ee ef 6e 6f 37 3d 3f
    42 45 90 91 53 67 75 c8 c9 d0 d1 d8 d9 e7 fe ff
    """
)

_SINGLETONS1U: tuple[tuple[int, int], ...] = (
    (0x00, 6), (0x01, 1), (0x03, 1), (0x04, 2), (0x05, 7), (0x07, 2),
    (0x08, 8), (0x09, 2), (0x0A, 5), (0x0B, 2), (0x0E, 4), (0x10, 1),
    (0x11, 2), (0x12, 5), (0x13, 17), (0x14, 1), (0x15, 2), (0x17, 2),
    (0x19, 13), (0x1C, 5), (0x1D, 8), (0x24, 1), (0x6A, 4), (0x6B, 2),
    (0xAF, 3), (0xBC, 2), (0xCF, 2), (0xD1, 2), (0xD4, 12), (0xD5, 9),
    (0xD6, 2), (0xD7, 2), (0xDA, 1), (0xE0, 5), (0xE1, 2), (0xE7, 4),
    (0xE8, 2), (0xEE, 32), (0xF0, 4), (0xF8, 2), (0xFA, 2), (0xFB, 1),
)

_SINGLETONS1L = bytes.fromhex(
    """
    0c 27 3b 3e 4e 4f 8f 9e 9e 9f 7b 8b 93 96 a2 b2
    ba 86 b1 06 07 09 36 3d 3e 56 f3 d0 d1 04 14 18
    36 37 56 57 7f aa ae af bd 35 e0 12 87 89 8e 9e
    04 0d 0e 11 12 29 31 34 3a 45 46 49 4a 4e 4f 64
    65 5c b6 b7 1b 1c 07 08 0a 0b 14 17 36 39 3a a8
    a9 d8 d9 09 37 90 91 a8 07 0a 3b 3e 66 69 8f 92
    6f 5f bf ee ef 5a 62 f4 fc ff 9a 9b 2e 2f 27 28
    55 9d a0 a1 a3 a4 a7 a8 ad ba bc c4 06 0b 0c 15
    1d 3a 3f 45 51 a6 a7 cc cd a0 07 19 1a 22 25 3e
    3f e7 ec ef ff c5 c6 04 20 23 25 26 28 33 38 3a
    48 4a 4c 50 53 55 56 58 5a 5c 5e 60 63 65 66 6b
    73 78 7d 7f 8a a4 aa af b0 c0 d0 ae af 6e 6f 93
    """
)

_NORMAL0 = bytes.fromhex(
    """
    00 20 5f 22 82 df 04 82 44 08 1b 04 06 11 81 ac 0e
    80 ab 05 1f 09 81 1b 03 19 08 01 04 2f 04 34 04
    07 03 01 07 06 07 11 0a 50 0f 12 07 55 07 03 04
    1c 0a 09 03 08 03 07 03 02 03 03 03 0c 04 05 03
    0b 06 01 0e 15 05 4e 07 1b 07 57 07 02 06 16 0d
    50 04 43 03 2d 03 01 04 11 06 0f 0c 3a 04 1d 25
    5f 20 6d 04 6a 25 80 c8 05 82 b0 03 1a 06 82 fd 03
    59 07 16 09 18 09 14 0c 14 0c 6a 06 0a 06 1a 06
    59 07 2b 05 46 0a 2c 04 0c 04 01 03 31 0b 2c 04
    1a 06 0b 03 80 ac 06 0a 06 2f 31 4d 03 80 a4 08
    3c 03 0f 03 3c 07 38 08 2b 05 82 ff 11 18 08 2f 11
    2d 03 21 0f 21 0f 80 8c 04 82 97 19 0b 15 88 94 05
    2f 05 3b 07 02 0e 18 09 80 be 22 74 0c 80 d6 1a
    0c 05 80 ff 05 80 df 0c f2 9d 03 37 09 81 5c 14
    80 b8 08 80 cb 05 0a 18 3b 03 0a 06 38 08 46 08
    0c 06 74 0b 1e 03 5a 04 59 09 80 83 18 1c 0a 16 09
    4c 04 80 8a 06 ab a4 0c 17 04 31 a1 04 81 da 26
    07 0c 05 05 80 a6 10 81 f5 07 01 20 2a 06 4c 04
    80 8d 04 80 be 03 1b 03 0f 0d
    """
)

_NORMAL1 = bytes.fromhex(
    """
    5e 22 7b 05 03 04 2d 03 66 03 01 2f 2e 80 82 1d 03
    31 0f 1c 04 24 09 1e 05 2b 05 44 04 0e 2a 80 aa 06
    24 04 24 04 28 08 34 0b 4e 43 81 37 09 16 0a 08 18
    3b 45 39 03 63 08 09 30 16 05 21 03 1b 05 01 40
    38 04 4b 05 2f 04 0a 07 09 07 40 20 27 04 0c 09
    36 03 3a 05 1a 07 04 0c 07 50 49 37 33 0d 33 07
    2e 08 0a 81 26 52 4e 28 08 2a 16 1a 26 1c 14 17 09
    4e 04 24 09 44 0d 19 07 0a 06 48 08 27 09 75 0b
    3f 41 2a 06 3b 05 0a 06 51 06 01 05 10 03 05 80 8b
    62 1e 48 08 0a 80 a6 5e 22 45 0b 0a 06 0d 13 3a 06
    0a 36 2c 04 17 80 b9 3c 64 53 0c 48 09 0a 46 45 1b
    48 08 53 0d 49 81 07 46 0a 1d 03 47 49 37 03 0e 08
    0a 06 39 07 0a 81 36 19 80 b7 01 0f 32 0d 83 9b 66
    75 0b 80 c4 8a 4c 63 0d 84 2f 8f d1 82 47 a1 b9
    82 39 07 2a 04 5c 06 26 0a 46 0a 28 05 13 82 b0
    5b 65 4b 04 39 07 11 40 05 0b 02 0e 97 f8 08
    84 d6 2a 09 a2 e7 81 33 2d 03 11 04 08 81 8c 89 04
    6b 05 0d 03 09 07 10 92 60 47 09 74 3c 80 f6 0a
    73 08 70 15 46 80 9a 14 0c 57 09 19 80 87 81 47 03
    85 42 0f 15 84 50 1f 80 e1 2b 80 d5 2d 03 1a 04
    02 81 40 1f 11 3a 05 01 84 e0 80 f7 29 4c 04 0a 04
    02 83 11 44 4c 3d 80 c2 3c 06 01 04 55 05 1b 34
    02 81 0e 2c 04 64 0c 56 0a 80 ae 38 1d 0d 2c 04
    09 07 02 0e 06 80 9a 83 d8 05 10 03 0d 03 74 0c
    59 07 0c 04 01 0f 0c 04 38 08 0a 06 28 08 22 4e
    81 54 0c 15 03 05 03 07 09 1d 03 0b 05 06 0a 0a 06
    08 08 07 09 80 cb 25 0a 84 06
    """
)

# Half-open code point ranges above the two table-driven planes that are not printable.
_HIGH_GAPS: tuple[tuple[int, int], ...] = (
    (0x2A6E0, 0x2A700),
    (0x2B739, 0x2B740),
    (0x2B81E, 0x2B820),
    (0x2CEA2, 0x2CEB0),
    (0x2EBE1, 0x2F800),
    (0x2FA1E, 0x30000),
    (0x3134B, 0xE0100),
    (0xE01F0, 0x110000),
)


def _check(
    x: int,
    singleton_uppers: tuple[tuple[int, int], ...],
    singleton_lowers: bytes,
    normal: bytes,
) -> bool:
    x_upper = x >> 8
    x_lower = x & 0xFF

    lower_start = 0
    for upper, lower_count in singleton_uppers:
        lower_end = lower_start + lower_count
        if x_upper == upper:
            if x_lower in singleton_lowers[lower_start:lower_end]:
                return False
        elif x_upper < upper:
            break
        lower_start = lower_end

    remaining = x
    current = True
    values = iter(normal)
    for v in values:
        length = ((v & 0x7F) << 8) | next(values) if v & 0x80 else v
        remaining -= length
        if remaining < 0:
            break
        current = not current
    return current


def is_printable(ch: str) -> bool:
    """Return True if the single character *ch* is printable."""
    if not isinstance(ch, str):
        raise TypeError(f"expected a str of length 1, got {type(ch).__name__}")
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {len(ch)} characters")

    x = ord(ch)
    lower = x & 0xFFFF
    if x < 32:
        return False
    if x < 127:
        return True
    if x < 0x10000:
        return _check(lower, _SINGLETONS0U, _SINGLETONS0L, _NORMAL0)
    if x < 0x20000:
        return _check(lower, _SINGLETONS1U, _SINGLETONS1L, _NORMAL1)
    return not any(start <= x < end for start, end in _HIGH_GAPS)