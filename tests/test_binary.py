import pytest

from conststr.binary import encode, encode_z, hex_decode


def _utf16(s):
    data = s.encode("utf-16-le")
    return [int.from_bytes(data[i : i + 2], "little") for i in range(0, len(data), 2)]


def test_encode_utf8_matches_bytes():
    s = "abc你好"
    assert encode("utf8", s) == s.encode("utf-8")
    assert len(encode("utf8", s)) == 9


def test_encode_z_utf8_appends_nul():
    s = "abc你好"
    assert encode_z("utf8", s) == s.encode("utf-8") + b"\0"
    assert len(encode_z("utf8", s)) == 10


def test_encode_utf16_with_surrogates():
    s = "abc你好𤭢"
    assert encode("utf16", s) == _utf16(s)
    assert len(encode("utf16", s)) == 7
    assert encode_z("utf16", s) == _utf16(s) + [0]


def test_documented_values():
    s = "hello你好"
    assert list(encode("utf8", s)) == [104, 101, 108, 108, 111, 228, 189, 160, 229, 165, 189]
    assert encode("utf16", s) == [104, 101, 108, 108, 111, 20320, 22909]
    assert list(encode_z("utf8", s)) == [104, 101, 108, 108, 111, 228, 189, 160, 229, 165, 189, 0]
    assert encode_z("utf16", s) == [104, 101, 108, 108, 111, 20320, 22909, 0]


def test_encode_z_rejects_nul():
    with pytest.raises(ValueError):
        encode_z("utf8", "a\0b")
    with pytest.raises(ValueError):
        encode_z("utf16", "a\0b")


def test_unknown_encoding():
    with pytest.raises(ValueError):
        encode("latin1", "abc")


def test_hex_decode_documented():
    assert hex_decode("01020304") == bytes([1, 2, 3, 4])
    assert hex_decode("a1 b2 c3 d4") == bytes([0xA1, 0xB2, 0xC3, 0xD4])
    assert hex_decode("E5 E6 90 92") == bytes([0xE5, 0xE6, 0x90, 0x92])
    assert hex_decode(["0a0B", "0C0d"]) == bytes([10, 11, 12, 13])


def test_hex_decode_split_equals_whole():
    whole = hex_decode("00010203 04050607 08090a0b 0c0d0e0f")
    halves = hex_decode(["00010203 04050607", "08090a0b 0c0d0e0f"])
    assert whole == bytes(range(16))
    assert halves == whole


def test_hex_decode_empty():
    assert hex_decode("") == b""


def test_hex_decode_odd_length():
    with pytest.raises(ValueError, match="even number"):
        hex_decode("abc")


def test_hex_decode_invalid_character():
    with pytest.raises(ValueError, match="invalid character"):
        hex_decode("zz")


def test_hex_decode_whitespace_inside_pair():
    with pytest.raises(ValueError, match="expected hex character"):
        hex_decode("1 2")