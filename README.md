# conststr

A small library of string operations with precise, predictable behaviour.
The functions work on plain Python `str` and `bytes` values; strings are
handled through their UTF-8 encoding, so offsets are byte offsets. Invalid
input raises `ValueError` (or `TypeError` for the wrong kind of value).

## Installation

```
pip install conststr
```

## Modules

- `conststr.case`: case conversion. `AsciiCase` lists the targets
  (`LOWER`, `UPPER`, `LOWER_CAMEL`, `UPPER_CAMEL`, `SNAKE`, `KEBAB`,
  `SHOUTY_SNAKE`, `SHOUTY_KEBAB`); `AsciiCase.from_name("snake")` looks one up
  by name. `convert_ascii_case` changes only ASCII letters; `convert_case`
  does the same except that lower and upper case use full Unicode mapping.
  `split_words` returns the words the converters work on.
- `conststr.asciiops`: `is_ascii` and `eq_ignore_ascii_case`.
- `conststr.search`: `contains`, `starts_with`, `ends_with`, `strip_prefix`
  and `strip_suffix` on strings; `compare` (returning an `Ordering`),
  `compare_op` (with `"<"`, `">"`, `"=="`, `"<="`, `">="`) and `equal` on
  strings or byte strings.
- `conststr.binary`: `encode` and `encode_z` for `"utf8"` (bytes) and
  `"utf16"` (a list of code units); the `_z` forms append a terminating nul
  and refuse strings that already contain one. `hex_decode` turns hex text, or
  a sequence of hex texts, into bytes, skipping spaces, tabs, carriage returns
  and newlines.
- `conststr.escape`: `encode_utf8_char`, `encode_utf16_char`,
  `escape_unicode`, `escape_debug`, `next_char`, `count_chars`, `utf16_len`
  and `to_chars`.
- `conststr.printable`: `is_printable`, which decides whether `escape_debug`
  shows a character as itself.
- `conststr.byteseq`: the byte-level building blocks (`as_bytes`,
  `subslice`, `equal`, `compare`, `contains`, `starts_with`, `ends_with`,
  `strip_prefix`, `strip_suffix`, `next_match`, `num_to_hex_digit`,
  `num_from_dec_digit`) and the `Ordering` enum (`LESS`, `EQUAL`, `GREATER`).

## Examples

```python
from conststr.case import convert_ascii_case, convert_case
from conststr.search import contains, strip_prefix, compare, compare_op
from conststr.binary import encode, encode_z, hex_decode
from conststr.escape import escape_debug, escape_unicode
from conststr.byteseq import next_match

convert_ascii_case("snake", "XMLHttpRequest")      # 'xml_http_request'
convert_ascii_case("lower_camel", "hello world")   # 'helloWorld'
convert_ascii_case("upper", "straße")              # 'STRAßE'
convert_case("upper", "straße")                    # 'STRASSE'

contains("bananas", "nana")                        # True
strip_prefix("foo:bar", "foo:")                    # 'bar'
compare("1", "10")                                 # Ordering.LESS
compare_op("<", "1", "10")                         # True
next_match("abc", "bc")                            # (1, '')

encode("utf16", "hello你好")                        # [104, 101, 108, 108, 111, 20320, 22909]
encode_z("utf8", "hi")                             # b'hi\x00'
hex_decode("a1 b2 c3 d4")                          # b'\xa1\xb2\xc3\xd4'
hex_decode(["0a0B", "0C0d"])                       # b'\n\x0b\x0c\r'

escape_debug("\n")                                 # '\\n'
escape_unicode("我")                                # '\\u{6211}'
```

## What it does not do

The package has no format-string engine, no conversion of values to strings
or parsing of strings into typed values, and no concatenation, joining,
replacing, splitting or whitespace-collapsing helpers. It has no command-line
interface.

## Running the tests

```
pip install -e ".[test]"
pytest
```