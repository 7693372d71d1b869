import pytest

from conststr.case import AsciiCase, convert_ascii_case, convert_case, split_words

CASES = [
    (
        "b.8",
        {
            "lower_camel": "b8",
            "upper_camel": "B8",
            "snake": "b_8",
            "kebab": "b-8",
            "shouty_snake": "B_8",
            "shouty_kebab": "B-8",
        },
    ),
    (
        "Hello World123!XMLHttp我4t5.c6.7b.8",
        {
            "lower_camel": "helloWorld123XmlHttp我4t5C67b8",
            "upper_camel": "HelloWorld123XmlHttp我4t5C67b8",
            "snake": "hello_world123_xml_http_我_4t5_c6_7b_8",
            "kebab": "hello-world123-xml-http-我-4t5-c6-7b-8",
            "shouty_snake": "HELLO_WORLD123_XML_HTTP_我_4T5_C6_7B_8",
            "shouty_kebab": "HELLO-WORLD123-XML-HTTP-我-4T5-C6-7B-8",
        },
    ),
    (
        "XMLHttpRequest",
        {
            "lower_camel": "xmlHttpRequest",
            "upper_camel": "XmlHttpRequest",
            "snake": "xml_http_request",
            "kebab": "xml-http-request",
            "shouty_snake": "XML_HTTP_REQUEST",
            "shouty_kebab": "XML-HTTP-REQUEST",
        },
    ),
    (
        "  hello world  ",
        {
            "lower_camel": "helloWorld",
            "upper_camel": "HelloWorld",
            "snake": "hello_world",
            "kebab": "hello-world",
            "shouty_snake": "HELLO_WORLD",
            "shouty_kebab": "HELLO-WORLD",
        },
    ),
    (
        "",
        {
            "lower_camel": "",
            "upper_camel": "",
            "snake": "",
            "kebab": "",
            "shouty_snake": "",
            "shouty_kebab": "",
        },
    ),
    (
        "_",
        {
            "lower_camel": "",
            "upper_camel": "",
            "snake": "",
            "kebab": "",
            "shouty_snake": "",
            "shouty_kebab": "",
        },
    ),
    (
        "1.2E3",
        {
            "lower_camel": "12e3",
            "upper_camel": "12e3",
            "snake": "1_2e3",
            "kebab": "1-2e3",
            "shouty_snake": "1_2E3",
            "shouty_kebab": "1-2E3",
        },
    ),
    (
        "__a__b-c__d__",
        {
            "lower_camel": "aBCD",
            "upper_camel": "ABCD",
            "snake": "a_b_c_d",
            "kebab": "a-b-c-d",
            "shouty_snake": "A_B_C_D",
            "shouty_kebab": "A-B-C-D",
        },
    ),
    (
        "futures-core123",
        {
            "lower_camel": "futuresCore123",
            "upper_camel": "FuturesCore123",
            "snake": "futures_core123",
            "kebab": "futures-core123",
            "shouty_snake": "FUTURES_CORE123",
            "shouty_kebab": "FUTURES-CORE123",
        },
    ),
]

FLAT_CASES = [
    (source, case, expected)
    for source, table in CASES
    for case, expected in table.items()
]


@pytest.mark.parametrize("source,case,expected", FLAT_CASES)
def test_convert_ascii_case_by_name(source, case, expected):
    assert convert_ascii_case(case, source) == expected


@pytest.mark.parametrize("source,case,expected", FLAT_CASES)
def test_convert_ascii_case_by_enum(source, case, expected):
    assert convert_ascii_case(AsciiCase.from_name(case), source) == expected


DOC_EXAMPLES = [
    ("lower", "Lower Case", "lower case"),
    ("upper", "Upper Case", "UPPER CASE"),
    ("lower_camel", "lower camel case", "lowerCamelCase"),
    ("upper_camel", "upper camel case", "UpperCamelCase"),
    ("snake", "snake case", "snake_case"),
    ("kebab", "kebab case", "kebab-case"),
    ("shouty_snake", "shouty snake case", "SHOUTY_SNAKE_CASE"),
    ("shouty_kebab", "shouty kebab case", "SHOUTY-KEBAB-CASE"),
]


@pytest.mark.parametrize("case,source,expected", DOC_EXAMPLES)
def test_doc_examples_ascii(case, source, expected):
    assert convert_ascii_case(case, source) == expected


@pytest.mark.parametrize("case,source,expected", DOC_EXAMPLES)
def test_doc_examples_convert_case(case, source, expected):
    assert convert_case(case, source) == expected


def test_ascii_lower_upper_leave_non_ascii_alone():
    assert convert_ascii_case("lower", "ÄBC") == "Äbc"
    assert convert_ascii_case("upper", "äbc") == "äBC"


def test_convert_case_lower_upper_are_unicode_aware():
    assert convert_case("lower", "ÄBC") == "äbc"
    assert convert_case("upper", "äbc") == "ÄBC"


def test_split_words_camel_case():
    assert split_words("XMLHttpRequest") == ["XML", "Http", "Request"]


def test_split_words_drops_punctuation():
    assert split_words("__a__b-c__d__") == ["a", "b", "c", "d"]
    assert split_words("") == []


def test_from_name_round_trip():
    for case in AsciiCase:
        assert AsciiCase.from_name(case.value) is case


def test_from_name_rejects_unknown():
    with pytest.raises(ValueError, match="unsupported case"):
        AsciiCase.from_name("title")


def test_convert_rejects_unknown_case():
    with pytest.raises(ValueError):
        convert_ascii_case("camel", "abc")
    with pytest.raises(ValueError):
        convert_case("camel", "abc")