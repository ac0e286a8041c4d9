import pytest

from stormbyte.errors import StormByteError
from stormbyte.strings import (
    Format,
    explode,
    human_readable,
    indent,
    is_numeric,
    sanitize_newlines,
    split,
    split_fraction,
    to_lower,
    to_upper,
    utf8_decode,
    utf8_encode,
)

LOCALE = "en_US.UTF-8"


def test_simple_explode():
    assert explode("Hello, World!", ",") == ["Hello", " World!"]


def test_path_explode():
    assert explode("path/to/items", "/") == ["path", "to", "items"]


def test_explode_one_item():
    assert explode("Hello", "/") == ["Hello"]


def test_explode_keeps_empty_pieces():
    assert explode("a,,b,", ",") == ["a", "", "b", ""]


def test_explode_empty_string():
    assert explode("", ",") == []


def test_explode_rejects_long_delimiter():
    with pytest.raises(ValueError):
        explode("a--b", "--")


@pytest.mark.parametrize(
    "size, expected",
    [
        (1024, "1 KiB"),
        (1024 * 1024, "1 MiB"),
        (1024**3, "1 GiB"),
        (1024**4, "1 TiB"),
        (1024**5, "1 PiB"),
        (1027.65, "1 KiB"),
        (1154.65, "1.13 KiB"),
    ],
)
def test_human_readable_byte_size(size, expected):
    assert human_readable(size, Format.HUMAN_READABLE_BYTES, LOCALE) == expected


def test_human_readable_small_byte_size():
    assert human_readable(512, Format.HUMAN_READABLE_BYTES, LOCALE) == "512 Bytes"


def test_human_readable_number():
    assert human_readable(1024, Format.HUMAN_READABLE_NUMBER, LOCALE) == "1,024"
    assert human_readable(1024 * 1024, Format.HUMAN_READABLE_NUMBER, LOCALE) == "1,048,576"


def test_human_readable_number_float():
    assert human_readable(1234.5, Format.HUMAN_READABLE_NUMBER, LOCALE) == "1,234.50"
    assert human_readable(2000.0, Format.HUMAN_READABLE_NUMBER, LOCALE) == "2,000"


def test_human_readable_unknown_locale_has_no_grouping():
    assert human_readable(1000, Format.HUMAN_READABLE_NUMBER, "C") == "1000"


def test_human_readable_default_locale_groups():
    assert human_readable(1000, Format.HUMAN_READABLE_NUMBER) == "1,000"


def test_human_readable_raw():
    assert human_readable(1000, Format.RAW) == "1000"
    assert human_readable(1.5, Format.RAW) == "1.500000"


def test_indent():
    assert indent(0) == ""
    assert indent(3) == "\t\t\t"


@pytest.mark.parametrize(
    "text, expected",
    [("123", True), ("", False), ("12a", False), ("-1", False), ("١٢", False)],
)
def test_is_numeric(text, expected):
    assert is_numeric(text) is expected


def test_case_conversion():
    assert to_lower("Hello WORLD 1") == "hello world 1"
    assert to_upper("Hello world 1") == "HELLO WORLD 1"


def test_split_on_whitespace():
    assert split("  one two\tthree\nfour  ") == ["one", "two", "three", "four"]
    assert split("   ") == []


def test_split_fraction():
    assert split_fraction("30000/1001") == (30000, 1001)


def test_split_fraction_scaled():
    assert split_fraction("1/2", 10) == (5, 10)
    assert split_fraction("3/4", 4) == (3, 4)


def test_split_fraction_scaled_truncates():
    assert split_fraction("1/3", 10) == (3, 10)


@pytest.mark.parametrize("text", ["12", "a/2", "1/b", "/", "1/0"])
def test_split_fraction_invalid(text):
    with pytest.raises(StormByteError):
        split_fraction(text)


def test_split_fraction_zero_desired_denominator():
    with pytest.raises(StormByteError, match="desired denominator"):
        split_fraction("1/2", 0)


def test_utf8_round_trip():
    text = "ñandú €"
    encoded = utf8_encode(text)
    assert encoded == "ñandú €".encode("utf-8")
    assert utf8_decode(encoded) == text


def test_utf8_empty():
    assert utf8_encode("") == b""
    assert utf8_decode(b"") == ""


def test_utf8_decode_invalid():
    with pytest.raises(StormByteError):
        utf8_decode(b"\xff\xfe")


def test_utf8_encode_invalid():
    with pytest.raises(StormByteError):
        utf8_encode("\ud800")


def test_sanitize_newlines():
    assert sanitize_newlines("a\r\nb\r\nc\n") == "a\nb\nc\n"
    assert sanitize_newlines("a\rb") == "a\rb"