import logging

import pytest

from charmap.charmaps import iso_8859_2, iso_8859_3
from charmap.codec import (
    REPLACEMENT_CHARACTER,
    UNDEFINED,
    TableCodec,
    build_encoding_map,
)
from charmap.exceptions import InvalidCodepoint


@pytest.fixture(scope="module")
def latin2():
    return TableCodec(iso_8859_2.NAME, iso_8859_2.charmap)


@pytest.fixture(scope="module")
def latin3():
    return TableCodec(iso_8859_3.NAME, iso_8859_3.charmap)


@pytest.mark.parametrize(
    "raw,expected",
    [
        (b"B", "B"),
        (b"0", "0"),
        (b"z", "z"),
        (b"\xa1", "Ą"),
        (b"\xb3", "ł"),
        (b"\xbf", "ż"),
        (b"\xe6", "ć"),
        (b"\xff", "˙"),
    ],
)
def test_decode(latin2, raw, expected):
    assert latin2.decode(raw) == (expected, None)


def test_decode_unassigned_byte_is_replaced(latin3):
    text, error = latin3.decode(b"a\xa5b")

    assert text == "a" + REPLACEMENT_CHARACTER + "b"
    assert error is InvalidCodepoint


def test_decode_keeps_going_after_unassigned_bytes(latin3):
    text, error = latin3.decode(b"\xa5\xae\xbe" + b"abc")

    assert text == REPLACEMENT_CHARACTER * 3 + "abc"
    assert error is InvalidCodepoint


def test_encode(latin2):
    assert latin2.encode("Zażółć") == (b"Za\xbf\xf3\xb3\xe6", None)


def test_encode_unmappable_codepoint_is_substituted(latin2):
    data, error = latin2.encode("Ą€☃x")

    assert data == b"\xa1??x"
    assert error is InvalidCodepoint


def test_encode_iterates_codepoints_not_utf8_bytes(latin2):
    # U+0104 is two bytes in UTF-8, one unit here
    assert latin2.encode("Ą") == (b"\xa1", None)


@pytest.mark.parametrize(
    "method,data,expected",
    [
        ("decode", b"", ""),
        ("encode", "", b""),
        ("decode_to_buffer", b"", bytearray()),
        ("encode_to_buffer", b"", bytearray()),
    ],
)
def test_empty_input(latin2, method, data, expected):
    result, error = getattr(latin2, method)(data)

    assert result == expected
    assert type(result) is type(expected)
    assert error is None


def test_decode_to_buffer_writes_utf8(latin2):
    buffer, error = latin2.decode_to_buffer(b"a\xa1")

    assert isinstance(buffer, bytearray)
    assert buffer == "aĄ".encode("utf-8")
    assert error is None


def test_decode_to_buffer_unassigned_byte(latin3):
    buffer, error = latin3.decode_to_buffer(bytearray(b"\xa5"))

    assert buffer == REPLACEMENT_CHARACTER.encode("utf-8")
    assert error is InvalidCodepoint


@pytest.mark.parametrize("wrap", [bytes, bytearray, memoryview])
def test_encode_to_buffer_accepts_byte_buffers(latin2, wrap):
    buffer, error = latin2.encode_to_buffer(wrap("xĄ".encode("utf-8")))

    assert buffer == bytearray(b"x\xa1")
    assert error is None


def test_encode_to_buffer_malformed_utf8_is_substituted(latin2):
    buffer, error = latin2.encode_to_buffer(b"a\xffb")

    assert buffer == bytearray(b"a?b")
    assert error is InvalidCodepoint


def test_encoding_map_is_inverse_of_table(latin2):
    assert latin2.encoding_map[0x0104] == 0xA1
    assert len(latin2.encoding_map) == 256
    for byte, char in enumerate(latin2.decoding_table):
        assert latin2.encoding_map[ord(char)] == byte


def test_encoding_map_is_read_only(latin2):
    with pytest.raises(TypeError):
        latin2.encoding_map[0x20AC] = 0x80


def test_table_size_is_checked():
    with pytest.raises(ValueError):
        TableCodec("SHORT", "abc")


def test_unassigned_bytes_are_not_encode_targets(latin3):
    assert ord(UNDEFINED) not in latin3.encoding_map
    assert len(latin3.encoding_map) == 256 - 7


duplicated_table = "AA" + UNDEFINED * 254


def test_tie_break_first_keeps_lowest_byte(caplog):
    caplog.set_level(logging.WARNING)
    codec = TableCodec("DUP", duplicated_table, tie_break="first")

    assert codec.encode("A") == (b"\x00", None)
    assert codec.decode(b"\x00\x01") == ("AA", None)
    assert "U+0041" in caplog.text


def test_tie_break_last_keeps_highest_byte():
    codec = TableCodec("DUP", duplicated_table, tie_break="last")

    assert codec.encode("A") == (b"\x01", None)


def test_build_encoding_map_rejects_unknown_tie_break():
    with pytest.raises(ValueError):
        build_encoding_map("DUP", duplicated_table, tie_break="random")


def test_repr(latin3):
    assert repr(latin3) == "<TableCodec ISO-8859-3 (249 mapped bytes)>"


@pytest.mark.parametrize("method", ["decode", "decode_to_buffer"])
def test_decode_rejects_text(latin2, method):
    with pytest.raises(TypeError):
        getattr(latin2, method)("abc")
