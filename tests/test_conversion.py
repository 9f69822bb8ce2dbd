import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

import charmap
from charmap.bootstrap import bootstrap
from charmap.codec import REPLACEMENT_CHARACTER, UNDEFINED
from charmap.conversion import Converter
from charmap.exceptions import InvalidCodepoint, UnknownEncoding
from charmap.registry import Registry

ENCODINGS = charmap.list_encodings()


@pytest.mark.parametrize("encoding", ENCODINGS)
def test_every_byte_decodes_to_one_codepoint(encoding):
    for byte in range(256):
        text, error = charmap.decode(bytes([byte]), encoding)

        assert len(text) == 1
        if error is None:
            assert text != REPLACEMENT_CHARACTER
        else:
            assert error is InvalidCodepoint
            assert text == REPLACEMENT_CHARACTER


@pytest.mark.parametrize("encoding", ENCODINGS)
def test_round_trip_of_mappable_text(encoding):
    codec = charmap.default_converter.codec(encoding)
    text = "".join(char for char in codec.decoding_table if char != UNDEFINED)

    data, error = charmap.encode(text, encoding)
    assert error is None
    assert len(data) == len(text)

    decoded, error = charmap.decode(data, encoding)
    assert error is None
    assert decoded == text


@pytest.mark.parametrize("encoding", ENCODINGS)
def test_list_consistency(encoding):
    assert charmap.default_converter.codec(encoding) is not None
    assert charmap.decode(b"abc", encoding) == ("abc", None)
    assert charmap.encode("abc", encoding) == (b"abc", None)


def test_decode_substitutes_without_truncating():
    data = b"\xa5abc\xae"
    text, error = charmap.decode(data, "ISO-8859-3")

    assert text == REPLACEMENT_CHARACTER + "abc" + REPLACEMENT_CHARACTER
    assert len(text) == len(data)
    assert error is InvalidCodepoint


def test_encode_substitutes_without_truncating():
    text = "a€b☃"
    data, error = charmap.encode(text, "ISO-8859-2")

    assert data == b"a?b?"
    assert len(data) == len(text)
    assert error is InvalidCodepoint


def test_unknown_encoding_returns_input_untouched():
    text = "zażółć gęślą jaźń"
    result, error = charmap.encode(text, "NOT-A-REAL-ENCODING")

    assert result is text
    assert error is UnknownEncoding

    data = b"\xa1\xa2"
    result, error = charmap.decode(data, "not_a_real_encoding")

    assert result is data
    assert error is UnknownEncoding


@pytest.mark.parametrize("method", ["encode_to_buffer", "decode_to_buffer"])
def test_unknown_encoding_buffer_variants(method):
    data = bytearray(b"\xa1\xa2")
    result, error = getattr(charmap, method)(data, "NOT-A-REAL-ENCODING")

    assert isinstance(result, bytearray)
    assert result == data
    assert result is not data
    assert error is UnknownEncoding


def test_alias_equivalence():
    data = bytes(range(256))
    expected = charmap.decode(data, "ISO-8859-2")

    for label in ["8859-2", "iso_8859_2", "ISO8859-2", "latin2", "L2", "8859_2"]:
        assert charmap.decode(data, label) == expected


def test_same_byte_different_tables():
    assert charmap.decode(b"\xa1", "ISO-8859-2") == ("Ą", None)
    assert charmap.decode(b"\xa1", "ISO-8859-14") == ("Ḃ", None)
    assert charmap.decode(b"\xa1", "ISO-8859-5") == ("Ё", None)


def test_buffer_variants():
    buffer, error = charmap.decode_to_buffer(b"\xc1\xd0", "KOI8-R")
    assert buffer == bytearray("ап".encode("utf-8"))
    assert error is None

    buffer, error = charmap.encode_to_buffer("ап€".encode("utf-8"), "koi8_r")
    assert buffer == bytearray(b"\xc1\xd0?")
    assert error is InvalidCodepoint


def test_list_encodings_is_sorted():
    assert ENCODINGS == sorted(ENCODINGS)
    assert "ISO-8859-2" in ENCODINGS
    assert "ISO-8859-14" in ENCODINGS


def test_errors_are_exceptions_but_returned():
    assert isinstance(UnknownEncoding, LookupError)
    assert isinstance(InvalidCodepoint, ValueError)
    assert str(UnknownEncoding) == "encoding is not supported"
    assert str(InvalidCodepoint) == "cannot convert one or more codepoints"


def test_converter_freezes_registry():
    registry = Registry()
    Converter(registry)

    assert registry.frozen


def test_converter_over_subset():
    converter = Converter(bootstrap(encodings=["ISO-8859-15"]))

    assert converter.list_encodings() == ["ISO-8859-15"]
    assert converter.encode("€", "latin9") == (b"\xa4", None)
    assert converter.encode("€", "ISO-8859-2") == ("€", UnknownEncoding)


def test_substitutions_are_logged_when_enabled(caplog):
    caplog.set_level(logging.DEBUG, logger="CHARMAP")
    converter = Converter(bootstrap(encodings=["ISO-8859-2"]), dump_substitutions=True)

    converter.encode("€", "ISO-8859-2")

    assert "Substituted unmappable input while encoding to ISO-8859-2" in caplog.text


def test_substitutions_are_not_logged_by_default(caplog):
    caplog.set_level(logging.DEBUG, logger="CHARMAP")

    charmap.encode("€", "ISO-8859-2")

    assert "Substituted" not in caplog.text


def test_concurrent_conversions():
    data = bytes(range(256))
    expected = {encoding: charmap.decode(data, encoding) for encoding in ENCODINGS}

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda e: (e, charmap.decode(data, e)), ENCODINGS * 4))

    for encoding, result in results:
        assert result == expected[encoding]


def test_decode_of_text_is_a_type_error():
    with pytest.raises(TypeError):
        charmap.decode("abc", "ISO-8859-2")
