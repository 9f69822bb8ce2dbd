import logging

import pytest
from construct import Int8ub, StringError, Struct

from charmap.bootstrap import bootstrap
from charmap.conversion import Converter
from charmap.lib.fields import LegacyString

label_struct = Struct(
    "id" / Int8ub,
    "label" / LegacyString(8, "ISO-8859-2"),
)


def test_parse():
    data = b"\x01" + b"\xa3\xf3d\xbc" + b"\x00" * 4

    assert label_struct.parse(data).label == "Łódź"


def test_parse_space_padded():
    data = b"\x01" + b"Zone 1  "

    assert label_struct.parse(data).label == "Zone 1"


def test_parse_embedded_nul():
    data = b"\x01" + b"AB\x00CD\x00\x00\x00"

    assert label_struct.parse(data).label == "AB CD"


def test_parse_unassigned_byte(caplog):
    field = LegacyString(4, "ISO-8859-8")

    with caplog.at_level(logging.WARNING, logger="CHARMAP"):
        assert field.parse(b"\xe0\xa1\x00\x00") == "א�"

    assert "Unable to properly decode label" in caplog.text


def test_build():
    assert label_struct.build(dict(id=1, label="Łódź")) == (
        b"\x01\xa3\xf3d\xbc\x00\x00\x00\x00"
    )
    assert len(label_struct.build(dict(id=2, label=""))) == label_struct.sizeof()


def test_build_custom_pad():
    field = LegacyString(6, "KOI8-R", pad=b" ")

    assert field.build("ап") == b"\xc1\xd0    "


def test_build_unmappable(caplog):
    field = LegacyString(4, "ISO-8859-2")

    with caplog.at_level(logging.WARNING, logger="CHARMAP"):
        assert field.build("A日") == b"A?\x00\x00"

    assert "Unable to properly encode label" in caplog.text


def test_build_too_long():
    with pytest.raises(StringError):
        label_struct.build(dict(id=1, label="Front door zone"))


def test_sizeof():
    assert label_struct.sizeof() == 9


def test_unknown_encoding():
    with pytest.raises(StringError):
        LegacyString(4, "EBCDIC")


def test_invalid_pad():
    with pytest.raises(StringError):
        LegacyString(4, "ISO-8859-2", pad=b"  ")


def test_custom_converter():
    converter = Converter(bootstrap(encodings=["KOI8-R"]))

    with pytest.raises(StringError):
        LegacyString(4, "ISO-8859-2", converter=converter)

    field = LegacyString(4, "koi8_r", converter=converter)
    assert field.parse(b"\xc1\xd0\x00\x00") == "ап"
