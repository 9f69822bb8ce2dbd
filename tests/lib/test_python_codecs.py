import codecs

import pytest

import charmap
from charmap.bootstrap import bootstrap
from charmap.lib.python_codecs import (
    codec_name,
    register_python_codecs,
    unregister_python_codecs,
)


@pytest.fixture
def python_codecs():
    search_function = register_python_codecs()
    yield search_function
    unregister_python_codecs(search_function)


@pytest.mark.parametrize(
    "prefix,name,expected",
    [
        ("charmap", "ISO-8859-2", "charmap-iso-8859-2"),
        ("Legacy", "KOI8-R", "legacy-koi8-r"),
        ("charmap", "WINDOWS-1252", "charmap-windows-1252"),
    ],
)
def test_codec_name(prefix, name, expected):
    assert codec_name(prefix, name) == expected


def test_decode(python_codecs):
    assert b"\xa1\xbf\xf3".decode("charmap-iso-8859-2") == "Ążó"
    assert b"\xc1\xd0".decode("charmap-koi8-r") == "ап"


def test_encode(python_codecs):
    assert "Ążó".encode("charmap-iso-8859-2") == b"\xa1\xbf\xf3"
    assert "€".encode("charmap_iso_8859_15") == b"\xa4"


def test_matches_registry(python_codecs):
    data = bytes(range(256))

    for name in charmap.list_encodings():
        text, _ = charmap.decode(data, name)
        assert data.decode(codec_name("charmap", name), errors="replace") == text


def test_aliases(python_codecs):
    assert b"\xa1".decode("charmap-latin2") == "Ą"
    assert codecs.lookup("charmap-latin2").name == "charmap-iso-8859-2"
    assert codecs.lookup("CHARMAP_ISO_8859_2").name == "charmap-iso-8859-2"


def test_strict_errors(python_codecs):
    with pytest.raises(UnicodeDecodeError):
        b"\xa5".decode("charmap-iso-8859-3")

    with pytest.raises(UnicodeEncodeError):
        "日本".encode("charmap-iso-8859-2")


def test_replace_errors(python_codecs):
    assert b"A\xa5".decode("charmap-iso-8859-3", errors="replace") == "A�"
    assert "A日".encode("charmap-iso-8859-2", errors="replace") == b"A?"


def test_incremental(python_codecs):
    decoder = codecs.getincrementaldecoder("charmap-koi8-r")()
    encoder = codecs.getincrementalencoder("charmap-koi8-r")()

    assert decoder.decode(b"\xc1") + decoder.decode(b"\xd0", final=True) == "ап"
    assert encoder.encode("а") + encoder.encode("п", final=True) == b"\xc1\xd0"


def test_unknown_encoding(python_codecs):
    with pytest.raises(LookupError):
        codecs.lookup("charmap-ebcdic")


def test_custom_prefix_and_registry():
    search_function = register_python_codecs(bootstrap(encodings=["KOI8-R"]), prefix="legacy")
    try:
        assert b"\xc1".decode("legacy-koi8-r") == "а"
        with pytest.raises(LookupError):
            codecs.lookup("legacy-iso-8859-2")
    finally:
        unregister_python_codecs(search_function)

    with pytest.raises(LookupError):
        codecs.lookup("legacy-koi8-r")


@pytest.mark.parametrize("prefix", ["my-legacy", "My Legacy"])
def test_prefix_with_separators(prefix):
    search_function = register_python_codecs(prefix=prefix)
    try:
        assert b"\xa1".decode(codec_name(prefix, "ISO-8859-2")) == "Ą"
        assert "Ą".encode(prefix + "-latin2") == b"\xa1"
        assert codecs.lookup(prefix + "_koi8_r").name == codec_name(prefix, "KOI8-R")
    finally:
        unregister_python_codecs(search_function)
