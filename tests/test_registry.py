from types import MappingProxyType

import pytest

from charmap.charmaps import iso_8859_2, iso_8859_14
from charmap.codec import TableCodec
from charmap.exceptions import EncodingConflict, RegistryFrozen
from charmap.registry import Registry, normalize_encoding_name


@pytest.fixture(scope="module")
def latin2():
    return TableCodec(iso_8859_2.NAME, iso_8859_2.charmap)


@pytest.fixture(scope="module")
def latin8():
    return TableCodec(iso_8859_14.NAME, iso_8859_14.charmap)


@pytest.fixture
def registry(latin2, latin8):
    r = Registry()
    r.register(latin2, "ISO-8859-2", "8859-2", "ISO8859-2")
    r.register(latin8, "ISO-8859-14", "8859-14", "ISO8859-14")
    return r


@pytest.mark.parametrize(
    "label,expected",
    [
        ("iso_8859_2", "ISO-8859-2"),
        ("ISO-8859-2", "ISO-8859-2"),
        ("Iso_8859-2", "ISO-8859-2"),
        ("latin2", "LATIN2"),
        ("koi8_r", "KOI8-R"),
        ("iso 8859 2", "ISO 8859 2"),
        ("", ""),
    ],
)
def test_normalize_encoding_name(label, expected):
    assert normalize_encoding_name(label) == expected


@pytest.mark.parametrize(
    "label", ["ISO-8859-2", "iso_8859_2", "8859-2", "8859_2", "ISO8859-2", "iso8859_2"]
)
def test_resolve(registry, label):
    assert registry.resolve(label) == "ISO-8859-2"


def test_resolve_unknown_returns_normalized_label(registry):
    assert registry.resolve("not_a_real_encoding") == "NOT-A-REAL-ENCODING"


def test_lookup(registry, latin2):
    assert registry.lookup("ISO-8859-2") is latin2
    assert registry.lookup("8859-2") is None
    assert registry.lookup("KOI8-R") is None


def test_names_are_normalized_on_register(latin2):
    r = Registry()
    r.register(latin2, "iso_8859_2", "latin_2")

    assert r.list() == ["ISO-8859-2"]
    assert r.resolve("LATIN-2") == "ISO-8859-2"
    assert r.lookup(r.resolve("latin_2")) is latin2


def test_list_is_sorted(registry):
    assert registry.list() == ["ISO-8859-14", "ISO-8859-2"]


def test_aliases(registry):
    assert registry.aliases("iso_8859_14") == ["8859-14", "ISO8859-14"]
    assert registry.aliases("KOI8-R") == []


def test_contains_and_len(registry):
    assert "ISO-8859-2" in registry
    assert "8859-2" not in registry
    assert len(registry) == 2


def test_register_same_name_twice(registry, latin2):
    with pytest.raises(EncodingConflict):
        registry.register(latin2, "iso-8859-2")


def test_alias_colliding_with_canonical_name(registry, latin2):
    with pytest.raises(EncodingConflict):
        registry.add_aliases("ISO-8859-2", "ISO-8859-14")


def test_canonical_name_colliding_with_alias(registry, latin2):
    with pytest.raises(EncodingConflict):
        registry.register(latin2, "8859-14")


def test_alias_pointing_elsewhere(registry):
    with pytest.raises(EncodingConflict):
        registry.add_aliases("ISO-8859-14", "8859-2")


def test_same_alias_twice_is_accepted(registry):
    registry.add_aliases("ISO-8859-2", "8859-2", "latin2")

    assert registry.resolve("LATIN2") == "ISO-8859-2"


def test_freeze(registry, latin2):
    assert registry.freeze() is registry
    assert registry.frozen

    with pytest.raises(RegistryFrozen):
        registry.register(latin2, "LATIN-2-COPY")

    with pytest.raises(RegistryFrozen):
        registry.add_aliases("ISO-8859-2", "POLISH")


def test_frozen_registry_keeps_answering(registry):
    registry.freeze()
    registry.freeze()

    assert isinstance(registry._codecs, MappingProxyType)
    assert registry.resolve("8859-14") == "ISO-8859-14"
    assert registry.list() == ["ISO-8859-14", "ISO-8859-2"]
    assert "frozen" in repr(registry)
