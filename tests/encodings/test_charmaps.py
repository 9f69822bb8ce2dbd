import pytest

from charmap.charmaps import CHARMAPS, load_charmap
from charmap.codec import TABLE_SIZE, UNDEFINED
from charmap.registry import normalize_encoding_name

MODULES = {load_charmap(module_name).NAME: load_charmap(module_name) for module_name in CHARMAPS}


@pytest.mark.parametrize("module_name", CHARMAPS)
def test_encoding_len(module_name):
    assert len(load_charmap(module_name).charmap) == TABLE_SIZE


@pytest.mark.parametrize("module_name", CHARMAPS)
def test_encoding_is_injective(module_name):
    assigned = [char for char in load_charmap(module_name).charmap if char != UNDEFINED]

    assert len(assigned) == len(set(assigned))


@pytest.mark.parametrize("module_name", CHARMAPS)
def test_names_are_normalized(module_name):
    module = load_charmap(module_name)

    assert module.NAME == normalize_encoding_name(module.NAME)
    for alias in module.ALIASES:
        assert alias == normalize_encoding_name(alias)


@pytest.mark.parametrize("module_name", CHARMAPS)
def test_encoding_is_ascii_compatible(module_name):
    charmap = load_charmap(module_name).charmap

    assert charmap[0x20:0x7F] == "".join(chr(x) for x in range(0x20, 0x7F))


def test_names_and_aliases_share_one_namespace():
    names = list(MODULES)
    names += [alias for module in MODULES.values() for alias in module.ALIASES]

    assert len(names) == len(set(names))


test_data = [
    ("ISO-8859-2", 0xA1, "Ą"),
    ("ISO-8859-14", 0xA1, "Ḃ"),
    ("ISO-8859-15", 0xA4, "€"),
    ("ISO-8859-7", 0xC1, "Α"),
    ("ISO-8859-8", 0xE0, "א"),
    ("ISO-8859-11", 0xA1, "ก"),
    ("WINDOWS-1252", 0x80, "€"),
    ("KOI8-R", 0xC1, "а"),
    ("IBM437", 0xB0, "░"),
    ("IBM866", 0x80, "А"),
]


@pytest.mark.parametrize("name,byte,expected", test_data)
def test_encoding(name, byte, expected):
    assert MODULES[name].charmap[byte] == expected, f"byte {byte:#04x} != {expected}"


@pytest.mark.parametrize(
    "name,byte",
    [
        ("ISO-8859-3", 0xA5),
        ("ISO-8859-7", 0xFF),
        ("ISO-8859-8", 0xA1),
        ("WINDOWS-1252", 0x81),
        ("WINDOWS-1251", 0x98),
    ],
)
def test_unassigned(name, byte):
    assert MODULES[name].charmap[byte] == UNDEFINED


@pytest.mark.parametrize(
    "name,python_name",
    [
        ("ISO-8859-1", "latin_1"),
        ("ISO-8859-2", "iso8859_2"),
        ("ISO-8859-5", "iso8859_5"),
        ("ISO-8859-14", "iso8859_14"),
        ("ISO-8859-15", "iso8859_15"),
        ("KOI8-R", "koi8_r"),
        ("WINDOWS-1251", "cp1251"),
    ],
)
def test_matches_python_codec(name, python_name):
    charmap = MODULES[name].charmap

    for byte in range(TABLE_SIZE):
        try:
            expected = bytes([byte]).decode(python_name)
        except UnicodeDecodeError:
            expected = UNDEFINED

        assert charmap[byte] == expected, f"{name} byte {byte:#04x}"
