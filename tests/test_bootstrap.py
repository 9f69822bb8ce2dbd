import pytest

from charmap.bootstrap import available_encodings, bootstrap, bootstrap_from_config
from charmap.charmaps import CHARMAPS
from charmap.config import Config
from charmap.exceptions import ConfigurationError, EncodingConflict


def test_bootstrap_registers_every_table():
    registry = bootstrap()

    assert registry.frozen
    assert len(registry) == len(CHARMAPS)
    assert registry.list() == available_encodings()


def test_bootstrap_subset():
    registry = bootstrap(encodings=["iso_8859_2", "KOI8-R"])

    assert registry.list() == ["ISO-8859-2", "KOI8-R"]
    assert registry.resolve("latin2") == "ISO-8859-2"
    assert registry.resolve("cskoi8r") == "KOI8-R"


def test_bootstrap_unknown_encoding():
    with pytest.raises(ConfigurationError, match="NOT-A-REAL-ENCODING"):
        bootstrap(encodings=["not_a_real_encoding"])


def test_bootstrap_extra_aliases():
    registry = bootstrap(aliases={"polish": "iso_8859_2", "ru": "cskoi8r"})

    assert registry.resolve("POLISH") == "ISO-8859-2"
    assert registry.resolve("ru") == "KOI8-R"


def test_bootstrap_alias_to_missing_encoding():
    with pytest.raises(ConfigurationError):
        bootstrap(encodings=["ISO-8859-2"], aliases={"ru": "KOI8-R"})


def test_bootstrap_alias_colliding_with_encoding_name():
    with pytest.raises(EncodingConflict):
        bootstrap(aliases={"KOI8-R": "ISO-8859-2"})


def test_bootstrap_tie_break_is_checked():
    with pytest.raises(ValueError):
        bootstrap(encodings=["ISO-8859-2"], tie_break="random")


def test_bootstrap_from_config(mocker):
    config = Config()
    mocker.patch.multiple(
        config,
        ENCODINGS=["ISO-8859-14"],
        ENCODING_ALIASES={"WELSH": "ISO-8859-14"},
        ENCODE_TIE_BREAK="last",
    )

    registry = bootstrap_from_config(config)

    assert registry.list() == ["ISO-8859-14"]
    assert registry.resolve("welsh") == "ISO-8859-14"


def test_bootstrap_from_default_config():
    assert len(bootstrap_from_config(Config())) == len(CHARMAPS)
