import json
import logging

import pytest

from charmap.config import Config
from charmap.exceptions import ConfigurationError


@pytest.fixture
def config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("CHARMAP_CONFIG_FILE", raising=False)
    for name in Config.DEFAULTS:
        monkeypatch.delenv("CHARMAP_" + name, raising=False)
    return Config()


def test_defaults(config):
    assert config.LOGGING_LEVEL_CONSOLE == logging.INFO
    assert config.LOGGING_FILE is None
    assert config.ENCODINGS == []
    assert config.ENCODING_ALIASES == {}
    assert config.ENCODE_TIE_BREAK == "first"
    assert config.PYTHON_CODECS_ENABLE is False
    assert config.PYTHON_CODECS_PREFIX == "charmap"


def test_defaults_are_not_shared(config):
    config.ENCODINGS.append("KOI8-R")

    assert Config().ENCODINGS == []
    assert Config.DEFAULTS["ENCODINGS"] == []


def test_load_without_file(config):
    config.load()

    assert config.CONFIG_LOADED
    assert config.CONFIG_FILE_LOCATION is None
    assert config.ENCODE_TIE_BREAK == "first"


def test_load_conf(config, tmp_path):
    path = tmp_path / "charmap.conf"
    path.write_text(
        'ENCODINGS = ["ISO-8859-2", "KOI8-R"]\n'
        'ENCODING_ALIASES = {"CYR": "KOI8-R"}\n'
        'ENCODE_TIE_BREAK = "last"\n'
        "LOGGING_LEVEL_CONSOLE = logging.DEBUG\n"
    )

    config.load()

    assert config.CONFIG_FILE_LOCATION == str(path)
    assert config.ENCODINGS == ["ISO-8859-2", "KOI8-R"]
    assert config.ENCODING_ALIASES == {"CYR": "KOI8-R"}
    assert config.ENCODE_TIE_BREAK == "last"
    assert config.LOGGING_LEVEL_CONSOLE == logging.DEBUG


def test_load_json(config, tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"ENCODINGS": ["IBM437"], "PYTHON_CODECS_ENABLE": True}))

    config.load(str(path))

    assert config.ENCODINGS == ["IBM437"]
    assert config.PYTHON_CODECS_ENABLE is True


def test_load_yaml(config, tmp_path):
    path = tmp_path / "charmap.yaml"
    path.write_text("PYTHON_CODECS_PREFIX: legacy\nLOGGING_FILE_MAX_FILES: 5\n")

    config.load(str(path))

    assert config.PYTHON_CODECS_PREFIX == "legacy"
    assert config.LOGGING_FILE_MAX_FILES == 5


def test_load_empty_yaml(config, tmp_path):
    path = tmp_path / "charmap.yaml"
    path.write_text("")

    config.load(str(path))

    assert config.CONFIG_LOADED


def test_ignores_unknown_keys(config, tmp_path):
    path = tmp_path / "charmap.json"
    path.write_text(json.dumps({"SOMETHING_ELSE": 1, "ENCODINGS": ["KOI8-U"]}))

    config.load(str(path))

    assert config.ENCODINGS == ["KOI8-U"]
    assert not hasattr(config, "SOMETHING_ELSE")


def test_environment(config, monkeypatch):
    monkeypatch.setenv("CHARMAP_ENCODINGS", "ISO-8859-2, KOI8-R")
    monkeypatch.setenv("CHARMAP_ENCODING_ALIASES", "CYR=KOI8-R,PL=ISO-8859-2")
    monkeypatch.setenv("CHARMAP_PYTHON_CODECS_ENABLE", "yes")
    monkeypatch.setenv("CHARMAP_LOGGING_FILE_MAX_SIZE", "3")

    config.load()

    assert config.ENCODINGS == ["ISO-8859-2", "KOI8-R"]
    assert config.ENCODING_ALIASES == {"CYR": "KOI8-R", "PL": "ISO-8859-2"}
    assert config.PYTHON_CODECS_ENABLE is True
    assert config.LOGGING_FILE_MAX_SIZE == 3


def test_environment_overrides_file(config, tmp_path, monkeypatch):
    path = tmp_path / "charmap.conf"
    path.write_text('ENCODE_TIE_BREAK = "last"\n')
    monkeypatch.setenv("CHARMAP_ENCODE_TIE_BREAK", "first")

    config.load()

    assert config.ENCODE_TIE_BREAK == "first"


def test_config_file_from_environment(config, tmp_path, monkeypatch):
    path = tmp_path / "other.json"
    path.write_text(json.dumps({"ENCODINGS": ["KOI8-R"]}))
    monkeypatch.setenv("CHARMAP_CONFIG_FILE", str(path))

    config.load()

    assert config.CONFIG_FILE_LOCATION == str(path)
    assert config.ENCODINGS == ["KOI8-R"]


@pytest.mark.parametrize(
    "content",
    [
        'ENCODE_TIE_BREAK = "middle"\n',
        "ENCODE_TIE_BREAK = 1\n",
        'ENCODINGS = "ISO-8859-2"\n',
        "LOGGING_FILE_MAX_FILES = -1\n",
    ],
)
def test_invalid_value(config, tmp_path, content):
    path = tmp_path / "charmap.conf"
    path.write_text(content)

    with pytest.raises(ConfigurationError):
        config.load(str(path))


def test_missing_file(config, tmp_path):
    with pytest.raises(ConfigurationError):
        config.load(str(tmp_path / "missing.conf"))


def test_missing_file_from_environment(config, tmp_path, monkeypatch):
    monkeypatch.setenv("CHARMAP_CONFIG_FILE", str(tmp_path / "missing.conf"))

    with pytest.raises(ConfigurationError):
        config.load()


def test_unsupported_extension(config, tmp_path):
    path = tmp_path / "charmap.ini"
    path.write_text("[charmap]\n")

    with pytest.raises(ConfigurationError):
        config.load(str(path))
