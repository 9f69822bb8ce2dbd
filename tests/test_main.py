import logging
from logging.handlers import RotatingFileHandler

import pytest

from charmap import InvalidCodepoint
from charmap.config import config as cfg
from charmap.main import configure_logger, get_format, initialize


@pytest.fixture
def config_file(tmp_path, monkeypatch, mocker):
    monkeypatch.delenv("CHARMAP_CONFIG_FILE", raising=False)
    # restore the shared configuration after every test
    mocker.patch.multiple(
        cfg,
        CONFIG_FILE_LOCATION=cfg.CONFIG_FILE_LOCATION,
        ENCODINGS=list(cfg.ENCODINGS),
        ENCODING_ALIASES=dict(cfg.ENCODING_ALIASES),
        ENCODE_TIE_BREAK=cfg.ENCODE_TIE_BREAK,
        PYTHON_CODECS_ENABLE=cfg.PYTHON_CODECS_ENABLE,
        PYTHON_CODECS_PREFIX=cfg.PYTHON_CODECS_PREFIX,
        LOGGING_DUMP_SUBSTITUTIONS=cfg.LOGGING_DUMP_SUBSTITUTIONS,
    )
    path = tmp_path / "charmap.conf"
    path.write_text(
        'ENCODINGS = ["ISO-8859-2", "KOI8-R"]\n'
        'ENCODING_ALIASES = {"CYR": "KOI8-R"}\n'
        "LOGGING_DUMP_SUBSTITUTIONS = True\n"
    )
    return path


def test_initialize(config_file, caplog):
    with caplog.at_level(logging.INFO, logger="CHARMAP"):
        converter = initialize(str(config_file), configure_logging=False)

    assert converter.list_encodings() == ["ISO-8859-2", "KOI8-R"]
    assert converter.registry.frozen
    assert converter.dump_substitutions
    assert converter.decode(b"\xc1", "cyr") == ("а", None)
    assert converter.encode("日", "ISO-8859-2") == (b"?", InvalidCodepoint)
    assert "Starting charmap" in caplog.text
    assert str(config_file) in caplog.text


def test_initialize_registers_python_codecs(config_file, mocker):
    register = mocker.patch("charmap.lib.python_codecs.register_python_codecs")
    config_file.write_text(
        'PYTHON_CODECS_ENABLE = True\nPYTHON_CODECS_PREFIX = "legacy"\n'
    )

    converter = initialize(str(config_file), configure_logging=False)

    register.assert_called_once_with(converter.registry, prefix="legacy")


def test_initialize_without_python_codecs(config_file, mocker):
    register = mocker.patch("charmap.lib.python_codecs.register_python_codecs")

    initialize(str(config_file), configure_logging=False)

    register.assert_not_called()


def test_get_format():
    assert "%(threadName)" in get_format(logging.DEBUG)
    assert "%(threadName)" not in get_format(logging.INFO)


def test_configure_logger_with_file(tmp_path, mocker):
    logfile = tmp_path / "charmap.log"
    mocker.patch.multiple(
        cfg,
        LOGGING_FILE=str(logfile),
        LOGGING_LEVEL_FILE=logging.ERROR,
        LOGGING_LEVEL_CONSOLE=logging.WARNING,
    )
    logger = logging.getLogger("CHARMAP-TEST-FILE")

    try:
        configure_logger(logger)
        configure_logger(logger)

        file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert len(logger.handlers) == 2
        assert file_handlers[0].level == logging.ERROR
        assert file_handlers[0].maxBytes == cfg.LOGGING_FILE_MAX_SIZE * 1024 * 1024
        assert logger.level == logging.WARNING
    finally:
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)


def test_configure_logger_console_only(mocker):
    mocker.patch.multiple(cfg, LOGGING_FILE=None, LOGGING_LEVEL_CONSOLE=logging.INFO)
    logger = logging.getLogger("CHARMAP-TEST-CONSOLE")

    try:
        configure_logger(logger)

        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0], RotatingFileHandler)
        assert logger.level == logging.INFO
    finally:
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)


def test_initialize_twice_keeps_one_set_of_handlers(config_file, mocker):
    mocker.patch.multiple(cfg, LOGGING_FILE=None, LOGGING_LEVEL_CONSOLE=cfg.LOGGING_LEVEL_CONSOLE)
    charmap_logger = logging.getLogger("CHARMAP")
    existing = list(charmap_logger.handlers)
    level = charmap_logger.level

    try:
        initialize(str(config_file))
        initialize(str(config_file))

        added = [h for h in charmap_logger.handlers if h not in existing]
        assert len(added) == 1
    finally:
        for handler in charmap_logger.handlers[:]:
            if handler not in existing:
                charmap_logger.removeHandler(handler)
                handler.close()
        charmap_logger.setLevel(level)
