import logging
import os
from logging.handlers import RotatingFileHandler

from charmap import VERSION
from charmap.bootstrap import bootstrap_from_config
from charmap.config import config as cfg
from charmap.conversion import Converter

logger = logging.getLogger("CHARMAP")

# logger name -> handlers attached by configure_logger, replaced on the next call
_installed_handlers = {}


def get_format(level):
    if level <= logging.DEBUG:
        return (
            "%(asctime)s - %(levelname)-8s - %(threadName)-10s - %(name)s - %(message)s"
        )
    else:
        return "%(asctime)s - %(levelname)-8s - %(name)s - %(message)s"


def configure_logger(logger):
    for handler in _installed_handlers.pop(logger.name, []):
        logger.removeHandler(handler)
        handler.close()
    installed = _installed_handlers[logger.name] = []

    logger_level = cfg.LOGGING_LEVEL_CONSOLE

    if cfg.LOGGING_FILE:
        logfile_handler = RotatingFileHandler(
            cfg.LOGGING_FILE,
            mode="a",
            maxBytes=cfg.LOGGING_FILE_MAX_SIZE * 1024 * 1024,
            backupCount=cfg.LOGGING_FILE_MAX_FILES,
            encoding=None,
            delay=0,
        )

        logfile_handler.setLevel(cfg.LOGGING_LEVEL_FILE)
        logfile_handler.setFormatter(logging.Formatter(get_format(logger_level)))
        logger.addHandler(logfile_handler)
        installed.append(logfile_handler)
        logger_level = min(logger_level, cfg.LOGGING_LEVEL_FILE)

    logconsole_handler = logging.StreamHandler()
    logconsole_handler.setLevel(cfg.LOGGING_LEVEL_CONSOLE)
    logconsole_handler.setFormatter(logging.Formatter(get_format(logger_level)))
    logger.addHandler(logconsole_handler)
    installed.append(logconsole_handler)

    logger.setLevel(logger_level)


def initialize(config_file=None, configure_logging=True) -> Converter:
    """
    Load configuration and build a converter from it

    :param config_file: Path to a configuration file. Default locations are searched when None
    :param configure_logging: Attach console/file handlers to the CHARMAP logger
    :return: Converter over a frozen registry
    """
    if config_file is not None:
        cfg.load(os.path.abspath(config_file))
    else:
        cfg.load()

    if configure_logging:
        configure_logger(logger)

    logger.info(f"Starting charmap {VERSION}")
    if cfg.CONFIG_FILE_LOCATION:
        logger.info(f"Config loaded from {cfg.CONFIG_FILE_LOCATION}")

    converter = Converter(
        bootstrap_from_config(cfg), dump_substitutions=cfg.LOGGING_DUMP_SUBSTITUTIONS
    )
    logger.info(f"Registered {len(converter.registry)} encodings")

    if cfg.PYTHON_CODECS_ENABLE:
        # Registering additional encodings
        from charmap.lib.python_codecs import register_python_codecs

        register_python_codecs(converter.registry, prefix=cfg.PYTHON_CODECS_PREFIX)

    return converter
