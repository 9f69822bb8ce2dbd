import logging
from typing import Iterable, Mapping, Optional

from charmap.charmaps import CHARMAPS, load_charmap
from charmap.codec import TIE_BREAK_FIRST, TableCodec
from charmap.exceptions import ConfigurationError
from charmap.registry import Registry, normalize_encoding_name

logger = logging.getLogger("CHARMAP").getChild(__name__)


def bootstrap(
    encodings: Optional[Iterable[str]] = None,
    aliases: Optional[Mapping[str, str]] = None,
    tie_break: str = TIE_BREAK_FIRST,
) -> Registry:
    """
    Build and freeze a registry from the shipped mapping tables

    Tables are registered in CHARMAPS order. Nothing can be registered once
    this returns.

    :param encodings: Canonical names to register. All tables when empty or None
    :param aliases: Additional alias -> canonical name entries
    :param tie_break: Inversion policy for tables that are not injective
    :return: Frozen registry
    """
    wanted = {normalize_encoding_name(name) for name in encodings or ()}
    registry = Registry()

    for module_name in CHARMAPS:
        module = load_charmap(module_name)
        name = normalize_encoding_name(module.NAME)
        if wanted and name not in wanted:
            continue

        codec = TableCodec(name, module.charmap, tie_break=tie_break)
        registry.register(codec, name, *module.ALIASES)

    missing = wanted.difference(registry.list())
    if missing:
        raise ConfigurationError(
            "Unsupported encodings requested: {}. Available are: {}".format(
                sorted(missing), available_encodings()
            )
        )

    for alias, name in (aliases or {}).items():
        name = registry.resolve(name)
        if name not in registry:
            raise ConfigurationError(
                "Alias {} points to {}, which is not registered".format(alias, name)
            )
        registry.add_aliases(name, alias)

    registry.freeze()
    logger.debug("Bootstrapped encodings: %s", ", ".join(registry.list()))

    return registry


def bootstrap_from_config(config) -> Registry:
    return bootstrap(
        encodings=config.ENCODINGS,
        aliases=config.ENCODING_ALIASES,
        tie_break=config.ENCODE_TIE_BREAK,
    )


def available_encodings():
    return sorted(normalize_encoding_name(load_charmap(m).NAME) for m in CHARMAPS)
