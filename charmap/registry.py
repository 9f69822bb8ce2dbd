import logging
from types import MappingProxyType
from typing import List, Optional

from charmap.codec import TableCodec
from charmap.exceptions import EncodingConflict, RegistryFrozen

logger = logging.getLogger("CHARMAP").getChild(__name__)


def normalize_encoding_name(name: str) -> str:
    # "iso_8859_2" -> "ISO-8859-2"
    return name.upper().replace("_", "-")


class Registry:
    """Canonical encoding name -> codec, alias -> canonical name.

    Filled during bootstrap, then frozen. A frozen registry holds read-only
    views only and can be shared between threads without locking.
    """

    def __init__(self):
        self._codecs = {}
        self._aliases = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, codec: TableCodec, name: str, *aliases: str) -> None:
        if self._frozen:
            raise RegistryFrozen(
                "Cannot register {}: the registry is frozen".format(name)
            )

        name = normalize_encoding_name(name)
        if name in self._codecs:
            raise EncodingConflict("Encoding {} is already registered".format(name))
        if name in self._aliases:
            raise EncodingConflict(
                "Encoding name {} is already an alias of {}".format(
                    name, self._aliases[name]
                )
            )

        self._codecs[name] = codec
        logger.debug("Registered encoding %s", name)

        self.add_aliases(name, *aliases)

    def add_aliases(self, name: str, *aliases: str) -> None:
        if self._frozen:
            raise RegistryFrozen(
                "Cannot add aliases for {}: the registry is frozen".format(name)
            )

        name = normalize_encoding_name(name)
        for alias in aliases:
            alias = normalize_encoding_name(alias)
            if alias in self._codecs:
                raise EncodingConflict(
                    "Alias {} of {} collides with a registered encoding name".format(
                        alias, name
                    )
                )

            current = self._aliases.get(alias)
            if current is not None and current != name:
                raise EncodingConflict(
                    "Alias {} already resolves to {}, not {}".format(alias, current, name)
                )

            self._aliases[alias] = name

    def freeze(self) -> "Registry":
        if not self._frozen:
            self._codecs = MappingProxyType(self._codecs)
            self._aliases = MappingProxyType(self._aliases)
            self._frozen = True
            logger.debug(
                "Registry frozen with %d encodings and %d aliases",
                len(self._codecs),
                len(self._aliases),
            )
        return self

    def resolve(self, name: str) -> str:
        name = normalize_encoding_name(name)
        return self._aliases.get(name, name)

    def lookup(self, name: str) -> Optional[TableCodec]:
        return self._codecs.get(name)

    def list(self) -> List[str]:
        return sorted(self._codecs)

    def aliases(self, name: str) -> List[str]:
        name = normalize_encoding_name(name)
        return sorted(alias for alias, target in self._aliases.items() if target == name)

    def __contains__(self, name):
        return name in self._codecs

    def __len__(self):
        return len(self._codecs)

    def __repr__(self):
        return "<{} {} encodings{}>".format(
            self.__class__.__name__, len(self._codecs), ", frozen" if self._frozen else ""
        )
