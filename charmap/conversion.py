import logging
from typing import List, Optional

from charmap.codec import TableCodec
from charmap.exceptions import UnknownEncoding
from charmap.registry import Registry

logger = logging.getLogger("CHARMAP").getChild(__name__)


class Converter:
    """Public conversion surface over a frozen registry.

    Every call returns ``(result, error)``. error is None, UnknownEncoding
    (the input is returned untouched) or InvalidCodepoint (the result is
    complete, with substitutions).
    """

    def __init__(self, registry: Registry, dump_substitutions: bool = False):
        if not registry.frozen:
            registry.freeze()
        self.registry = registry
        self.dump_substitutions = dump_substitutions

    def codec(self, encoding: str) -> Optional[TableCodec]:
        return self.registry.lookup(self.registry.resolve(encoding))

    def encode(self, text: str, encoding: str):
        codec = self.codec(encoding)
        if codec is None:
            return text, UnknownEncoding

        result, error = codec.encode(text)
        self._log_substitution(error, "encoding to", codec)
        return result, error

    def decode(self, data: bytes, encoding: str):
        codec = self.codec(encoding)
        if codec is None:
            return data, UnknownEncoding

        result, error = codec.decode(data)
        self._log_substitution(error, "decoding from", codec)
        return result, error

    def encode_to_buffer(self, data, encoding: str):
        codec = self.codec(encoding)
        if codec is None:
            return bytearray(data), UnknownEncoding

        result, error = codec.encode_to_buffer(data)
        self._log_substitution(error, "encoding to", codec)
        return result, error

    def decode_to_buffer(self, data, encoding: str):
        codec = self.codec(encoding)
        if codec is None:
            return bytearray(data), UnknownEncoding

        result, error = codec.decode_to_buffer(data)
        self._log_substitution(error, "decoding from", codec)
        return result, error

    def list_encodings(self) -> List[str]:
        return self.registry.list()

    def _log_substitution(self, error, action, codec):
        if self.dump_substitutions and error is not None:
            logger.debug("Substituted unmappable input while %s %s", action, codec.name)
