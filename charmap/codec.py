import logging
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from charmap.exceptions import ConversionError, InvalidCodepoint

logger = logging.getLogger("CHARMAP").getChild(__name__)

TABLE_SIZE = 256
UNDEFINED = "\ufffe"  # marks an unassigned byte in a decoding table
REPLACEMENT_CHARACTER = "\ufffd"
SUBSTITUTE_BYTE = 0x3F  # "?"

TIE_BREAK_FIRST = "first"
TIE_BREAK_LAST = "last"
TIE_BREAKS = (TIE_BREAK_FIRST, TIE_BREAK_LAST)


def build_encoding_map(name: str, decoding_table: str, tie_break: str = TIE_BREAK_FIRST) -> dict:
    """
    Invert a decoding table into a codepoint -> byte map.

    A table is expected to be injective. When two bytes decode to the same
    codepoint only one of them can be the encode target, chosen by tie_break.

    :param name: Encoding name, used in log messages
    :param decoding_table: String indexed by byte value
    :param tie_break: "first" keeps the lowest byte value, "last" keeps the highest
    :return: dict of codepoint to byte value
    """
    if tie_break not in TIE_BREAKS:
        raise ValueError(
            "Invalid tie break {}. Allowed are: {}".format(tie_break, TIE_BREAKS)
        )

    encoding_map = {}
    for byte, char in enumerate(decoding_table):
        if char == UNDEFINED:
            continue

        codepoint = ord(char)
        previous = encoding_map.get(codepoint)
        if previous is not None:
            winner = previous if tie_break == TIE_BREAK_FIRST else byte
            logger.warning(
                "%s: U+%04X is decoded from both 0x%02X and 0x%02X, encoding it as 0x%02X",
                name,
                codepoint,
                previous,
                byte,
                winner,
            )
            if tie_break == TIE_BREAK_FIRST:
                continue

        encoding_map[codepoint] = byte

    return encoding_map


def _check_bytes(data):
    if isinstance(data, str):
        raise TypeError("a bytes-like object is required, not 'str'")


class TableCodec:
    """Converts between one 8-bit encoding and Unicode using a mapping table.

    Conversions never stop at an unmappable unit: it is replaced (U+FFFD when
    decoding, ``?`` when encoding) and InvalidCodepoint is returned as the error.
    """

    def __init__(self, name: str, decoding_table: str, tie_break: str = TIE_BREAK_FIRST):
        if len(decoding_table) != TABLE_SIZE:
            raise ValueError(
                "{}: decoding table has {} entries, {} expected".format(
                    name, len(decoding_table), TABLE_SIZE
                )
            )

        self._name = name
        self._decoding_table = decoding_table
        self._decoding_map = {
            byte: char for byte, char in enumerate(decoding_table) if char != UNDEFINED
        }
        self._decoding_map_utf8 = {
            byte: char.encode("utf-8") for byte, char in self._decoding_map.items()
        }
        self._encoding_map = build_encoding_map(name, decoding_table, tie_break)

    @property
    def name(self) -> str:
        return self._name

    @property
    def decoding_table(self) -> str:
        return self._decoding_table

    @property
    def encoding_map(self) -> Mapping[int, int]:
        return MappingProxyType(self._encoding_map)

    def __repr__(self):
        return "<{} {} ({} mapped bytes)>".format(
            self.__class__.__name__, self._name, len(self._decoding_map)
        )

    def decode(self, data: bytes) -> Tuple[str, Optional[ConversionError]]:
        _check_bytes(data)
        decoding_map = self._decoding_map
        error = None
        chars = []

        for byte in data:
            char = decoding_map.get(byte)
            if char is None:
                char = REPLACEMENT_CHARACTER
                error = InvalidCodepoint
            chars.append(char)

        return "".join(chars), error

    def encode(self, text: str) -> Tuple[bytes, Optional[ConversionError]]:
        buffer, error = self._encode_codepoints(text)
        return bytes(buffer), error

    def decode_to_buffer(self, data) -> Tuple[bytearray, Optional[ConversionError]]:
        """Decode into a bytearray holding the UTF-8 form of the text."""
        _check_bytes(data)
        decoding_map = self._decoding_map_utf8
        replacement = REPLACEMENT_CHARACTER.encode("utf-8")
        error = None
        buffer = bytearray()

        for byte in data:
            encoded = decoding_map.get(byte)
            if encoded is None:
                encoded = replacement
                error = InvalidCodepoint
            buffer += encoded

        return buffer, error

    def encode_to_buffer(self, data) -> Tuple[bytearray, Optional[ConversionError]]:
        """Encode UTF-8 encoded input into a bytearray.

        The input is decoded to codepoints first; malformed UTF-8 becomes U+FFFD,
        which no table maps, so it is substituted and reported like any other
        unmappable codepoint.
        """
        text = bytes(data).decode("utf-8", errors="replace")
        return self._encode_codepoints(text)

    def _encode_codepoints(self, text: str) -> Tuple[bytearray, Optional[ConversionError]]:
        encoding_map = self._encoding_map
        error = None
        buffer = bytearray()

        for char in text:
            byte = encoding_map.get(ord(char))
            if byte is None:
                byte = SUBSTITUTE_BYTE
                error = InvalidCodepoint
            buffer.append(byte)

        return buffer, error
