import logging

from construct import Adapter, Bytes, StringError

import charmap

logger = logging.getLogger("CHARMAP").getChild(__name__)


class LegacyString(Adapter):
    """Fixed width text field stored in a legacy 8-bit encoding.

    Parsing strips padding, turns embedded NULs into spaces and decodes.
    Building encodes and pads to the field width. Unmappable characters are
    substituted and logged, never fatal.
    """

    def __init__(
        self, length: int, encoding: str, pad=b"\x00", strip=b"\x00 ", converter=None
    ):
        super().__init__(Bytes(length))
        self.converter = converter or charmap.default_converter
        if self.converter.codec(encoding) is None:
            raise StringError("encoding {} is not supported".format(encoding))
        if len(pad) != 1:
            raise StringError("pad must be a single byte, got {!r}".format(pad))

        self.length = length
        self.encoding = encoding
        self.pad = pad
        self.strip = strip

    def _decode(self, obj, context, path):
        b_label = obj.strip(self.strip) if self.strip else obj
        b_label = b_label.replace(b"\0", b" ")

        label, error = self.converter.decode(b_label, self.encoding)
        if error is not None:
            logger.warning(
                "Unable to properly decode label %r using the %s encoding (%s)",
                b_label,
                self.encoding,
                error,
            )

        return label

    def _encode(self, obj, context, path):
        data, error = self.converter.encode(obj, self.encoding)
        if error is not None:
            logger.warning(
                "Unable to properly encode label %r using the %s encoding (%s)",
                obj,
                self.encoding,
                error,
            )

        if len(data) > self.length:
            raise StringError(
                "label {!r} needs {} bytes, field is {}".format(obj, len(data), self.length)
            )

        return data.ljust(self.length, self.pad)
