VERSION = "1.2.0"

from charmap.bootstrap import bootstrap  # noqa: E402
from charmap.conversion import Converter  # noqa: E402
from charmap.exceptions import InvalidCodepoint, UnknownEncoding  # noqa: E402

# Every shipped encoding, registered before any conversion can run
default_converter = Converter(bootstrap())

encode = default_converter.encode
decode = default_converter.decode
encode_to_buffer = default_converter.encode_to_buffer
decode_to_buffer = default_converter.decode_to_buffer
list_encodings = default_converter.list_encodings

__all__ = [
    "VERSION",
    "Converter",
    "InvalidCodepoint",
    "UnknownEncoding",
    "bootstrap",
    "decode",
    "decode_to_buffer",
    "default_converter",
    "encode",
    "encode_to_buffer",
    "list_encodings",
]
