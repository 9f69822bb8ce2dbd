import codecs
import logging
import re
from encodings import normalize_encoding

from slugify import slugify

from charmap.codec import TableCodec

logger = logging.getLogger("CHARMAP").getChild(__name__)

DEFAULT_PREFIX = "charmap"


def codec_name(prefix: str, name: str) -> str:
    # ("charmap", "ISO-8859-2") -> "charmap-iso-8859-2"
    return "{}-{}".format(prefix.lower(), slugify(name))


def getregentry(codec: TableCodec, prefix: str = DEFAULT_PREFIX):

    decoding_table = codec.decoding_table
    encoding_table = dict(codec.encoding_map)


    class Codec(codecs.Codec):
        def encode(self, input, errors="strict"):
            return codecs.charmap_encode(input, errors, encoding_table)

        def decode(self, input, errors="strict"):
            return codecs.charmap_decode(input, errors, decoding_table)


    class IncrementalEncoder(codecs.IncrementalEncoder):
        def encode(self, input, final=False):
            return codecs.charmap_encode(input, self.errors, encoding_table)[0]


    class IncrementalDecoder(codecs.IncrementalDecoder):
        def decode(self, input, final=False):
            return codecs.charmap_decode(input, self.errors, decoding_table)[0]


    class StreamWriter(Codec, codecs.StreamWriter):
        pass


    class StreamReader(Codec, codecs.StreamReader):
        pass

    return codecs.CodecInfo(
        name=codec_name(prefix, codec.name),
        encode=Codec().encode,
        decode=Codec().decode,
        incrementalencoder=IncrementalEncoder,
        incrementaldecoder=IncrementalDecoder,
        streamreader=StreamReader,
        streamwriter=StreamWriter,
    )


def make_search_function(registry, prefix: str = DEFAULT_PREFIX):
    # Since 3.9 search functions get a lower case name with anything but letters,
    # digits and "." turned into "_", the prefix included
    name_re = re.compile(
        "^{}[-_](?P<encoding>.+)$".format(re.escape(normalize_encoding(prefix).lower()))
    )
    codec_cache = {}

    def charmap_codec_search(name: str):
        match = name_re.match(name.lower())
        if not match:
            return None

        encoding = registry.resolve(match.group("encoding"))
        info = codec_cache.get(encoding)
        if info is not None:
            return info

        codec = registry.lookup(encoding)
        if codec is None:
            return None

        info = codec_cache[encoding] = getregentry(codec, prefix)
        logger.debug(f"Loaded {info.name} encoding")
        return info

    return charmap_codec_search


def register_python_codecs(registry=None, prefix: str = DEFAULT_PREFIX):
    """
    Make registered encodings available to bytes.decode and str.encode

    :param registry: Frozen registry. The default converter's registry when None
    :param prefix: Codec name prefix, "charmap" gives "charmap-iso-8859-2"
    :return: Search function, to be passed to unregister_python_codecs
    """
    if registry is None:
        from charmap import default_converter

        registry = default_converter.registry

    search_function = make_search_function(registry, prefix)
    codecs.register(search_function)
    logger.debug("Registered %d encodings with the codecs module", len(registry))
    return search_function


def unregister_python_codecs(search_function) -> None:
    codecs.unregister(search_function)
