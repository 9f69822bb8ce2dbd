class CharmapException(Exception):
    pass


class ConfigurationError(CharmapException):
    pass


class RegistryError(CharmapException):
    pass


class EncodingConflict(RegistryError):
    pass


class RegistryFrozen(RegistryError):
    pass


# Conversion errors below are returned alongside a result, not raised.
class ConversionError(CharmapException):
    pass


class UnknownEncodingError(ConversionError, LookupError):
    pass


class InvalidCodepointError(ConversionError, ValueError):
    pass


UnknownEncoding = UnknownEncodingError("encoding is not supported")
InvalidCodepoint = InvalidCodepointError("cannot convert one or more codepoints")
