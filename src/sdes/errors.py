class SDESError(ValueError):
    """Base class for every error raised by the sdes package."""


class InvalidTableIndex(SDESError):
    """A permutation table references a position outside its input."""


class LengthMismatch(SDESError):
    """A bit vector does not have the length its role requires."""


class MalformedBitInput(SDESError):
    """A key, plaintext or bit vector holds values other than 0 and 1."""


class TableFormatError(SDESError):
    """A permutation table file line could not be parsed."""


class InputFormatError(SDESError):
    """The key/plaintext input file is missing a required field."""
