from enum import Enum


class AsciiArtError(Exception):
    """Base class for errors raised by the conversion core."""


class EmptyIndexError(AsciiArtError, LookupError):
    """A glyph lookup was attempted on an index with no active glyphs."""


class InvalidPartitionError(AsciiArtError, ValueError):
    """The resolution does not split the padded image into equal square blocks."""


class ErrorKind(Enum):
    """User-facing failures reported by shell commands. The value is the message shown."""

    INCORRECT_COMMAND = "Did not execute due to incorrect command."
    ADD_FORMAT = "Did not add due to incorrect format."
    REMOVE_FORMAT = "Did not remove due to incorrect format."
    RES_FORMAT = "Did not change resolution due to incorrect format."
    RES_OUT_OF_BOUNDS = "Did not change resolution due to exceeding boundaries."
    IMAGE_FORMAT = "Did not change image method due to incorrect format."
    IMAGE_LOAD = "Did not execute due to problem with image file."
    OUTPUT_FORMAT = "Did not change output method due to incorrect format."
    OUTPUT_WRITE = "Did not execute due to problem with output destination."
    CHARSET_TOO_SMALL = "Did not execute. Charset is too small."
    NO_IMAGE = "Did not execute. No image loaded."
    INVALID_PARTITION = "Did not execute. Resolution does not divide the image evenly."

    @property
    def message(self) -> str:
        return self.value
