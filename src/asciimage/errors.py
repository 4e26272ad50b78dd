class AsciimageError(Exception):
    """Base class for every error raised by asciimage."""


class DecodeError(AsciimageError):
    """The image could not be loaded or its pixel buffer is malformed."""


class SinkInitError(AsciimageError):
    """The terminal output stream could not be acquired."""


class EmptyRampError(AsciimageError, ValueError):
    """A glyph or colour ramp has no entries."""


class InvalidRampError(AsciimageError, ValueError):
    """A ramp contains an entry that cannot be used."""


class AlignmentError(AsciimageError):
    """Glyph text and pixel data fell out of step while tinting."""
