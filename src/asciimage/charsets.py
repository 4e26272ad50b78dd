from asciimage.errors import EmptyRampError, InvalidRampError

DEFAULT_GLYPH_RAMP = " ._-3#@"

LINE_BREAKS = "\n\r"


def glyph_ramp(text: str) -> str:
    """Validate a glyph ramp, darkest glyph first."""
    if not text:
        raise EmptyRampError("Glyph ramp is empty")
    for char in LINE_BREAKS:
        if char in text:
            raise InvalidRampError(f"Glyph ramp may not contain {char!r}")
    return text
