from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from asciimage.errors import EmptyRampError, InvalidRampError


class NamedColor(IntEnum):
    """The sixteen console colours, in console palette order."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    AQUA = 3
    RED = 4
    PURPLE = 5
    YELLOW = 6
    WHITE = 7
    GRAY = 8
    GREY = 8
    LIGHT_BLUE = 9
    LIGHT_GREEN = 10
    LIGHT_AQUA = 11
    LIGHT_RED = 12
    LIGHT_PURPLE = 13
    LIGHT_YELLOW = 14
    LIGHT_WHITE = 15


@dataclass(frozen=True)
class Attribute:
    """Foreground/background selection for a cell.

    A field set to ``None`` leaves that half of the current attribute
    unchanged when applied, and means "terminal default" when it describes
    the terminal's current state.
    """

    fore: NamedColor | None = None
    back: NamedColor | None = None

    @classmethod
    def foreground(cls, colour: NamedColor) -> "Attribute":
        return cls(fore=colour)

    @classmethod
    def background(cls, colour: NamedColor) -> "Attribute":
        return cls(back=colour)

    def merged_over(self, current: "Attribute") -> "Attribute":
        return Attribute(
            fore=current.fore if self.fore is None else self.fore,
            back=current.back if self.back is None else self.back,
        )


DEFAULT_COLOUR_RAMP = (
    NamedColor.BLACK,
    NamedColor.BLACK,
    NamedColor.GRAY,
    NamedColor.GRAY,
    NamedColor.BLUE,
    NamedColor.LIGHT_BLUE,
    NamedColor.AQUA,
    NamedColor.LIGHT_AQUA,
    NamedColor.WHITE,
    NamedColor.WHITE,
)

# Longer dark and bright tails, used by the cell-by-cell variant
SMOOTH_COLOUR_RAMP = (
    NamedColor.BLACK,
    NamedColor.BLACK,
    NamedColor.BLACK,
    NamedColor.GRAY,
    NamedColor.GRAY,
    NamedColor.BLUE,
    NamedColor.LIGHT_BLUE,
    NamedColor.AQUA,
    NamedColor.LIGHT_AQUA,
    NamedColor.WHITE,
    NamedColor.WHITE,
    NamedColor.WHITE,
)

COLOUR_RAMPS = {
    "default": DEFAULT_COLOUR_RAMP,
    "smooth": SMOOTH_COLOUR_RAMP,
}


def colour_ramp(colours: Sequence[NamedColor]) -> tuple[NamedColor, ...]:
    ramp = tuple(NamedColor(c) for c in colours)
    if not ramp:
        raise EmptyRampError("Colour ramp is empty")
    return ramp


def _digit_to_colour(char: str) -> NamedColor:
    if "0" <= char <= "9":
        return NamedColor(ord(char) - ord("0"))
    if "A" <= char <= "F":
        return NamedColor(ord(char) - ord("A") + 10)
    raise InvalidRampError(f"Invalid colour digit {char!r}, expected 0-9 or A-F")


def parse_colour_ramp(text: str) -> tuple[NamedColor, ...]:
    """Decode a palette string such as ``"0193BF"``, one colour per character.

    A preset name from ``COLOUR_RAMPS`` is accepted in place of digits.
    """
    if text in COLOUR_RAMPS:
        return COLOUR_RAMPS[text]
    if not text:
        raise EmptyRampError("Colour ramp is empty")
    return tuple(_digit_to_colour(char) for char in text)
