from __future__ import annotations

import os
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from itertools import groupby
from typing import TextIO

from asciimage.errors import SinkInitError
from asciimage.model import RenderedCell
from asciimage.palette import Attribute, NamedColor

CSI = "\033["
RESET = f"{CSI}0m"

# SGR foreground codes; backgrounds are these plus 10
_FORE_CODES = {
    NamedColor.BLACK: 30,
    NamedColor.BLUE: 34,
    NamedColor.GREEN: 32,
    NamedColor.AQUA: 36,
    NamedColor.RED: 31,
    NamedColor.PURPLE: 35,
    NamedColor.YELLOW: 33,
    NamedColor.WHITE: 37,
    NamedColor.GRAY: 90,
    NamedColor.LIGHT_BLUE: 94,
    NamedColor.LIGHT_GREEN: 92,
    NamedColor.LIGHT_AQUA: 96,
    NamedColor.LIGHT_RED: 91,
    NamedColor.LIGHT_PURPLE: 95,
    NamedColor.LIGHT_YELLOW: 93,
    NamedColor.LIGHT_WHITE: 97,
}


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal, or (80, 24) if not a tty."""
    if not sys.stdout.isatty():
        return (80, 24)
    size = os.get_terminal_size()
    return (size.columns, size.lines)


def sgr(attribute: Attribute) -> str:
    """Escape sequence that puts the terminal into exactly ``attribute``."""
    codes = ["0"]
    if attribute.fore is not None:
        codes.append(str(_FORE_CODES[attribute.fore]))
    if attribute.back is not None:
        codes.append(str(_FORE_CODES[attribute.back] + 10))
    return f"{CSI}{';'.join(codes)}m"


class TerminalSink:
    """Writes text and coloured cells to an ANSI terminal stream."""

    def __init__(self, stream: TextIO):
        self.stream = stream
        self._attribute = Attribute()

    @classmethod
    def open(cls, stream: TextIO | None = None) -> "TerminalSink":
        if stream is None:
            stream = sys.stdout
        if stream is None or getattr(stream, "closed", False):
            raise SinkInitError("No usable output stream")
        return cls(stream)

    @property
    def attribute(self) -> Attribute:
        return self._attribute

    @attribute.setter
    def attribute(self, value: Attribute) -> None:
        if value != self._attribute:
            self.stream.write(sgr(value))
            self._attribute = value

    @contextmanager
    def colours(self, selection: Attribute) -> Iterator[None]:
        saved = self.attribute
        self.attribute = selection.merged_over(saved)
        try:
            yield
        finally:
            self.attribute = saved

    def write(self, text: str) -> None:
        self.stream.write(text)

    def put(self, glyph: str, selection: Attribute) -> None:
        with self.colours(selection):
            self.stream.write(glyph)

    def write_row(self, row: int, cells: Sequence[RenderedCell]) -> None:
        if row > 0:
            self.stream.write("\n")
        for attribute, run in groupby(cells, key=lambda cell: cell.attribute):
            with self.colours(attribute):
                self.stream.write("".join(cell.glyph for cell in run))

    def finish(self) -> None:
        self.attribute = Attribute()
        self.stream.write("\n")
        self.stream.flush()
