from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from asciimage.charsets import DEFAULT_GLYPH_RAMP
from asciimage.glyphs import render_glyphs
from asciimage.model import PixelGrid, RenderedCell
from asciimage.palette import DEFAULT_COLOUR_RAMP, NamedColor
from asciimage.renderer import render_blocks, render_tinted
from asciimage.terminal import TerminalSink

log = logging.getLogger(__name__)


class Mode(Enum):
    ASCII = "ASCII"
    COLOR = "COLOR"
    ASCOL = "ASCOL"

    @classmethod
    def parse(cls, text: str) -> "Mode":
        try:
            return cls(text.upper())
        except ValueError:
            raise ValueError(f"Unknown mode {text!r}, expected one of {', '.join(m.value for m in cls)}") from None


@dataclass
class Rendering:
    mode: Mode
    text: str = ""  # ASCII mode only
    rows: list[list[RenderedCell]] = field(default_factory=list)  # COLOR and ASCOL


def render(
    grid: PixelGrid,
    mode: Mode,
    glyphs: str = DEFAULT_GLYPH_RAMP,
    colours: Sequence[NamedColor] = DEFAULT_COLOUR_RAMP,
) -> Rendering:
    log.debug("Rendering %dx%d image in %s mode", grid.width, grid.height, mode.value)
    if mode is Mode.ASCII:
        return Rendering(mode, text=render_glyphs(grid, glyphs))
    if mode is Mode.COLOR:
        return Rendering(mode, rows=render_blocks(grid, colours))
    text = render_glyphs(grid, glyphs)
    return Rendering(mode, rows=render_tinted(text, grid, colours))


def display(rendering: Rendering, sink: TerminalSink, per_cell: bool = False) -> None:
    if rendering.mode is Mode.ASCII:
        sink.write(rendering.text)
    elif per_cell:
        for y, row in enumerate(rendering.rows):
            if y:
                sink.write("\n")
            for cell in row:
                sink.put(cell.glyph, cell.attribute)
    else:
        for y, row in enumerate(rendering.rows):
            sink.write_row(y, row)
    sink.finish()
