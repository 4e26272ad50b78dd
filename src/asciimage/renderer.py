from __future__ import annotations

from collections.abc import Sequence

from asciimage.charsets import LINE_BREAKS
from asciimage.errors import AlignmentError
from asciimage.luminance import luminance, ramp_index
from asciimage.model import ColorSample, PixelGrid, RenderedCell
from asciimage.palette import Attribute, NamedColor, colour_ramp


def _pick(sample: ColorSample, ramp: tuple[NamedColor, ...]) -> NamedColor:
    return ramp[ramp_index(luminance(sample), len(ramp))]


def _split_rows(cells: list[RenderedCell], width: int) -> list[list[RenderedCell]]:
    return [cells[start : start + width] for start in range(0, len(cells), width)]


def render_blocks(grid: PixelGrid, colours: Sequence[NamedColor]) -> list[list[RenderedCell]]:
    """Render each pixel as a blank cell whose background is its ramp colour."""
    ramp = colour_ramp(colours)
    cells = [RenderedCell(" ", Attribute.background(_pick(sample, ramp))) for sample in grid.samples]
    return _split_rows(cells, grid.width)


def render_tinted(text: str, grid: PixelGrid, colours: Sequence[NamedColor]) -> list[list[RenderedCell]]:
    """Colour the glyphs of ``text`` with the ramp colour of their pixel.

    ``text`` is the output of ``render_glyphs`` for the same grid. Line breaks
    are skipped without consuming a pixel.
    """
    ramp = colour_ramp(colours)
    samples = grid.samples
    cells = []
    consumed = 0
    for glyph in text:
        if glyph in LINE_BREAKS:
            continue
        if consumed >= len(samples):
            raise AlignmentError(f"Text holds more glyphs than the {len(samples)} pixels of the image")
        cells.append(RenderedCell(glyph, Attribute.foreground(_pick(samples[consumed], ramp))))
        consumed += 1
    if consumed != len(samples):
        raise AlignmentError(f"Text covered {consumed} of {len(samples)} pixels")
    return _split_rows(cells, grid.width)
