from asciimage.charsets import DEFAULT_GLYPH_RAMP, glyph_ramp
from asciimage.luminance import luminance, ramp_index
from asciimage.model import PixelGrid


def render_glyphs(grid: PixelGrid, ramp: str = DEFAULT_GLYPH_RAMP) -> str:
    """Render a grid as text, one glyph per pixel and a line break between rows."""
    ramp = glyph_ramp(ramp)
    length = len(ramp)
    out = []
    for i, sample in enumerate(grid.samples):
        if i and i % grid.width == 0:
            out.append("\n")
        out.append(ramp[ramp_index(luminance(sample), length)])
    return "".join(out)
