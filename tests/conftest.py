import io

import pytest

from asciimage.model import ColorSample, PixelGrid
from asciimage.terminal import TerminalSink


def grey(value: int) -> ColorSample:
    return ColorSample(value, value, value)


def make_grid(values, width):
    """Build a grid of grey pixels from a flat list of luminance values."""
    samples = tuple(grey(v) for v in values)
    return PixelGrid(width=width, height=len(samples) // width, channels=3, samples=samples)


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def sink(stream):
    return TerminalSink(stream)
