from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from asciimage.palette import Attribute


@dataclass(frozen=True)
class ColorSample:
    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} channel out of range: {value}")

    @property
    def max_value(self) -> int:
        return max(self.red, self.green, self.blue)

    @property
    def min_value(self) -> int:
        return min(self.red, self.green, self.blue)

    @property
    def average(self) -> float:
        return (self.red + self.green + self.blue) / 3.0


@dataclass(frozen=True)
class PixelGrid:
    """Row-major pixel samples of one decoded image.

    Index ``i`` of ``samples`` is row ``i // width``, column ``i % width``.
    """

    width: int
    height: int
    channels: int
    samples: tuple[ColorSample, ...]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid dimensions must be positive: {self.width}x{self.height}")
        if self.channels not in (3, 4):
            raise ValueError(f"Unsupported channel count: {self.channels}")
        if len(self.samples) != self.width * self.height:
            raise ValueError(f"Expected {self.width * self.height} samples, got {len(self.samples)}")

    def __len__(self) -> int:
        return len(self.samples)

    def sample_at(self, row: int, column: int) -> ColorSample:
        return self.samples[row * self.width + column]

    def rows(self) -> Iterator[Sequence[ColorSample]]:
        for start in range(0, len(self.samples), self.width):
            yield self.samples[start : start + self.width]


@dataclass(frozen=True)
class RenderedCell:
    glyph: str
    attribute: Attribute
