from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from asciimage.errors import DecodeError
from asciimage.model import ColorSample, PixelGrid

log = logging.getLogger(__name__)

_MODES = {3: "RGB", 4: "RGBA"}

# Single-channel modes holding more than 8 bits per sample
_WIDE_MODES = ("I", "I;16", "I;16L", "I;16B", "I;16N")


@dataclass(frozen=True)
class DecodedImage:
    width: int
    height: int
    channels: int
    data: bytes


def _narrow(image: Image.Image) -> Image.Image:
    """Reduce a 16-bit greyscale image to 8 bits by keeping the high byte."""
    wide = np.clip(np.asarray(image, dtype=np.int64), 0, 65535)
    return Image.fromarray((wide >> 8).astype(np.uint8), "L")


def decode_image(path: str | Path, channels: int = 3) -> DecodedImage:
    """Decode an image file into an interleaved 8-bit buffer.

    ``channels`` selects RGB (3) or RGBA (4); anything else falls back to 3.
    """
    if channels not in _MODES:
        log.debug("Unsupported channel request %r, using 3", channels)
        channels = 3
    path = Path(path)
    try:
        with Image.open(path) as image:
            if image.mode in _WIDE_MODES:
                image = _narrow(image)
            image = image.convert(_MODES[channels])
            width, height = image.size
            data = image.tobytes()
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"Failed to read image {path}: {exc}") from exc
    log.debug("Decoded %s: %dx%d, %d channels", path, width, height, channels)
    return DecodedImage(width=width, height=height, channels=channels, data=data)


def rasterize(data: bytes, width: int, height: int, channels: int) -> PixelGrid:
    """Split an interleaved pixel buffer into row-major colour samples."""
    if width <= 0 or height <= 0:
        raise DecodeError(f"Image dimensions must be positive: {width}x{height}")
    if channels not in _MODES:
        raise DecodeError(f"Unsupported channel count: {channels}")
    expected = width * height * channels
    if len(data) != expected:
        raise DecodeError(f"Pixel buffer holds {len(data)} bytes, expected {expected}")

    pixels = np.frombuffer(data, dtype=np.uint8).reshape(width * height, channels)
    if channels == 3:
        alpha = np.full((width * height, 1), 255, dtype=np.uint8)
        pixels = np.concatenate([pixels, alpha], axis=1)

    # Identical pixels share one sample
    packed = np.ascontiguousarray(pixels).view(np.uint32).ravel()
    _, first, inverse = np.unique(packed, return_index=True, return_inverse=True)
    palette = [ColorSample(r, g, b, a) for r, g, b, a in pixels[first].tolist()]
    samples = tuple(map(palette.__getitem__, inverse.ravel().tolist()))
    return PixelGrid(width=width, height=height, channels=channels, samples=samples)


def load_grid(path: str | Path, channels: int = 3) -> PixelGrid:
    decoded = decode_image(path, channels)
    return rasterize(decoded.data, decoded.width, decoded.height, decoded.channels)
