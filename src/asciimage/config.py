"""
Runtime defaults for asciimage, overridable from the environment.

    ASCIIMAGE_GLYPHS      default glyph ramp
    ASCIIMAGE_COLOURS     default colour ramp (digits 0-9A-F or a preset name)
    ASCIIMAGE_LOG_LEVEL   logging level name (default WARNING)
    ASCIIMAGE_LOG_FILE    optional rotating log file
    ASCIIMAGE_LOG_ROTATE_BYTES  size at which the log file rotates
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from asciimage.charsets import DEFAULT_GLYPH_RAMP

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _coerce_int(v, default: int, minimum: int = 0) -> int:
    try:
        return max(minimum, int(v))
    except (TypeError, ValueError):
        return default


def _coerce_level(v, default: str) -> str:
    if isinstance(v, str) and v.strip().upper() in _LEVELS:
        return v.strip().upper()
    return default


@dataclass
class Config:
    glyphs: str = DEFAULT_GLYPH_RAMP
    colours: str = "default"
    log_level: str = "WARNING"
    log_file: str | None = None
    rotate_bytes: int = 1024 * 1024
    rotate_keep: int = 3

    @classmethod
    def load(cls, environ: Mapping[str, str] | None = None) -> "Config":
        env = os.environ if environ is None else environ
        cfg = cls()
        # Empty values are ignored here; an empty ramp is only an error when typed on the command line
        if env.get("ASCIIMAGE_GLYPHS"):
            cfg.glyphs = env["ASCIIMAGE_GLYPHS"]
        if env.get("ASCIIMAGE_COLOURS"):
            cfg.colours = env["ASCIIMAGE_COLOURS"]
        cfg.log_level = _coerce_level(env.get("ASCIIMAGE_LOG_LEVEL"), cfg.log_level)
        cfg.log_file = env.get("ASCIIMAGE_LOG_FILE") or None
        cfg.rotate_bytes = _coerce_int(env.get("ASCIIMAGE_LOG_ROTATE_BYTES"), cfg.rotate_bytes, minimum=1)
        return cfg
