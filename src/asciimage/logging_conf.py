"""Logging setup: stderr always, plus an optional rotating file."""

import logging
from logging.handlers import RotatingFileHandler

from asciimage.config import Config

FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(cfg: Config) -> None:
    level = getattr(logging, cfg.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=FORMAT)

    if cfg.log_file:
        handler = RotatingFileHandler(
            cfg.log_file,
            maxBytes=cfg.rotate_bytes,
            backupCount=cfg.rotate_keep,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(FORMAT))
        logging.getLogger().addHandler(handler)
