"""Logging setup shared by the command line and the interactive app."""

from __future__ import annotations

import logging
import os

LOG_LEVEL = os.getenv("DECKDRAW_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Call once at program start."""

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )
