"""loguru configuration for the CLI."""

from __future__ import annotations

import os
import sys

from loguru import logger

_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
    "<level>{message}</level>"
)


def setup_logger(debug: bool = False) -> None:
    """Replace loguru's default sink with a single stderr sink.

    The level is DEBUG with *debug*, else ``VCSDIFF_LOG_LEVEL`` (default
    WARNING).
    """
    level = "DEBUG" if debug else os.getenv("VCSDIFF_LOG_LEVEL", "WARNING").upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=_FORMAT, catch=True)
