"""
Logging setup shared by the scraper scripts.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "recipe_feed"
LOG_FILE_NAME = "recipe_feed_scraper.log"


def configure_logging(log_dir: Path | None = None, debug: bool = False) -> logging.Logger:
    """Attach console and (optionally) file handlers to the package logger.

    Calling it again replaces the previous handlers, so scripts and tests can
    reconfigure freely.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.handlers.clear()

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(stream_handler)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"))
        logger.addHandler(file_handler)

    return logger
