"""
Tests for scraper logging setup.
"""

import logging

from recipe_feed.core.log_setup import LOG_FILE_NAME, configure_logging


def test_configure_logging_writes_package_records_to_file(tmp_path):
    logger = configure_logging(tmp_path / "logs", debug=True)
    logging.getLogger("recipe_feed.scraper.menu_scraper").warning("Failed recipe: %s", "https://x/menu/a")
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.DEBUG
    text = (tmp_path / "logs" / LOG_FILE_NAME).read_text(encoding="utf-8")
    assert "WARNING | Failed recipe: https://x/menu/a" in text

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


def test_reconfiguring_replaces_handlers():
    configure_logging()
    logger = configure_logging()
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
    logger.handlers.clear()
