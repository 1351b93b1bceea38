#!/usr/bin/env python
"""
Marley Spoon Menu Scraper (Playwright)
======================================

Scrape the current Marley Spoon menu and merge the recipes into the JSON store
served at /api/recipes.

Install dependencies:
    pip install -e .
    python -m playwright install chromium

Usage:
    python backend/scripts/scrape_marley_spoon.py
    python backend/scripts/scrape_marley_spoon.py --max-recipes 20
    python backend/scripts/scrape_marley_spoon.py --output data/recipes.json --full-refresh
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from recipe_feed.core.config import get_settings
from recipe_feed.core.log_setup import configure_logging
from recipe_feed.scraper.menu_scraper import MenuScraper

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Scrape the Marley Spoon menu (Playwright)")
    parser.add_argument("--output", "-o", default=None, help="Output JSON path (default from settings)")
    parser.add_argument("--max-recipes", type=int, default=None, help="Limit number of recipe pages visited")
    parser.add_argument(
        "--full-refresh",
        action="store_true",
        help="Re-scrape recipes already in the store (stored versions still win on merge)",
    )
    parser.add_argument("--headful", action="store_true", help="Run browser in visible mode")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser.parse_args(argv)


def _resolve(path: Path) -> Path:
    return path if path.is_absolute() else PROJECT_ROOT / path


async def main(argv=None) -> int:
    args = parse_args(argv)
    settings = get_settings()

    output_path = _resolve(Path(args.output) if args.output else settings.output_path)
    logger = configure_logging(_resolve(settings.log_dir), debug=args.debug or settings.debug)

    scraper = MenuScraper(
        settings,
        output_path=output_path,
        incremental=False if args.full_refresh else None,
        max_recipes=args.max_recipes,
        headless=False if args.headful else None,
    )
    try:
        summary = await scraper.run()
    except Exception:
        logger.exception("Scrape aborted, store left unchanged")
        return 1

    logger.info(
        f"Done: {summary.scraped} scraped, {summary.skipped_known} already known, "
        f"{summary.failed} failed, {summary.discarded} error pages discarded"
    )
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
