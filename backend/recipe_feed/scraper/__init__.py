"""
Recipe Feed Scraper
===================

- links: recipe URL discovery on the menu page
- structured_data: JSON-LD parsing
- page_extractor: per-recipe extraction with DOM fallbacks
- menu_scraper: Playwright-driven scrape run
"""

from .links import discover_recipe_links
from .page_extractor import RecipePage, extract_recipe_page
from .structured_data import extract_json_ld_blocks, find_recipe_node

__all__ = [
    "discover_recipe_links",
    "RecipePage",
    "extract_recipe_page",
    "extract_json_ld_blocks",
    "find_recipe_node",
]
