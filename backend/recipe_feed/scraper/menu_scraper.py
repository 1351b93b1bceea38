"""
Marley Spoon Menu Scraper (Playwright)
======================================

Opens the weekly menu, collects the recipe detail links, visits each one in
turn and merges the resulting records into the JSON store.

Recipe pages are fetched sequentially on a single browser page. A failure on
one recipe (timeout, broken markup, invalid record) is logged and skipped;
only a failure to start the browser or load the menu aborts the run, in which
case the store is left untouched.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Set

from bs4 import BeautifulSoup
from playwright.async_api import async_playwright, TimeoutError as PlaywrightTimeoutError
from tqdm import tqdm

from recipe_feed.core.config import Settings
from recipe_feed.data.normalizer import build_record, derive_recipe_id
from recipe_feed.data.store import RecipeStore
from recipe_feed.schemas.recipe import RecipeRecord
from recipe_feed.scraper.links import discover_recipe_links
from recipe_feed.scraper.page_extractor import extract_recipe_page

logger = logging.getLogger(__name__)


@dataclass
class ScrapeSummary:
    candidates: int = 0
    skipped_known: int = 0
    scraped: int = 0
    discarded: int = 0
    failed: int = 0
    saved: int = 0


class MenuScraper:
    def __init__(
        self,
        settings: Settings,
        output_path: Optional[Path] = None,
        incremental: Optional[bool] = None,
        max_recipes: Optional[int] = None,
        headless: Optional[bool] = None,
    ) -> None:
        self.settings = settings
        self.store = RecipeStore(output_path or settings.output_path)
        self.incremental = settings.incremental if incremental is None else incremental
        self.max_recipes = max_recipes or settings.max_recipes
        self.headless = settings.headless if headless is None else headless
        self.summary = ScrapeSummary()

    async def run(self) -> ScrapeSummary:
        existing = self.store.purge_error_pages(self.store.load())
        known_ids = self.store.known_ids(existing) if self.incremental else set()

        logger.info("Starting scrape")
        logger.info(f"Output: {self.store.path}")
        if self.incremental:
            logger.info(f"Incremental mode: {len(known_ids)} known recipes")

        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=self.headless)
            try:
                context = await browser.new_context(
                    user_agent=self.settings.user_agent,
                    locale=self.settings.locale,
                )
                page = await context.new_page()

                logger.info(f"Opening menu: {self.settings.menu_url}")
                html = await self._fetch_html(page, self.settings.menu_url, self.settings.listing_settle_ms)
                recipe_urls = discover_recipe_links(BeautifulSoup(html, "lxml"), self.settings.base_url)
                self.summary.candidates = len(recipe_urls)
                logger.info(f"Found ~{len(recipe_urls)} candidate recipe links.")

                recipes = await self._scrape_recipes(page, recipe_urls, known_ids)
                await context.close()
            finally:
                await browser.close()

        merged = self.store.merge(existing, recipes)
        self.store.save(merged)
        self.summary.saved = len(merged)
        logger.info(f"Saved {len(merged)} recipes to {self.store.path}")
        return self.summary

    async def _scrape_recipes(self, page, recipe_urls: List[str], known_ids: Set[str]) -> List[RecipeRecord]:
        to_scrape = [u for u in recipe_urls if derive_recipe_id(u) not in known_ids]
        self.summary.skipped_known = len(recipe_urls) - len(to_scrape)
        if self.summary.skipped_known:
            logger.info(f"Skipping {self.summary.skipped_known} already stored recipes")
        if self.max_recipes:
            to_scrape = to_scrape[: self.max_recipes]
        if not to_scrape:
            logger.info("No new recipes to scrape.")
            return []

        recipes: List[RecipeRecord] = []
        for url in tqdm(to_scrape, desc="Recipes", unit="recipe"):
            try:
                html = await self._fetch_html(page, url, self.settings.recipe_settle_ms)
                record = self._parse_recipe(url, html)
            except PlaywrightTimeoutError:
                self.summary.failed += 1
                logger.warning(f"Timeout: {url}")
                continue
            except Exception as exc:
                self.summary.failed += 1
                logger.warning(f"Failed recipe: {url} ({exc})")
                continue

            if record is None:
                self.summary.discarded += 1
                continue
            recipes.append(record)
            self.summary.scraped += 1

        return recipes

    def _parse_recipe(self, url: str, html: str) -> Optional[RecipeRecord]:
        soup = BeautifulSoup(html, "lxml")
        recipe_page = extract_recipe_page(soup, url, site_name=self.settings.site_name)
        return build_record(recipe_page)

    async def _fetch_html(self, page, url: str, settle_ms: int) -> str:
        await page.goto(url, wait_until="domcontentloaded", timeout=self.settings.navigation_timeout_ms)
        if settle_ms:
            await asyncio.sleep(settle_ms / 1000)
        return await page.content()
