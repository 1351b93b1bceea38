"""
Recipe detail page extraction.

Collects the raw material for one recipe: the JSON-LD Recipe node (if any)
and the DOM fallbacks used when the node is missing or incomplete. Every
fallback is an ordered chain of attempts; the first non-empty value wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional

from bs4 import BeautifulSoup

from recipe_feed.schemas.recipe import is_error_title
from recipe_feed.scraper.structured_data import extract_json_ld_blocks, find_recipe_node

PLACEHOLDER_TITLE = "Rezept"


def first_value(attempts: Iterable[Callable[[], Optional[str]]]) -> Optional[str]:
    """Run attempts in order, return the first non-empty string."""
    for attempt in attempts:
        value = attempt()
        if value:
            return value
    return None


def _coerce_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, list):
        if not value:
            return None
        value = value[0]
    if isinstance(value, dict):
        return None
    text = str(value).strip()
    return text or None


def _absolute_http(value: Optional[str]) -> Optional[str]:
    if value and value.startswith("http"):
        return value
    return None


def title_suffix_pattern(site_name: str) -> re.Pattern:
    return re.compile(r"\s+\|\s*" + re.escape(site_name) + r".*$", re.IGNORECASE)


@dataclass
class RecipePage:
    """Raw extraction result for one recipe URL."""

    url: str
    node: Optional[Dict[str, Any]] = None
    page_title: Optional[str] = None
    heading: Optional[str] = None
    og_image: Optional[str] = None
    img_src: Optional[str] = None
    img_data_src: Optional[str] = None
    img_srcset: Optional[str] = None

    @property
    def node_name(self) -> Optional[str]:
        if not self.node:
            return None
        return _coerce_str(self.node.get("name"))

    @property
    def title(self) -> str:
        return first_value(
            (
                lambda: self.node_name,
                lambda: self.page_title,
                lambda: self.heading,
            )
        ) or PLACEHOLDER_TITLE

    @property
    def is_error_page(self) -> bool:
        return is_error_title(self.title)

    def dom_image(self) -> Optional[str]:
        """Image from the page markup: og:image, then the first <img>."""
        return first_value(
            (
                lambda: _absolute_http(self.og_image),
                lambda: _absolute_http(self.img_src),
                lambda: _absolute_http(self.img_data_src),
                lambda: _absolute_http(_first_srcset_url(self.img_srcset)),
            )
        )


def _first_srcset_url(srcset: Optional[str]) -> Optional[str]:
    if not srcset or not srcset.strip():
        return None
    first = srcset.split(",")[0].strip()
    return first.split(" ")[0] if first else None


def _attr(el, name: str) -> Optional[str]:
    if el is None:
        return None
    return _coerce_str(el.get(name))


def extract_recipe_page(soup: BeautifulSoup, url: str, site_name: str = "Marley Spoon") -> RecipePage:
    """Pull the JSON-LD Recipe node and DOM fallbacks out of a rendered page."""
    blocks = extract_json_ld_blocks(soup)

    page_title = None
    if soup.title is not None:
        raw_title = soup.title.get_text(strip=True)
        page_title = title_suffix_pattern(site_name).sub("", raw_title).strip() or None

    heading = None
    h1 = soup.select_one("h1")
    if h1 is not None:
        heading = h1.get_text(" ", strip=True) or None

    img = soup.select_one("img")

    return RecipePage(
        url=url,
        node=find_recipe_node(blocks),
        page_title=page_title,
        heading=heading,
        og_image=_attr(soup.select_one('meta[property="og:image"]'), "content"),
        img_src=_attr(img, "src"),
        img_data_src=_attr(img, "data-src"),
        img_srcset=_attr(img, "srcset"),
    )
