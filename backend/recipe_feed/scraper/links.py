"""
Recipe link discovery on the menu listing page.
"""

from __future__ import annotations

import re
from typing import List, Optional

from bs4 import BeautifulSoup
from urllib.parse import urljoin

MENU_SEGMENT = "/menu/"
RECIPE_LINK_RE = re.compile(r"/menu/[^/?#]+")


def is_recipe_href(href: Optional[str]) -> bool:
    """Detail links carry at least one path segment after `/menu/`."""
    if not href or MENU_SEGMENT not in href:
        return False
    if href.endswith("/menu") or href.endswith("/menu/"):
        return False
    return bool(RECIPE_LINK_RE.search(href))


def discover_recipe_links(soup: BeautifulSoup, base_url: str) -> List[str]:
    """Absolute recipe URLs in first-seen order, without duplicates."""
    links: List[str] = []
    seen = set()
    for a in soup.select("a[href]"):
        href = a.get("href")
        if isinstance(href, list):
            href = href[0] if href else None
        href = href.strip() if href else None
        if not is_recipe_href(href):
            continue
        full_url = urljoin(base_url, href)
        if full_url not in seen:
            seen.add(full_url)
            links.append(full_url)
    return links
