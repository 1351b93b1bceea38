"""
Normalization of extracted recipe pages into canonical records.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional

from recipe_feed.schemas.recipe import RecipeRecord
from recipe_feed.scraper.page_extractor import RecipePage, first_value

logger = logging.getLogger(__name__)

DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?", re.IGNORECASE)
DURATION_FIELDS = ("totalTime", "cookTime", "prepTime")
TAG_FIELDS = ("recipeCategory", "keywords", "recipeCuisine", "suitableForDiet")
SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)


def parse_duration_minutes(value: Any) -> Optional[int]:
    """Minutes in an ISO-8601 `PT#H#M` duration, or None when it doesn't match.

    >>> parse_duration_minutes("PT1H15M")
    75
    """
    if not isinstance(value, str):
        return None
    match = DURATION_RE.search(value)
    if not match:
        return None
    hours = int(match.group(1)) if match.group(1) else 0
    minutes = int(match.group(2)) if match.group(2) else 0
    return hours * 60 + minutes


def extract_total_minutes(node: Optional[Dict[str, Any]]) -> Optional[int]:
    if not node:
        return None
    for key in DURATION_FIELDS:
        value = node.get(key)
        if value:
            return parse_duration_minutes(value)
    return None


def extract_calories(node: Optional[Dict[str, Any]]) -> Optional[str]:
    """`nutrition.calories` as free text, untouched."""
    if not node:
        return None
    nutrition = node.get("nutrition")
    if not isinstance(nutrition, dict):
        return None
    calories = nutrition.get("calories")
    if calories is None or calories == "":
        return None
    return str(calories)


def _flatten_tags(value: Any, out: List[str]) -> None:
    if isinstance(value, list):
        for item in value:
            _flatten_tags(item, out)
    elif isinstance(value, str):
        out.extend(part.strip() for part in value.split(","))


def collect_tags(*values: Any) -> List[str]:
    """Flatten strings, comma lists and nested lists into unique lowercase tags."""
    raw: List[str] = []
    for value in values:
        _flatten_tags(value, raw)

    tags: List[str] = []
    seen = set()
    for tag in raw:
        tag = tag.lower()
        if tag and tag not in seen:
            seen.add(tag)
            tags.append(tag)
    return tags


def clean_ingredients(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def _node_image(node: Optional[Dict[str, Any]]) -> Optional[str]:
    if not node:
        return None
    image = node.get("image")
    if isinstance(image, list):
        image = image[0] if image else None
    if isinstance(image, dict):
        image = image.get("url")
    if isinstance(image, str) and image.strip():
        return image.strip()
    return None


def resolve_image(page: RecipePage) -> Optional[str]:
    return first_value((lambda: _node_image(page.node), page.dom_image))


def derive_recipe_id(url: str) -> str:
    """`https://marleyspoon.de/menu/abc` -> `marleyspoon.de/menu/abc`."""
    return SCHEME_RE.sub("", url, count=1)


def build_record(page: RecipePage) -> Optional[RecipeRecord]:
    """Canonical record for a page, or None for the CDN error page."""
    if page.is_error_page:
        logger.debug("Discarding error page: %s", page.url)
        return None

    node = page.node or {}
    return RecipeRecord(
        id=derive_recipe_id(page.url),
        title=page.title,
        url=page.url,
        image=resolve_image(page),
        tags=collect_tags(*(node.get(key) for key in TAG_FIELDS)),
        total_time_minutes=extract_total_minutes(node),
        calories=extract_calories(node),
        ingredients=clean_ingredients(node.get("recipeIngredient")),
    )
