"""
Shared pytest fixtures.
"""

from __future__ import annotations

import json

import pytest

from recipe_feed.core.config import get_settings

GNOCCHI_NODE = {
    "@context": "https://schema.org",
    "@type": "Recipe",
    "name": "Ofen-Gnocchi mit Tomaten",
    "image": ["https://cdn.marleyspoon.com/gnocchi.jpg", "https://cdn.marleyspoon.com/gnocchi-2.jpg"],
    "recipeIngredient": [" 400 g Gnocchi ", "", "250 g Kirschtomaten", "   "],
    "totalTime": "PT35M",
    "nutrition": {"@type": "NutritionInformation", "calories": "640 kcal"},
    "recipeCategory": "Hauptgericht",
    "keywords": "Vegetarisch, Schnell",
    "recipeCuisine": ["Italienisch"],
    "suitableForDiet": ["https://schema.org/VegetarianDiet"],
}


@pytest.fixture
def gnocchi_node() -> dict:
    return json.loads(json.dumps(GNOCCHI_NODE))


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
