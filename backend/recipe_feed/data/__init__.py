"""
Recipe Feed Data Layer
======================

- normalizer: raw page → canonical RecipeRecord
- store: JSON store load / purge / merge / save
"""

from .normalizer import build_record, derive_recipe_id, parse_duration_minutes
from .store import RecipeStore

__all__ = ["build_record", "derive_recipe_id", "parse_duration_minutes", "RecipeStore"]
