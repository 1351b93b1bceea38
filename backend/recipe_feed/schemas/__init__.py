"""
Recipe Feed Schemas
===================

Pydantic schemas for persisted data.

- RecipeRecord: canonical recipe as written to the JSON store
"""

from .recipe import RecipeRecord, is_error_title

__all__ = ["RecipeRecord", "is_error_title"]
