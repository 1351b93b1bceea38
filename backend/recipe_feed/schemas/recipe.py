"""
Canonical Recipe Record
=======================

One element of the persisted `recipes.json` array. The JSON keys are the
contract with the front-end, so field aliases keep its camelCase names
(`totalTimeMinutes`) while Python code uses snake_case.

Invariants enforced here:
- `title` is never empty
- `tags` are lowercase, non-empty and unique
- `ingredients` contain no empty lines
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ERROR_TITLE_MARKERS = ("error", "request could not be satisfied")


def is_error_title(title: Any) -> bool:
    """True for the CDN error page title ("Error: The request could not be satisfied")."""
    if not isinstance(title, str):
        return False
    lowered = title.lower()
    return all(marker in lowered for marker in ERROR_TITLE_MARKERS)


class RecipeRecord(BaseModel):
    """Canonical recipe document."""

    model_config = ConfigDict(populate_by_name=True)

    # Identity
    id: str = Field(min_length=1)
    title: str = Field(min_length=1)
    url: str = Field(min_length=1)

    # Media
    image: Optional[str] = None

    # Metadata
    tags: List[str] = Field(default_factory=list)
    total_time_minutes: Optional[int] = Field(default=None, ge=0, alias="totalTimeMinutes")
    calories: Optional[str] = None
    ingredients: List[str] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def _strip_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be blank")
        return value

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, value: List[str]) -> List[str]:
        seen = set()
        tags = []
        for tag in value:
            tag = tag.strip().lower()
            if tag and tag not in seen:
                seen.add(tag)
                tags.append(tag)
        return tags

    @field_validator("ingredients")
    @classmethod
    def _drop_blank_ingredients(cls, value: List[str]) -> List[str]:
        return [line.strip() for line in value if line.strip()]

    def to_json_dict(self) -> Dict[str, Any]:
        """Serialize with the store's key names.

        `image` is always written (null when missing); `totalTimeMinutes` and
        `calories` are left out when unknown.
        """
        data = self.model_dump(by_alias=True)
        for key in ("totalTimeMinutes", "calories"):
            if data.get(key) is None:
                data.pop(key, None)
        return data
