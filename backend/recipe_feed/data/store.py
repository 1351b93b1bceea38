"""
JSON recipe store.

The whole collection lives in one pretty-printed JSON array. It is read once
at the start of a run and rewritten wholesale at the end; the write goes
through a temporary file so a crash never leaves a half-written store.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Iterable, List, Set

from recipe_feed.schemas.recipe import RecipeRecord, is_error_title

logger = logging.getLogger(__name__)

StoredRecipe = Dict[str, Any]


def _is_valid_entry(record: Any) -> bool:
    if not isinstance(record, dict):
        return False
    title = record.get("title")
    return isinstance(title, str) and bool(title.strip()) and not is_error_title(title)


class RecipeStore:
    """Load, clean, merge and persist the recipe collection."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> List[StoredRecipe]:
        """Stored records, or an empty list if the file is missing or malformed."""
        if not self.path.exists():
            logger.info("No existing store at %s, starting empty", self.path)
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Unreadable store %s (%s), starting empty", self.path, exc)
            return []
        if not isinstance(data, list):
            logger.warning("Store %s is not a JSON array, starting empty", self.path)
            return []
        return [record for record in data if isinstance(record, dict)]

    @staticmethod
    def purge_error_pages(records: Iterable[StoredRecipe]) -> List[StoredRecipe]:
        """Drop entries without a usable title, including CDN error pages."""
        return [record for record in records if _is_valid_entry(record)]

    @staticmethod
    def known_ids(records: Iterable[StoredRecipe]) -> Set[str]:
        return {record["id"] for record in records if record.get("id")}

    @classmethod
    def merge(
        cls,
        existing: Iterable[StoredRecipe],
        scraped: Iterable[RecipeRecord],
    ) -> List[StoredRecipe]:
        """Existing records first, then new ones; first occurrence per url wins."""
        combined = cls.purge_error_pages(existing)
        combined.extend(cls.purge_error_pages(r.to_json_dict() for r in scraped))

        merged: List[StoredRecipe] = []
        seen_urls: Set[str] = set()
        seen_ids: Set[str] = set()
        for record in combined:
            url = record.get("url")
            if not url or url in seen_urls:
                continue
            # http and https variants of one page share an id
            record_id = record.get("id")
            if record_id and record_id in seen_ids:
                continue
            seen_urls.add(url)
            if record_id:
                seen_ids.add(record_id)
            merged.append(record)
        return merged

    def save(self, records: List[StoredRecipe]) -> None:
        """Replace the store contents atomically."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(records, ensure_ascii=False, indent=2)

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f_out:
                f_out.write(payload)
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
