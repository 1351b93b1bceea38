"""
Audit Recipe Store
==================

Checks for:
- Duplicate ids / urls
- Error-page titles
- Empty titles
- Records without ingredients, image or time

This is used for repeatable quality checks after a scrape.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from recipe_feed.core.config import get_settings
from recipe_feed.schemas.recipe import is_error_title

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

BLOCKING_KEYS = ("duplicate_ids", "duplicate_urls", "error_titles", "missing_title")


def audit(docs: List[Dict[str, Any]]) -> Dict[str, Any]:
    ids: Dict[str, int] = {}
    urls: Dict[str, int] = {}
    report = {
        "total_docs": len(docs),
        "duplicate_ids": 0,
        "duplicate_urls": 0,
        "error_titles": 0,
        "missing_title": 0,
        "missing_ingredients": 0,
        "missing_image": 0,
        "missing_time": 0,
    }

    for d in docs:
        record_id = str(d.get("id") or "")
        url = str(d.get("url") or "")
        ids[record_id] = ids.get(record_id, 0) + 1
        urls[url] = urls.get(url, 0) + 1

        title = d.get("title") or ""
        if not str(title).strip():
            report["missing_title"] += 1
        elif is_error_title(title):
            report["error_titles"] += 1

        if not d.get("ingredients"):
            report["missing_ingredients"] += 1
        if not d.get("image"):
            report["missing_image"] += 1
        if d.get("totalTimeMinutes") is None:
            report["missing_time"] += 1

    report["duplicate_ids"] = sum(1 for k, c in ids.items() if k and c > 1)
    report["duplicate_urls"] = sum(1 for k, c in urls.items() if k and c > 1)
    return report


def main(argv=None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--input", default=None)
    args = parser.parse_args(argv)

    path = Path(args.input) if args.input else get_settings().output_path
    inp = (path if path.is_absolute() else (PROJECT_ROOT / path)).resolve()

    docs = json.loads(inp.read_text(encoding="utf-8"))
    if not isinstance(docs, list):
        raise ValueError("Expected list JSON")

    report = audit(docs)
    print(json.dumps(report, ensure_ascii=False, indent=2))
    return 1 if any(report[k] for k in BLOCKING_KEYS) else 0


if __name__ == "__main__":
    sys.exit(main())
