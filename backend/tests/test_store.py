"""
Tests for the JSON recipe store: fail-open loading, purge, merge, save.
"""

import json
from pathlib import Path

from recipe_feed.data.store import RecipeStore
from recipe_feed.schemas.recipe import RecipeRecord

ERROR_TITLE = "Error: The request could not be satisfied"


def _stored(slug: str, title: str = "Rezept", **extra) -> dict:
    record = {
        "id": f"marleyspoon.de/menu/{slug}",
        "title": title,
        "url": f"https://marleyspoon.de/menu/{slug}",
        "image": None,
        "tags": [],
        "ingredients": [],
    }
    record.update(extra)
    return record


def _scraped(slug: str, title: str = "Neu") -> RecipeRecord:
    return RecipeRecord(
        id=f"marleyspoon.de/menu/{slug}",
        title=title,
        url=f"https://marleyspoon.de/menu/{slug}",
    )


def test_missing_store_loads_empty(tmp_path: Path):
    assert RecipeStore(tmp_path / "recipes.json").load() == []


def test_malformed_store_loads_empty(tmp_path: Path):
    path = tmp_path / "recipes.json"
    path.write_text("{ not json", encoding="utf-8")
    assert RecipeStore(path).load() == []

    path.write_text(json.dumps({"recipes": []}), encoding="utf-8")
    assert RecipeStore(path).load() == []


def test_load_drops_non_object_entries(tmp_path: Path):
    path = tmp_path / "recipes.json"
    path.write_text(json.dumps([_stored("a"), "junk", None, 3]), encoding="utf-8")
    assert RecipeStore(path).load() == [_stored("a")]


def test_purge_removes_error_pages_and_untitled_entries():
    records = [_stored("a"), _stored("b", title=ERROR_TITLE), _stored("c", title=""), {"url": "x"}]
    assert RecipeStore.purge_error_pages(records) == [_stored("a")]


def test_merge_keeps_earlier_record_per_url():
    existing = [_stored("a", title="Alt")]
    merged = RecipeStore.merge(existing, [_scraped("a", title="Neu"), _scraped("b")])

    assert [r["title"] for r in merged] == ["Alt", "Neu"]
    assert [r["url"] for r in merged] == [
        "https://marleyspoon.de/menu/a",
        "https://marleyspoon.de/menu/b",
    ]


def test_merge_never_outputs_error_pages():
    existing = [_stored("a", title=ERROR_TITLE)]
    merged = RecipeStore.merge(existing, [_scraped("b", title=ERROR_TITLE.upper())])
    assert merged == []


def test_merge_keeps_ids_unique_across_schemes():
    existing = [_stored("a", url="http://marleyspoon.de/menu/a")]
    merged = RecipeStore.merge(existing, [_scraped("a")])
    assert len(merged) == 1
    assert merged[0]["url"] == "http://marleyspoon.de/menu/a"


def test_known_ids():
    assert RecipeStore.known_ids([_stored("a"), {"title": "x"}]) == {"marleyspoon.de/menu/a"}


def test_save_then_load_round_trips_in_order(tmp_path: Path):
    store = RecipeStore(tmp_path / "nested" / "recipes.json")
    records = [
        _stored("b", title="Käsespätzle", totalTimeMinutes=30, calories="800 kcal"),
        _stored("a", tags=["schnell"], ingredients=["1 Ei"]),
    ]
    store.save(records)

    assert store.load() == records
    text = store.path.read_text(encoding="utf-8")
    assert "Käsespätzle" in text
    assert text.startswith("[\n  {")


def test_save_replaces_contents_and_leaves_no_temp_files(tmp_path: Path):
    store = RecipeStore(tmp_path / "recipes.json")
    store.save([_stored("a"), _stored("b")])
    store.save([_stored("c")])

    assert store.load() == [_stored("c")]
    assert [p.name for p in tmp_path.iterdir()] == ["recipes.json"]
