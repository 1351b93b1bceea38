"""
Tests for the store audit script.
"""

import json

import audit_recipes


def _doc(slug, title="Rezept", **extra):
    doc = {
        "id": f"marleyspoon.de/menu/{slug}",
        "title": title,
        "url": f"https://marleyspoon.de/menu/{slug}",
        "image": "https://cdn/x.jpg",
        "tags": [],
        "totalTimeMinutes": 20,
        "ingredients": ["1 Ei"],
    }
    doc.update(extra)
    return doc


def test_audit_counts_problems():
    report = audit_recipes.audit(
        [
            _doc("a"),
            _doc("a"),
            _doc("b", title="Error: The request could not be satisfied", image=None),
            _doc("c", title=" ", ingredients=[]),
        ]
    )
    assert report["total_docs"] == 4
    assert report["duplicate_ids"] == 1
    assert report["duplicate_urls"] == 1
    assert report["error_titles"] == 1
    assert report["missing_title"] == 1
    assert report["missing_ingredients"] == 1
    assert report["missing_image"] == 1
    assert report["missing_time"] == 0


def test_main_exit_status(tmp_path, capsys):
    clean = tmp_path / "clean.json"
    clean.write_text(json.dumps([_doc("a"), _doc("b")]), encoding="utf-8")
    assert audit_recipes.main(["--input", str(clean)]) == 0
    assert json.loads(capsys.readouterr().out)["total_docs"] == 2

    dirty = tmp_path / "dirty.json"
    dirty.write_text(json.dumps([_doc("a"), _doc("a")]), encoding="utf-8")
    assert audit_recipes.main(["--input", str(dirty)]) == 1
