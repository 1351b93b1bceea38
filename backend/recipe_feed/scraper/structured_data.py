"""
JSON-LD (schema.org) helpers.

Pages embed one or more `<script type="application/ld+json">` blocks. A block
can be the Recipe itself, a list of nodes, or a document with an `@graph`.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterator, List, Optional

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

RECIPE_TYPE = "Recipe"


def extract_json_ld_blocks(soup: BeautifulSoup) -> List[Any]:
    """Parsed JSON-LD blocks in document order; unparsable blocks are dropped."""
    blocks: List[Any] = []
    for script in soup.select('script[type="application/ld+json"]'):
        text = script.string or script.get_text()
        if not text or not text.strip():
            continue
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError:
            logger.debug("Skipping malformed JSON-LD block")
            continue
        if parsed:
            blocks.append(parsed)
    return blocks


def has_type(node: Any, type_name: str) -> bool:
    if not isinstance(node, dict):
        return False
    node_type = node.get("@type")
    if isinstance(node_type, list):
        return type_name in node_type
    return node_type == type_name


def _candidates(block: Any) -> Iterator[Dict[str, Any]]:
    if isinstance(block, list):
        for item in block:
            if isinstance(item, dict):
                yield item
        return
    if not isinstance(block, dict):
        return
    graph = block.get("@graph")
    if isinstance(graph, list):
        for item in graph:
            if isinstance(item, dict):
                yield item
    else:
        yield block


def find_recipe_node(blocks: List[Any]) -> Optional[Dict[str, Any]]:
    """First Recipe node, searching blocks in order then one level of nesting."""
    for block in blocks:
        for node in _candidates(block):
            if has_type(node, RECIPE_TYPE):
                return node
    return None
