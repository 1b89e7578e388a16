"""
Catalog item sources: the built-in list and a JSON file loader.
"""

from __future__ import annotations

import json
from pathlib import Path

from app.domain.product_images import CatalogItem

DEFAULT_CATALOG: tuple[CatalogItem, ...] = (
    CatalogItem(identifier="2212", display_name="JHN PREMIUM DOT 3 BRAKE FLUID"),
    CatalogItem(identifier="2224", display_name="JHN PREMIUM DOT 3 BRAKE FLUID"),
    CatalogItem(identifier="2232", display_name="JHN PREMIUM DOT 3 BRAKE FLUID"),
    CatalogItem(identifier="5012", display_name="JHN PREMIUM DOT 4 BRAKE FLUID"),
    CatalogItem(identifier="4641", display_name="JHN CARB CLEANER"),
)


def load_catalog_items(*, catalog_path: str | None = None) -> list[CatalogItem]:
    """
    Load catalog items from a JSON file, or return the built-in catalog.

    The file holds `{"items": [{"identifier": ..., "display_name": ...}]}`;
    entries without an identifier are skipped and order is preserved.
    """

    if not catalog_path:
        return list(DEFAULT_CATALOG)

    path = Path(catalog_path)
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    raw_data = json.loads(path.read_text(encoding="utf-8"))
    entries = raw_data.get("items", []) if isinstance(raw_data, dict) else raw_data
    if not isinstance(entries, list):
        raise ValueError("Invalid catalog file: 'items' must be a list.")

    items: list[CatalogItem] = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        identifier = str(entry.get("identifier") or entry.get("itemNumber") or "").strip()
        if not identifier:
            continue
        display_name = str(entry.get("display_name") or entry.get("name") or "").strip()
        items.append(CatalogItem(identifier=identifier, display_name=display_name))
    return items
