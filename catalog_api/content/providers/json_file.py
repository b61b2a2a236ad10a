import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from catalog_api.core.taxonomy import MULTI_DIMENSIONS, TaxonomyRegistry
from catalog_api.filtering.codec import as_value_list
from catalog_api.filtering.types import ITEM_FIELDS, CatalogImage, CatalogItem

logger = logging.getLogger(__name__)

CONTENT_PATH = Path(__file__).resolve().parent.parent.parent / "data" / "catalog.sample.json"


def pick_localized(value: Union[str, Mapping[str, str], None], locale: str, default_locale: str) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip() or None
    for candidate in (locale, default_locale, *value.keys()):
        text = value.get(candidate)
        if text and text.strip():
            return text.strip()
    return None


@lru_cache(maxsize=8)
def load_document(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


class JsonFileContentProvider:
    """Catalog entries from a JSON document with per-locale title/slug/excerpt."""

    def __init__(self, taxonomy: TaxonomyRegistry, path: Optional[str] = None) -> None:
        self.taxonomy = taxonomy
        self.path = str(path or CONTENT_PATH)
        # converted items per locale; the document itself is cached by load_document
        self._items: Dict[str, List[CatalogItem]] = {}

    def _known(self, dimension: str, values: Any, entry_id: str) -> tuple[str, ...]:
        allowed = self.taxonomy.values(dimension)
        out: list[str] = []
        for value in as_value_list(values):
            if value in allowed:
                if value not in out:
                    out.append(value)
            else:
                logger.warning("catalog entry %s: dropping unknown %s value %r", entry_id, dimension, value)
        return tuple(out)

    def _to_item(self, entry: Mapping[str, Any], locale: str) -> Optional[CatalogItem]:
        default_locale = self.taxonomy.default_locale
        entry_id = str(entry["id"])
        slug = pick_localized(entry.get("slug"), locale, default_locale)
        title = pick_localized(entry.get("title"), locale, default_locale)
        if not slug or not title:
            logger.warning("catalog entry %s has no slug/title for %s", entry_id, locale)
            return None

        category = entry.get("category")
        if category is not None and category not in self.taxonomy.values("category"):
            logger.warning("catalog entry %s: dropping unknown category %r", entry_id, category)
            category = None

        facets = {
            ITEM_FIELDS[d]: self._known(d, entry.get(ITEM_FIELDS[d]), entry_id) for d in MULTI_DIMENSIONS
        }
        image = entry.get("image")
        return CatalogItem(
            id=entry_id,
            slug=slug,
            title=title,
            category=category,
            excerpt=pick_localized(entry.get("excerpt"), locale, default_locale),
            image=CatalogImage(src=image["src"], width=image.get("width"), height=image.get("height")) if image else None,
            docs=entry.get("docs"),
            updated_at=entry.get("updated_at"),
            **facets,
        )

    def list_items(self, locale: str) -> List[CatalogItem]:
        if locale not in self._items:
            data = load_document(self.path)
            items: List[CatalogItem] = []
            for entry in data.get("items", []):
                if not entry.get("published", True):
                    continue
                item = self._to_item(entry, locale)
                if item is not None:
                    items.append(item)
            self._items[locale] = items
        return list(self._items[locale])

    def get_item(self, locale: str, slug: str) -> Optional[CatalogItem]:
        for item in self.list_items(locale):
            if item.slug == slug:
                return item
        return None
