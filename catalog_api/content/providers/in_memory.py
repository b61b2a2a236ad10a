from typing import Dict, Iterable, List, Optional
from catalog_api.filtering.types import CatalogItem


class InMemoryContentProvider:
    def __init__(self, items: Optional[Dict[str, Iterable[CatalogItem]]] = None) -> None:
        self._items: Dict[str, List[CatalogItem]] = {k: list(v) for k, v in (items or {}).items()}

    def upsert(self, locale: str, items: Iterable[CatalogItem]) -> None:
        self._items[locale] = list(items)

    def list_items(self, locale: str) -> List[CatalogItem]:
        return list(self._items.get(locale, []))

    def get_item(self, locale: str, slug: str) -> Optional[CatalogItem]:
        for item in self._items.get(locale, []):
            if item.slug == slug:
                return item
        return None
