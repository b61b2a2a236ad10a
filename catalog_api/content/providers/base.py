from typing import List, Optional, Protocol
from catalog_api.filtering.types import CatalogItem


class ContentProvider(Protocol):
    def list_items(self, locale: str) -> List[CatalogItem]:
        ...

    def get_item(self, locale: str, slug: str) -> Optional[CatalogItem]:
        ...
