from datetime import datetime
from typing import List, Optional, Sequence

from catalog_api.core.taxonomy import TaxonomyRegistry
from catalog_api.filtering.evaluator import apply_filters
from catalog_api.filtering.types import CatalogItem, FilterState, ListingPage, SortOrder


def _timestamp(value: Optional[str]) -> float:
    if not value:
        return 0.0
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).timestamp()
    except ValueError:
        return 0.0


def search_items(items: Sequence[CatalogItem], q: Optional[str]) -> List[CatalogItem]:
    """Substring match of ``q`` against title and slug, case-insensitive."""
    needle = (q or "").strip().casefold()
    if not needle:
        return list(items)
    return [item for item in items if needle in f"{item.title} {item.slug}".casefold()]


def sort_items(items: Sequence[CatalogItem], sort: SortOrder) -> List[CatalogItem]:
    if sort == "new":
        return sorted(items, key=lambda item: (-_timestamp(item.updated_at), item.title.casefold()))
    return sorted(items, key=lambda item: item.title.casefold())


def paginate(items: Sequence[CatalogItem], limit: int, offset: int) -> List[CatalogItem]:
    return list(items[offset:offset + limit])


def build_listing(items: Sequence[CatalogItem], state: FilterState, taxonomy: TaxonomyRegistry) -> ListingPage:
    matched = sort_items(search_items(apply_filters(items, state, taxonomy), state.q), state.sort)
    return ListingPage(
        items=paginate(matched, state.limit, state.offset),
        total=len(matched),
        limit=state.limit,
        offset=state.offset,
    )
