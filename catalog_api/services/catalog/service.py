import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, List, Mapping, Optional

from catalog_api.content.providers import ContentProvider, InMemoryContentProvider, JsonFileContentProvider
from catalog_api.core.config import settings
from catalog_api.core.taxonomy import TaxonomyRegistry, get_registry
from catalog_api.filtering.chips import build_chips, reset_href
from catalog_api.filtering.codec import build_href, parse_filters, parse_view, serialize_filters
from catalog_api.filtering.facets import build_facets
from catalog_api.filtering.types import CatalogItem, CatalogView, FilterChip, FilterState, ListingPage, Pill
from catalog_api.services.catalog.listing import build_listing

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogPage:
    state: FilterState
    view: CatalogView
    listing: ListingPage
    facets: Dict[str, List[Pill]] = field(default_factory=dict)
    chips: List[FilterChip] = field(default_factory=list)
    canonical: str = ""
    reset_href: str = ""
    next_href: Optional[str] = None
    prev_href: Optional[str] = None


@lru_cache(maxsize=4)
def default_provider(taxonomy: TaxonomyRegistry) -> ContentProvider:
    """The process-wide provider picked by ``CONTENT_PROVIDER``."""
    if settings.CONTENT_PROVIDER == "memory":
        return InMemoryContentProvider()
    return JsonFileContentProvider(taxonomy, settings.CATALOG_CONTENT_PATH)


class CatalogService:
    def __init__(self, taxonomy: TaxonomyRegistry | None = None, provider: ContentProvider | None = None) -> None:
        self.taxonomy = taxonomy or get_registry()
        self.provider = provider if provider is not None else default_provider(self.taxonomy)

    def list_items(self, locale: str) -> List[CatalogItem]:
        return self.provider.list_items(locale)

    def get_item(self, locale: str, slug: str) -> Optional[CatalogItem]:
        return self.provider.get_item(locale, slug)

    def _href(self, path: str, state: FilterState, view: CatalogView) -> str:
        params = serialize_filters(
            state,
            auxiliary_category=self.taxonomy.auxiliary_category_value(),
            view=view,
            include_pagination=True,
        )
        return build_href(path, params)

    def browse(self, query: Mapping, locale: str, path: str | None = None) -> CatalogPage:
        path = path or settings.CATALOG_PATH
        state = parse_filters(query, self.taxonomy)
        view = parse_view(query)
        items = self.list_items(locale)
        listing = build_listing(items, state, self.taxonomy)
        logger.debug("catalog %s: %d of %d items match", locale, listing.total, len(items))

        next_href = None
        if listing.has_next:
            next_href = self._href(path, state.evolve(offset=state.offset + state.limit), view)
        prev_href = None
        if listing.has_prev:
            prev_href = self._href(path, state.evolve(offset=max(state.offset - state.limit, 0)), view)

        return CatalogPage(
            state=state,
            view=view,
            listing=listing,
            facets=build_facets(items, state, self.taxonomy, path=path, locale=locale, view=view),
            chips=build_chips(state, self.taxonomy, path=path, locale=locale, view=view),
            canonical=self._href(path, state, view),
            reset_href=reset_href(path, auxiliary_category=self.taxonomy.auxiliary_category_value(), view=view),
            next_href=next_href,
            prev_href=prev_href,
        )
