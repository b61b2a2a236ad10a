from .types import CatalogItem, FilterChip, FilterState, ListingPage, MultiFilter, Pill
from .codec import build_href, parse_filters, parse_view, serialize_filters
from .evaluator import apply_filters
from .facets import build_facet_pills, build_facets
from .chips import build_chips
from .controller import FilterController

__all__ = [
    "CatalogItem",
    "FilterChip",
    "FilterState",
    "ListingPage",
    "MultiFilter",
    "Pill",
    "build_href",
    "parse_filters",
    "parse_view",
    "serialize_filters",
    "apply_filters",
    "build_facet_pills",
    "build_facets",
    "build_chips",
    "FilterController",
]
