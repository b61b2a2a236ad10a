from typing import FrozenSet, Iterable, List, Sequence

from catalog_api.core.taxonomy import TaxonomyRegistry
from catalog_api.filtering.types import ITEM_FIELDS, CatalogItem, FilterState


def _has_intersection(values: Iterable[str], lookup: FrozenSet[str]) -> bool:
    for value in values:
        if value in lookup:
            return True
    return False


def apply_filters(
    items: Sequence[CatalogItem],
    state: FilterState,
    taxonomy: TaxonomyRegistry,
) -> List[CatalogItem]:
    """Keep the items that satisfy every active facet of ``state``.

    Values inside a facet are OR-ed, facets are AND-ed. ``auxiliary`` only
    counts while ``category`` is the auxiliary category. Search, sort and
    pagination are not applied here. Input order is preserved.
    """
    auxiliary_category = taxonomy.auxiliary_category_value()
    facets = [
        (ITEM_FIELDS[d], getattr(state, d).lookup)
        for d in ("process", "base", "filler", "metal")
        if getattr(state, d).values
    ]
    filter_auxiliary = bool(state.auxiliary.values) and state.category == auxiliary_category

    def matches(item: CatalogItem) -> bool:
        if state.category is not None and item.category != state.category:
            return False
        for field_name, lookup in facets:
            if not _has_intersection(getattr(item, field_name), lookup):
                return False
        if filter_auxiliary:
            if item.category != auxiliary_category:
                return False
            if not _has_intersection(item.auxiliary, state.auxiliary.lookup):
                return False
        return True

    return [item for item in items if matches(item)]
