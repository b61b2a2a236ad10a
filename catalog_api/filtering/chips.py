from typing import List, Optional

from catalog_api.core.taxonomy import TaxonomyRegistry
from catalog_api.filtering.codec import (
    auxiliary_active,
    build_href,
    empty_filters,
    serialize_filters,
    with_pagination_reset,
)
from catalog_api.filtering.facets import toggled_state
from catalog_api.filtering.types import DEFAULT_SORT, DEFAULT_VIEW, CatalogView, FilterChip, FilterState

SEARCH_PREFIX = {"ru": "Поиск", "en": "Search"}
SORT_NEW_LABEL = {"ru": "Сортировка: новые", "en": "Sort: newest"}


def _localized(table: dict, locale: Optional[str]) -> str:
    return table.get(locale or "", table["en"])


def build_chips(
    state: FilterState,
    taxonomy: TaxonomyRegistry,
    *,
    path: str,
    locale: Optional[str] = None,
    view: CatalogView = DEFAULT_VIEW,
) -> List[FilterChip]:
    """One removable chip per active filter, each linking to the state without it."""
    auxiliary_category = taxonomy.auxiliary_category_value()

    def href_for(next_state: FilterState) -> str:
        params = serialize_filters(
            with_pagination_reset(next_state),
            auxiliary_category=auxiliary_category,
            view=view,
        )
        return build_href(path, params)

    chips: List[FilterChip] = []

    if state.q:
        chips.append(
            FilterChip(
                name="q",
                value=state.q,
                label=f"{_localized(SEARCH_PREFIX, locale)}: {state.q}",
                href=href_for(state.evolve(q=None)),
            )
        )
    if state.sort != DEFAULT_SORT:
        chips.append(
            FilterChip(
                name="sort",
                value=state.sort,
                label=_localized(SORT_NEW_LABEL, locale),
                href=href_for(state.evolve(sort=DEFAULT_SORT)),
            )
        )

    dimensions = ["category", "process", "base", "filler", "metal"]
    if auxiliary_active(state, auxiliary_category):
        dimensions.append("auxiliary")

    for dimension in dimensions:
        for value in state.facet(dimension).values:
            chips.append(
                FilterChip(
                    name=dimension,
                    value=value,
                    label=taxonomy.label(dimension, value, locale),
                    href=href_for(toggled_state(state, dimension, value, auxiliary_category)),
                )
            )

    return chips


def reset_href(path: str, *, auxiliary_category: str, view: CatalogView = DEFAULT_VIEW) -> str:
    return build_href(path, serialize_filters(empty_filters(), auxiliary_category=auxiliary_category, view=view))
