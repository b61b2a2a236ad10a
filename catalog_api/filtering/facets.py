"""Facet pills with live result counts.

Every option is counted by re-running :func:`apply_filters` on a toggled copy
of the committed state, so the cost is O(items x options). That is fine for
catalogs in the low thousands; larger catalogs should precompute a
value -> item-id index per dimension once per request and count with set
intersections instead of rescanning.
"""
from typing import Dict, List, Optional, Sequence

from catalog_api.core.taxonomy import DIMENSIONS, TaxonomyRegistry
from catalog_api.filtering.codec import (
    auxiliary_active,
    build_href,
    serialize_filters,
    with_pagination_reset,
)
from catalog_api.filtering.evaluator import apply_filters
from catalog_api.filtering.types import (
    DEFAULT_VIEW,
    EMPTY_FILTER,
    CatalogItem,
    CatalogView,
    FilterState,
    Pill,
)

ALL_LABELS = {"ru": "Все", "en": "All"}


def cleared_state(state: FilterState, dimension: str) -> FilterState:
    if dimension == "category":
        # leaving the auxiliary category drops the auxiliary selection with it
        return state.evolve(category=None, auxiliary=EMPTY_FILTER)
    return state.evolve(**{dimension: EMPTY_FILTER})


def toggled_state(state: FilterState, dimension: str, value: str, auxiliary_category: str) -> FilterState:
    if dimension == "category":
        next_category = None if state.category == value else value
        auxiliary = state.auxiliary if next_category == auxiliary_category else EMPTY_FILTER
        return state.evolve(category=next_category, auxiliary=auxiliary)
    return state.evolve(**{dimension: getattr(state, dimension).toggled(value)})


def is_selected(state: FilterState, dimension: str, value: str) -> bool:
    if dimension == "category":
        return state.category == value
    return value in getattr(state, dimension)


def build_facet_pills(
    dimension: str,
    items: Sequence[CatalogItem],
    state: FilterState,
    taxonomy: TaxonomyRegistry,
    *,
    path: str,
    locale: Optional[str] = None,
    view: CatalogView = DEFAULT_VIEW,
    all_label: Optional[str] = None,
) -> List[Pill]:
    auxiliary_category = taxonomy.auxiliary_category_value()

    def href_for(next_state: FilterState) -> str:
        params = serialize_filters(
            next_state,
            auxiliary_category=auxiliary_category,
            view=view,
            include_pagination=False,
        )
        return build_href(path, params)

    pills: List[Pill] = []

    cleared = with_pagination_reset(cleared_state(state, dimension))
    pills.append(
        Pill(
            key=f"{dimension}-all",
            label=all_label or ALL_LABELS.get(locale or "", ALL_LABELS["en"]),
            count=len(apply_filters(items, cleared, taxonomy)),
            selected=not state.facet(dimension).values,
            disabled=False,
            href=href_for(cleared),
        )
    )

    for option in taxonomy.options(dimension, locale):
        next_state = with_pagination_reset(toggled_state(state, dimension, option.value, auxiliary_category))
        count = len(apply_filters(items, next_state, taxonomy))
        selected = is_selected(state, dimension, option.value)
        pills.append(
            Pill(
                key=f"{dimension}-{option.value}",
                label=option.label,
                count=count,
                selected=selected,
                disabled=count == 0 and not selected,
                href=href_for(next_state),
            )
        )

    return pills


def build_facets(
    items: Sequence[CatalogItem],
    state: FilterState,
    taxonomy: TaxonomyRegistry,
    *,
    path: str,
    locale: Optional[str] = None,
    view: CatalogView = DEFAULT_VIEW,
    all_labels: Optional[Dict[str, str]] = None,
) -> Dict[str, List[Pill]]:
    """Pills for every dimension; the auxiliary row only while its guard holds."""
    guard = auxiliary_active(state, taxonomy.auxiliary_category_value())
    out: Dict[str, List[Pill]] = {}
    for dimension in DIMENSIONS:
        if dimension == "auxiliary" and not guard:
            continue
        out[dimension] = build_facet_pills(
            dimension,
            items,
            state,
            taxonomy,
            path=path,
            locale=locale,
            view=view,
            all_label=(all_labels or {}).get(dimension),
        )
    return out
