"""Query string <-> FilterState mapping.

Parsing is fail-open: anything that is not a known taxonomy value is dropped
and the state simply carries fewer active filters. Serialization is
deterministic so identical states always produce identical URLs.
"""
from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import urlencode

from catalog_api.core.config import settings
from catalog_api.core.taxonomy import MULTI_DIMENSIONS, TaxonomyRegistry
from catalog_api.filtering.types import (
    DEFAULT_SORT,
    DEFAULT_VIEW,
    CatalogView,
    FilterState,
    MultiFilter,
)

QueryValue = Union[str, Sequence[str], None]
Query = Mapping[str, Any]
QueryPairs = List[Tuple[str, str]]

_INT_PREFIX = re.compile(r"^[+-]?\d+")


def _to_single(value: QueryValue) -> Optional[str]:
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if isinstance(value, str):
        trimmed = value.strip()
        return trimmed or None
    return None


def as_value_list(value: QueryValue) -> list:
    """A lone string is one value, a list or tuple is many, anything else is none."""
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _to_multi(value: QueryValue, allowed: Iterable[str]) -> MultiFilter:
    allowed = frozenset(allowed)
    accepted: list[str] = []
    for candidate in as_value_list(value):
        if not isinstance(candidate, str):
            continue
        trimmed = candidate.strip()
        if not trimmed or trimmed not in allowed:
            continue
        accepted.append(trimmed)
    return MultiFilter.of(accepted)


def _to_int(value: QueryValue) -> Optional[int]:
    raw = _to_single(value)
    if not raw:
        return None
    match = _INT_PREFIX.match(raw)
    return int(match.group(0)) if match else None


def _to_limit(value: QueryValue, default: int, maximum: int) -> int:
    parsed = _to_int(value)
    if parsed is None or parsed <= 0:
        return default
    return min(parsed, maximum)


def _to_offset(value: QueryValue) -> int:
    parsed = _to_int(value)
    if parsed is None or parsed <= 0:
        return 0
    return parsed


def empty_filters(page_size: Optional[int] = None) -> FilterState:
    return FilterState(limit=page_size or settings.DEFAULT_PAGE_SIZE)


def parse_filters(
    query: Query,
    taxonomy: TaxonomyRegistry,
    *,
    page_size: Optional[int] = None,
    max_page_size: Optional[int] = None,
) -> FilterState:
    default_limit = page_size or settings.DEFAULT_PAGE_SIZE
    max_limit = max_page_size or settings.MAX_PAGE_SIZE

    category = _to_single(query.get("category"))
    if category not in taxonomy.values("category"):
        category = None

    facets = {d: _to_multi(query.get(d), taxonomy.values(d)) for d in MULTI_DIMENSIONS}

    sort = "new" if _to_single(query.get("sort")) == "new" else DEFAULT_SORT

    return FilterState(
        category=category,
        q=_to_single(query.get("q")),
        sort=sort,
        limit=_to_limit(query.get("limit"), default_limit, max_limit),
        offset=_to_offset(query.get("offset")),
        **facets,
    )


def parse_view(query: Query) -> CatalogView:
    return "list" if _to_single(query.get("view")) == "list" else DEFAULT_VIEW


def auxiliary_active(state: FilterState, auxiliary_category: str) -> bool:
    return state.category is not None and state.category == auxiliary_category


def serialize_filters(
    state: FilterState,
    *,
    auxiliary_category: str,
    view: CatalogView = DEFAULT_VIEW,
    include_pagination: bool = False,
    page_size: Optional[int] = None,
) -> QueryPairs:
    """Emit query pairs for ``state`` in a fixed key order.

    ``auxiliary`` values are written only while the category is the auxiliary
    category; defaults for ``sort``, ``view`` and pagination are left out.
    """
    default_limit = page_size or settings.DEFAULT_PAGE_SIZE
    params: QueryPairs = []

    if state.category:
        params.append(("category", state.category))
    for dimension in ("process", "base", "filler", "metal"):
        for value in getattr(state, dimension).values:
            params.append((dimension, value))
    if auxiliary_active(state, auxiliary_category):
        for value in state.auxiliary.values:
            params.append(("auxiliary", value))

    if state.q:
        params.append(("q", state.q))
    if state.sort and state.sort != DEFAULT_SORT:
        params.append(("sort", state.sort))
    if view == "list":
        params.append(("view", "list"))

    if include_pagination:
        if state.offset and state.offset > 0:
            params.append(("offset", str(state.offset)))
        if state.limit and state.limit != default_limit:
            params.append(("limit", str(state.limit)))

    return params


def build_href(path: str, params: QueryPairs) -> str:
    query = urlencode(params)
    return f"{path}?{query}" if query else path


def query_from_pairs(pairs: Iterable[Tuple[str, str]]) -> Dict[str, Union[str, List[str]]]:
    """Fold repeated keys into lists, the shape ``parse_filters`` accepts."""
    out: Dict[str, Union[str, List[str]]] = {}
    for key, value in pairs:
        if key in out:
            current = out[key]
            if isinstance(current, list):
                current.append(value)
            else:
                out[key] = [current, value]
        else:
            out[key] = value
    return out


def with_pagination_reset(state: FilterState, page_size: Optional[int] = None) -> FilterState:
    return state.evolve(limit=page_size or settings.DEFAULT_PAGE_SIZE, offset=0)


def state_fingerprint(state: FilterState) -> str:
    parts = [f"category={state.category or ''}"]
    for dimension in MULTI_DIMENSIONS:
        parts.append(f"{dimension}={','.join(getattr(state, dimension).values)}")
    parts.append(f"q={state.q or ''}")
    parts.append(f"sort={state.sort}")
    return "|".join(parts)
