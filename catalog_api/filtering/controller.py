"""Draft/committed filter state for interactive filter controls.

The committed state is whatever the current URL parses to. The draft is the
local copy the controls edit. Every URL change overwrites the draft, and the
only way out of the controller is a navigation through ``navigator``; the
controller never updates its committed state on its own.
"""
import logging
from typing import Callable, Mapping, Optional
from urllib.parse import parse_qsl, urlsplit

from catalog_api.core.config import settings
from catalog_api.core.taxonomy import MULTI_DIMENSIONS, TaxonomyRegistry
from catalog_api.filtering.codec import (
    build_href,
    empty_filters,
    parse_filters,
    parse_view,
    query_from_pairs,
    serialize_filters,
    state_fingerprint,
    with_pagination_reset,
)
from catalog_api.filtering.types import DEFAULT_VIEW, EMPTY_FILTER, CatalogView, FilterState, SortOrder

logger = logging.getLogger(__name__)

Navigator = Callable[[str], None]


class FilterController:
    def __init__(
        self,
        taxonomy: TaxonomyRegistry,
        navigator: Navigator,
        *,
        path: Optional[str] = None,
        auto_submit: bool = True,
        page_size: Optional[int] = None,
    ) -> None:
        self.taxonomy = taxonomy
        self.navigator = navigator
        self.path = path or settings.CATALOG_PATH
        self.auto_submit = auto_submit
        self.page_size = page_size or settings.DEFAULT_PAGE_SIZE
        self.committed: FilterState = empty_filters(self.page_size)
        self.draft: FilterState = self.committed
        self.view: CatalogView = DEFAULT_VIEW
        self.fingerprint: str = state_fingerprint(self.committed)
        # Bumped whenever the fingerprint changes; controls keyed on it are rebuilt.
        self.generation: int = 0

    # committed side

    def sync(self, query: Mapping) -> FilterState:
        """Adopt the state encoded in ``query`` and discard any draft edits."""
        self.committed = parse_filters(query, self.taxonomy, page_size=self.page_size)
        self.view = parse_view(query)
        self.draft = self.committed
        fingerprint = state_fingerprint(self.committed)
        if fingerprint != self.fingerprint:
            self.fingerprint = fingerprint
            self.generation += 1
        return self.committed

    def sync_url(self, url: str) -> FilterState:
        pairs = parse_qsl(urlsplit(url).query, keep_blank_values=True)
        return self.sync(query_from_pairs(pairs))

    @property
    def is_dirty(self) -> bool:
        return self.draft != self.committed

    # draft side

    def toggle(self, dimension: str, value: str, checked: bool) -> Optional[str]:
        if dimension == "category":
            if checked:
                return self.select_category(value)
            return self.select_category(None) if value == self.draft.category else None
        if dimension not in MULTI_DIMENSIONS:
            raise KeyError(dimension)
        if value not in self.taxonomy.values(dimension):
            logger.debug("ignoring unknown %s value %r", dimension, value)
            return None
        current = getattr(self.draft, dimension)
        updated = current.with_value(value, checked)
        if updated is current:
            return None
        self.draft = self.draft.evolve(**{dimension: updated})
        return self._edited()

    def select_category(self, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in self.taxonomy.values("category"):
            logger.debug("ignoring unknown category %r", value)
            return None
        if value == self.draft.category:
            return None
        auxiliary = self.draft.auxiliary
        if value != self.taxonomy.auxiliary_category_value():
            auxiliary = EMPTY_FILTER
        self.draft = self.draft.evolve(category=value, auxiliary=auxiliary)
        return self._edited()

    # Search and sort belong to the toolbar form: they only edit the draft and
    # are sent by submit(), regardless of auto_submit.

    def set_search(self, q: Optional[str]) -> None:
        q = (q or "").strip() or None
        self.draft = self.draft.evolve(q=q)

    def set_sort(self, sort: SortOrder) -> None:
        self.draft = self.draft.evolve(sort="new" if sort == "new" else "name")

    def _edited(self) -> Optional[str]:
        if self.auto_submit:
            return self.submit()
        return None

    # navigation

    def submit(self) -> str:
        return self._commit(self.draft)

    def reset(self) -> str:
        self.draft = empty_filters(self.page_size)
        return self._commit(self.draft)

    def href_for(self, state: FilterState) -> str:
        params = serialize_filters(
            with_pagination_reset(state, self.page_size),
            auxiliary_category=self.taxonomy.auxiliary_category_value(),
            view=self.view,
            include_pagination=True,
            page_size=self.page_size,
        )
        return build_href(self.path, params)

    def _commit(self, state: FilterState) -> str:
        href = self.href_for(state)
        logger.debug("navigating to %s", href)
        self.navigator(href)
        return href
