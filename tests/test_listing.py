from catalog_api.filtering.codec import empty_filters
from catalog_api.filtering.types import MultiFilter
from catalog_api.services.catalog.listing import build_listing, paginate, search_items, sort_items


def ids(items):
    return [i.id for i in items]


def test_search_matches_title_and_slug(items):
    assert ids(search_items(items, "COATING")) == ["zircon", "graphite"]
    assert ids(search_items(items, "furan-cro")) == ["furan-croning"]
    assert search_items(items, "  ") == items


def test_sort_by_name(items):
    assert ids(sort_items(items, "name"))[:3] == ["cleaner", "coldbox", "furan-a"]


def test_sort_newest_first_then_title(items):
    ordered = ids(sort_items(items, "new"))
    assert ordered[:5] == ["glue", "furan-croning", "zircon", "furan-a", "coldbox"]
    # undated items go last, alphabetically
    assert ordered[5:] == ["cleaner", "graphite", "orphan"]


def test_paginate(items):
    assert ids(paginate(items, 3, 6)) == ["cleaner", "orphan"]
    assert paginate(items, 3, 30) == []


def test_build_listing_runs_filters_then_search(taxonomy, items):
    state = empty_filters().evolve(process=MultiFilter.of(["Фуран"]), q="furan", limit=1, offset=1)
    page = build_listing(items, state, taxonomy)
    assert page.total == 2
    assert ids(page.items) == ["furan-croning"]
    assert page.has_prev is True
    assert page.has_next is False
