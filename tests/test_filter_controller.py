from urllib.parse import parse_qsl, urlsplit

import pytest

from catalog_api.filtering.controller import FilterController
from tests.fixtures.catalog_fixtures import AUXILIARY, BINDERS


class Browser:
    """Address bar stand-in: records navigations and feeds them back on demand."""

    def __init__(self):
        self.urls = []

    def __call__(self, href):
        self.urls.append(href)

    @property
    def last_params(self):
        return parse_qsl(urlsplit(self.urls[-1]).query)


@pytest.fixture
def browser():
    return Browser()


@pytest.fixture
def controller(taxonomy, browser):
    return FilterController(taxonomy, browser, path="/catalog")


def test_sync_sets_committed_and_draft(controller):
    state = controller.sync({"process": ["Фуран", "Бетон"], "view": "list"})
    assert state.process.values == ("Фуран",)
    assert controller.draft == controller.committed
    assert controller.view == "list"
    assert not controller.is_dirty


def test_toggle_auto_submits(controller, browser):
    controller.sync({})
    href = controller.toggle("process", "Фуран", True)
    assert browser.urls == [href]
    assert browser.last_params == [("process", "Фуран")]
    # committed state only moves when the new URL comes back
    assert controller.committed.process.values == ()
    controller.sync_url(href)
    assert controller.committed.process.values == ("Фуран",)


def test_commit_resets_pagination(controller, browser):
    controller.sync({"process": "Фуран", "offset": "24", "limit": "48", "sort": "new", "q": "смола"})
    controller.toggle("metal", "Сталь", True)
    assert browser.last_params == [
        ("process", "Фуран"),
        ("metal", "Сталь"),
        ("q", "смола"),
        ("sort", "new"),
    ]


def test_redundant_toggle_does_not_navigate(controller, browser):
    controller.sync({"process": "Фуран"})
    assert controller.toggle("process", "Фуран", True) is None
    assert controller.toggle("base", "Водное", False) is None
    assert controller.toggle("process", "Бетон", True) is None
    assert browser.urls == []


def test_unknown_dimension_raises(controller):
    with pytest.raises(KeyError):
        controller.toggle("colour", "red", True)


def test_category_radio_clears_auxiliary(controller, browser):
    controller.sync({"category": AUXILIARY, "auxiliary": "Клей"})
    controller.select_category(BINDERS)
    assert browser.last_params == [("category", BINDERS)]
    assert controller.draft.auxiliary.values == ()


def test_category_toggle_off(controller, browser):
    controller.sync({"category": BINDERS, "process": "Фуран"})
    controller.toggle("category", BINDERS, False)
    assert browser.last_params == [("process", "Фуран")]


def test_manual_mode_accumulates_until_submit(taxonomy, browser):
    controller = FilterController(taxonomy, browser, path="/catalog", auto_submit=False)
    controller.sync({})
    controller.toggle("process", "Фуран", True)
    controller.toggle("process", "Кронинг", True)
    controller.set_search("  паста ")
    controller.set_sort("new")
    assert browser.urls == []
    assert controller.is_dirty
    controller.submit()
    assert browser.last_params == [
        ("process", "Фуран"),
        ("process", "Кронинг"),
        ("q", "паста"),
        ("sort", "new"),
    ]


def test_search_and_sort_wait_for_submit(controller, browser):
    controller.sync({"process": "Фуран"})
    controller.set_sort("new")
    controller.set_search(" смола ")
    assert browser.urls == []
    assert controller.is_dirty
    controller.submit()
    assert browser.last_params == [("process", "Фуран"), ("q", "смола"), ("sort", "new")]


def test_reset_keeps_only_view(controller, browser):
    controller.sync({"category": BINDERS, "process": "Фуран", "q": "x", "sort": "new", "view": "list"})
    href = controller.reset()
    assert href == "/catalog?view=list"


def test_reset_without_view_goes_to_bare_path(controller):
    controller.sync({"metal": "Чугун"})
    assert controller.reset() == "/catalog"


def test_external_change_discards_draft(taxonomy, browser):
    controller = FilterController(taxonomy, browser, auto_submit=False)
    controller.sync({"process": ["Фуран", "Кронинг"]})
    controller.toggle("base", "Водное", True)
    assert controller.is_dirty

    # a chip removed elsewhere changes the URL
    controller.sync({"process": "Кронинг"})
    assert not controller.is_dirty
    assert controller.draft.base.values == ()
    assert controller.draft.process.values == ("Кронинг",)


def test_generation_follows_fingerprint(controller):
    controller.sync({"process": "Фуран"})
    generation = controller.generation
    controller.sync({"process": "Фуран", "offset": "12"})
    assert controller.generation == generation
    controller.sync({"process": "Кронинг"})
    assert controller.generation == generation + 1


def test_rapid_toggles_each_navigate(controller, browser):
    controller.sync({})
    controller.toggle("process", "Фуран", True)
    controller.toggle("process", "Кронинг", True)
    assert len(browser.urls) == 2
    assert browser.last_params == [("process", "Фуран"), ("process", "Кронинг")]
