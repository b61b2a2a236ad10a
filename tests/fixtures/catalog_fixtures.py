"""
Synthetic catalog items for filtering tests.
Every value used here is part of the bundled taxonomy.
"""
from typing import List

from catalog_api.filtering.types import CatalogItem

BINDERS = "Связующие"
COATINGS = "Противопригарные покрытия"
AUXILIARY = "Вспомогательные материалы"


def item(id: str, **fields) -> CatalogItem:
    return CatalogItem(id=id, slug=fields.pop("slug", id), title=fields.pop("title", id.title()), **fields)


def scenario_items() -> List[CatalogItem]:
    """The two-item catalog: one binder, one coating."""
    return [
        item("binder", category=BINDERS, process=("Фуран",)),
        item("coating", category=COATINGS, base=("Спиртовое",)),
    ]


def mixed_catalog() -> List[CatalogItem]:
    return [
        item("furan-a", title="Furan A", category=BINDERS, process=("Фуран",), metals=("Чугун",),
             updated_at="2025-01-01T00:00:00Z"),
        item("furan-croning", title="Furan Croning", category=BINDERS, process=("Фуран", "Кронинг"),
             metals=("Сталь",), updated_at="2025-03-01T00:00:00Z"),
        item("coldbox", title="Cold Box", category=BINDERS, process=("Колд-бокс",), metals=("Цветные сплавы",),
             updated_at="2024-06-01T00:00:00Z"),
        item("zircon", title="Zircon Coating", category=COATINGS, base=("Спиртовое",), filler=("Циркон",),
             metals=("Сталь",), updated_at="2025-02-01T00:00:00Z"),
        item("graphite", title="Graphite Coating", category=COATINGS, base=("Водное",),
             filler=("Графит", "Алюмосиликат"), metals=("Чугун",)),
        item("glue", title="Glue", category=AUXILIARY, auxiliary=("Клей",), updated_at="2025-04-01T00:00:00Z"),
        item("cleaner", title="Cleaner", category=AUXILIARY, auxiliary=("Отмывающий состав",)),
        item("orphan", title="Orphan", category=None, process=("Фуран",)),
    ]
