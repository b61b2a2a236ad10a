from .catalog_fixtures import (
    AUXILIARY,
    BINDERS,
    COATINGS,
    item,
    mixed_catalog,
    scenario_items,
)
