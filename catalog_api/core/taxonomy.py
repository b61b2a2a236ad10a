import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Mapping, Optional

from catalog_api.core.config import settings

TAXONOMY_PATH = Path(__file__).resolve().parent.parent / "data" / "taxonomy.v1.json"

DIMENSIONS = ("category", "process", "base", "filler", "metal", "auxiliary")
MULTI_DIMENSIONS = ("process", "base", "filler", "metal", "auxiliary")


@dataclass(frozen=True)
class TaxonomyOption:
    value: str
    label: str


class TaxonomyRegistry:
    """Closed set of facet values per dimension with locale-indexed labels.

    Built once from the taxonomy document and never mutated afterwards.
    """

    def __init__(self, data: Mapping[str, Any], default_locale: str = "ru") -> None:
        facets = data["facets"]
        self.default_locale = default_locale
        self._order: Dict[str, tuple[str, ...]] = {}
        self._values: Dict[str, FrozenSet[str]] = {}
        self._labels: Dict[str, Dict[str, Dict[str, str]]] = {}
        for dimension in DIMENSIONS:
            entries = facets.get(dimension, {}).get("values", [])
            order: list[str] = []
            labels: Dict[str, Dict[str, str]] = {}
            for entry in entries:
                if isinstance(entry, str):
                    value, entry_labels = entry, {}
                else:
                    value, entry_labels = entry["value"], dict(entry.get("labels") or {})
                if value in labels:
                    continue
                order.append(value)
                labels[value] = entry_labels
            self._order[dimension] = tuple(order)
            self._values[dimension] = frozenset(order)
            self._labels[dimension] = labels

        self._auxiliary_category = data["auxiliary_category"]
        if self._auxiliary_category not in self._values["category"]:
            raise ValueError(f"auxiliary category {self._auxiliary_category!r} is not a known category")

    def values(self, dimension: str) -> FrozenSet[str]:
        return self._values[dimension]

    def ordered_values(self, dimension: str) -> tuple[str, ...]:
        return self._order[dimension]

    def label(self, dimension: str, value: str, locale: Optional[str] = None) -> str:
        labels = self._labels[dimension].get(value) or {}
        for candidate in (locale, self.default_locale):
            if not candidate:
                continue
            text = (labels.get(candidate) or "").strip()
            if text:
                return text
        return value

    def options(self, dimension: str, locale: Optional[str] = None) -> List[TaxonomyOption]:
        return [TaxonomyOption(value=v, label=self.label(dimension, v, locale)) for v in self._order[dimension]]

    def auxiliary_category_value(self) -> str:
        return self._auxiliary_category

    def to_dict(self, locale: Optional[str] = None) -> Dict[str, Any]:
        return {
            "auxiliary_category": self._auxiliary_category,
            "facets": {
                dimension: [{"value": o.value, "label": o.label} for o in self.options(dimension, locale)]
                for dimension in DIMENSIONS
            },
        }


@lru_cache(maxsize=1)
def get_taxonomy() -> Dict[str, Any]:
    path = Path(settings.TAXONOMY_PATH) if settings.TAXONOMY_PATH else TAXONOMY_PATH
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return data


@lru_cache(maxsize=1)
def get_registry() -> TaxonomyRegistry:
    return TaxonomyRegistry(get_taxonomy(), default_locale=settings.DEFAULT_LOCALE)


def allowed_values(facet: str) -> List[str]:
    return list(get_registry().ordered_values(facet))
