from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, Literal, Optional, Tuple

SortOrder = Literal["name", "new"]
CatalogView = Literal["grid", "list"]

DEFAULT_SORT: SortOrder = "name"
DEFAULT_VIEW: CatalogView = "grid"


@dataclass(frozen=True)
class MultiFilter:
    """Selected values of one facet.

    ``values`` keeps first-seen order for display and serialization, ``lookup``
    is derived from it for membership tests. Build through :meth:`of`.
    """
    values: Tuple[str, ...] = ()
    lookup: FrozenSet[str] = frozenset()

    def __post_init__(self) -> None:
        if len(set(self.values)) != len(self.values):
            raise ValueError("multi_filter_duplicate_values")
        if self.lookup != frozenset(self.values):
            raise ValueError("multi_filter_lookup_mismatch")

    @classmethod
    def of(cls, values: Iterable[str] = ()) -> "MultiFilter":
        seen: list[str] = []
        for v in values:
            if v not in seen:
                seen.append(v)
        return cls(values=tuple(seen), lookup=frozenset(seen))

    def __bool__(self) -> bool:
        return bool(self.values)

    def __contains__(self, value: object) -> bool:
        return value in self.lookup

    def toggled(self, value: str) -> "MultiFilter":
        if value in self.lookup:
            return MultiFilter.of(v for v in self.values if v != value)
        return MultiFilter.of((*self.values, value))

    def with_value(self, value: str, present: bool) -> "MultiFilter":
        if (value in self.lookup) == present:
            return self
        return self.toggled(value)


EMPTY_FILTER = MultiFilter()


@dataclass(frozen=True)
class FilterState:
    category: Optional[str] = None
    process: MultiFilter = EMPTY_FILTER
    base: MultiFilter = EMPTY_FILTER
    filler: MultiFilter = EMPTY_FILTER
    metal: MultiFilter = EMPTY_FILTER
    auxiliary: MultiFilter = EMPTY_FILTER
    q: Optional[str] = None
    sort: SortOrder = DEFAULT_SORT
    limit: int = 12
    offset: int = 0

    def facet(self, dimension: str) -> MultiFilter:
        if dimension == "category":
            return MultiFilter.of([self.category] if self.category else [])
        return getattr(self, dimension)

    def evolve(self, **changes) -> "FilterState":
        return replace(self, **changes)


@dataclass(frozen=True)
class CatalogImage:
    src: str
    width: Optional[int] = None
    height: Optional[int] = None


@dataclass(frozen=True)
class CatalogItem:
    id: str
    slug: str
    title: str
    category: Optional[str] = None
    process: Tuple[str, ...] = ()
    base: Tuple[str, ...] = ()
    filler: Tuple[str, ...] = ()
    metals: Tuple[str, ...] = ()
    auxiliary: Tuple[str, ...] = ()
    excerpt: Optional[str] = None
    image: Optional[CatalogImage] = None
    docs: Optional[str] = None
    updated_at: Optional[str] = None


# Item attribute holding each multi-value dimension.
ITEM_FIELDS = {
    "process": "process",
    "base": "base",
    "filler": "filler",
    "metal": "metals",
    "auxiliary": "auxiliary",
}


@dataclass(frozen=True)
class Pill:
    key: str
    label: str
    count: int
    selected: bool
    disabled: bool
    href: str


@dataclass(frozen=True)
class FilterChip:
    name: str
    value: str
    label: str
    href: str


@dataclass(frozen=True)
class ListingPage:
    items: list = field(default_factory=list)
    total: int = 0
    limit: int = 12
    offset: int = 0

    @property
    def has_next(self) -> bool:
        return self.offset + self.limit < self.total

    @property
    def has_prev(self) -> bool:
        return self.offset > 0
