from typing import Dict, List, Literal, Optional
from pydantic import BaseModel


class CatalogImageOut(BaseModel):
    src: str
    width: Optional[int] = None
    height: Optional[int] = None


class CatalogItemOut(BaseModel):
    id: str
    slug: str
    title: str
    excerpt: Optional[str] = None
    category: Optional[str] = None
    process: List[str] = []
    base: List[str] = []
    filler: List[str] = []
    metals: List[str] = []
    auxiliary: List[str] = []
    image: Optional[CatalogImageOut] = None
    docs: Optional[str] = None
    updated_at: Optional[str] = None


class FilterStateOut(BaseModel):
    category: Optional[str] = None
    process: List[str] = []
    base: List[str] = []
    filler: List[str] = []
    metal: List[str] = []
    auxiliary: List[str] = []
    q: Optional[str] = None
    sort: Literal["name", "new"] = "name"
    limit: int
    offset: int = 0


class PillOut(BaseModel):
    key: str
    label: str
    count: int
    selected: bool
    disabled: bool
    href: str


class FilterChipOut(BaseModel):
    name: str
    value: str
    label: str
    href: str


class CatalogPageOut(BaseModel):
    items: List[CatalogItemOut]
    total: int
    limit: int
    offset: int
    view: Literal["grid", "list"] = "grid"
    state: FilterStateOut
    facets: Dict[str, List[PillOut]]
    chips: List[FilterChipOut]
    canonical: str
    reset_href: str
    next_href: Optional[str] = None
    prev_href: Optional[str] = None
