from typing import Dict, List
from pydantic import BaseModel


class TaxonomyOptionOut(BaseModel):
    value: str
    label: str


class TaxonomyOut(BaseModel):
    locale: str
    auxiliary_category: str
    facets: Dict[str, List[TaxonomyOptionOut]]
