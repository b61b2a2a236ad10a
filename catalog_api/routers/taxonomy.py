from fastapi import APIRouter, Depends
from catalog_api.core.taxonomy import get_registry
from catalog_api.routers.catalog import resolve_locale
from catalog_api.schemas.taxonomy import TaxonomyOut

router = APIRouter(prefix="/taxonomy", tags=["taxonomy"])


@router.get("", response_model=TaxonomyOut)
async def read_taxonomy(locale: str = Depends(resolve_locale)):
    return {"locale": locale, **get_registry().to_dict(locale)}
