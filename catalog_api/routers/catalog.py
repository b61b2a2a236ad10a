from dataclasses import asdict
from typing import Optional
import logging
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from catalog_api.core.config import settings
from catalog_api.filtering.codec import query_from_pairs
from catalog_api.schemas.catalog import CatalogItemOut, CatalogPageOut, FilterChipOut, FilterStateOut, PillOut
from catalog_api.services.catalog import CatalogPage, CatalogService

router = APIRouter(prefix="/catalog", tags=["catalog"])
# Use uvicorn logger so INFO messages show up in container logs
logger = logging.getLogger("uvicorn.error")


def get_catalog_service() -> CatalogService:
    return CatalogService()


def resolve_locale(locale: Optional[str] = Query(None)) -> str:
    value = (locale or settings.DEFAULT_LOCALE).strip()
    if value not in settings.locale_list:
        raise HTTPException(status_code=404, detail="unknown_locale")
    return value


def _page_out(page: CatalogPage) -> CatalogPageOut:
    state = page.state
    return CatalogPageOut(
        items=[CatalogItemOut.model_validate(asdict(item)) for item in page.listing.items],
        total=page.listing.total,
        limit=page.listing.limit,
        offset=page.listing.offset,
        view=page.view,
        state=FilterStateOut(
            category=state.category,
            process=list(state.process.values),
            base=list(state.base.values),
            filler=list(state.filler.values),
            metal=list(state.metal.values),
            auxiliary=list(state.auxiliary.values),
            q=state.q,
            sort=state.sort,
            limit=state.limit,
            offset=state.offset,
        ),
        facets={
            dimension: [PillOut.model_validate(asdict(p)) for p in pills]
            for dimension, pills in page.facets.items()
        },
        chips=[FilterChipOut.model_validate(asdict(c)) for c in page.chips],
        canonical=page.canonical,
        reset_href=page.reset_href,
        next_href=page.next_href,
        prev_href=page.prev_href,
    )


@router.get("", response_model=CatalogPageOut)
async def browse_catalog(
    request: Request,
    locale: str = Depends(resolve_locale),
    service: CatalogService = Depends(get_catalog_service),
):
    query = query_from_pairs(request.query_params.multi_items())
    page = service.browse(query, locale)
    logger.info("catalog browse locale=%s total=%d canonical=%s", locale, page.listing.total, page.canonical)
    return _page_out(page)


@router.get("/{slug}", response_model=CatalogItemOut)
async def read_catalog_item(
    slug: str,
    locale: str = Depends(resolve_locale),
    service: CatalogService = Depends(get_catalog_service),
):
    item = service.get_item(locale, slug)
    if item is None:
        raise HTTPException(status_code=404, detail="catalog_item_not_found")
    return CatalogItemOut.model_validate(asdict(item))
