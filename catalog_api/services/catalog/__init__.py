from catalog_api.services.catalog.service import CatalogPage, CatalogService

__all__ = ["CatalogPage", "CatalogService"]
