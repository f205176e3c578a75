"""Page-level catalog views: storefront, recommendations, dashboard and static slugs."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from storefront.api.deps import get_catalog_service
from storefront.schemas.product import (
    InventorySummaryResponse,
    ProductResponse,
    StorefrontResponse,
)
from storefront.services.catalog_filter import ALL_CATEGORIES
from storefront.services.catalog_service import CatalogService

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/storefront", response_model=StorefrontResponse, summary="Storefront listing")
async def storefront(
    search: str = Query(default="", description="Case-insensitive name substring"),
    category: str = Query(default=ALL_CATEGORIES, description="Exact category, or 'all'"),
    service: CatalogService = Depends(get_catalog_service),
) -> StorefrontResponse:
    """Newest-first listing with its category options; empty if the store is unavailable."""
    products, categories, total = service.search(search, category)
    return StorefrontResponse(
        products=[ProductResponse.model_validate(p) for p in products],
        categories=categories,
        total=total,
    )


@router.get("/recommendations", response_model=list[ProductResponse], summary="Recommended products")
async def recommendations(service: CatalogService = Depends(get_catalog_service)) -> list[ProductResponse]:
    return [ProductResponse.model_validate(p) for p in service.recommendations()]


@router.get("/dashboard", response_model=InventorySummaryResponse, summary="Inventory dashboard")
async def dashboard(service: CatalogService = Depends(get_catalog_service)) -> InventorySummaryResponse:
    """Inventory statistics computed fresh on every request."""
    return InventorySummaryResponse.model_validate(service.dashboard())


@router.get("/slugs", response_model=list[str], summary="Slugs for static product pages")
async def slugs(service: CatalogService = Depends(get_catalog_service)) -> list[str]:
    return service.static_slugs()
