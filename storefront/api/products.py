"""Product read and admin mutation API endpoints."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from storefront.api.deps import get_product_repository, require_admin_key
from storefront.core.errors import CatalogError, StoreError
from storefront.schemas.product import (
    ProductCreate,
    ProductResponse,
    ProductUpdate,
    SortDirection,
    SortField,
)
from storefront.services.catalog_filter import ALL_CATEGORIES, filter_products
from storefront.services.product_repository import ProductRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


def _http_error(exc: CatalogError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.message)


async def _read_json(request: Request) -> Any:
    # Parsed after the admin dependency so a bad key is reported before a bad body
    try:
        return await request.json()
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Malformed JSON body") from e


def _body_schema(model: type) -> dict:
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


@router.get(
    "",
    response_model=list[ProductResponse],
    status_code=status.HTTP_200_OK,
    summary="List all products",
    description=(
        "Return every product, newest first by default. Optional search and category "
        "parameters narrow the result the same way the storefront filter does."
    ),
)
async def list_products(
    order_by: SortField = Query(default=SortField.CREATED_AT, description="Column to order by"),
    direction: SortDirection = Query(default=SortDirection.DESC, description="Ordering direction"),
    search: str | None = Query(default=None, description="Case-insensitive name substring"),
    category: str | None = Query(default=None, description="Exact category, or 'all'"),
    repository: ProductRepository = Depends(get_product_repository),
) -> list[ProductResponse]:
    """
    List products.

    Raises:
        HTTPException: 500 if the catalog store fails
    """
    try:
        products = repository.list_all(order_by, direction)
    except CatalogError as e:
        raise _http_error(e) from e

    if search or category:
        products = filter_products(products, search or "", category or ALL_CATEGORIES)
    return [ProductResponse.model_validate(p) for p in products]


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin_key)],
    summary="Create a new product",
    openapi_extra=_body_schema(ProductCreate),
    description="Create a new product. Requires the x-admin-key header; slug must be unique.",
)
async def create_product(
    request: Request,
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductResponse:
    """
    Create a new product.

    Raises:
        HTTPException: 400 on missing fields, 401 on a bad admin key,
            500 if the store rejects the insert (including duplicate slugs)
    """
    body = await _read_json(request)
    try:
        created_product = repository.create(body)
    except StoreError as e:
        slug = body.get("slug") if isinstance(body, dict) else None
        logger.error(f"Failed to create product {slug}: {e.message}")
        raise _http_error(e) from e
    except CatalogError as e:
        raise _http_error(e) from e
    return ProductResponse.model_validate(created_product)


@router.get(
    "/{slug}",
    response_model=ProductResponse,
    status_code=status.HTTP_200_OK,
    summary="Get product by slug",
)
async def get_product(
    slug: str,
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductResponse:
    """
    Get a product by slug.

    Raises:
        HTTPException: 404 if product not found, 500 if the store fails
    """
    try:
        product = repository.get_by_slug(slug)
    except CatalogError as e:
        raise _http_error(e) from e

    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )
    return ProductResponse.model_validate(product)


@router.put(
    "/{slug}",
    response_model=ProductResponse,
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_admin_key)],
    summary="Update a product",
    openapi_extra=_body_schema(ProductUpdate),
    description=(
        "Update the supplied fields of a product. The slug itself cannot be changed; "
        "last_updated is always refreshed."
    ),
)
async def update_product(
    slug: str,
    request: Request,
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductResponse:
    """
    Update a product by slug.

    Raises:
        HTTPException: 400 on malformed fields, 401 on a bad admin key,
            404 if product not found, 500 if the store fails
    """
    body = await _read_json(request)
    try:
        updated_product = repository.update(slug, body)
    except CatalogError as e:
        raise _http_error(e) from e
    return ProductResponse.model_validate(updated_product)
