"""Shared FastAPI dependencies."""
from __future__ import annotations

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from storefront.core.config import Settings, get_settings
from storefront.core.db import get_session
from storefront.core.errors import AuthorizationError
from storefront.services.admin_gate import AdminGate
from storefront.services.catalog_service import CatalogService
from storefront.services.product_repository import ProductRepository


def get_product_repository(session: Session = Depends(get_session)) -> ProductRepository:
    """Dependency to get ProductRepository instance."""
    return ProductRepository(session)


def get_catalog_service(
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> CatalogService:
    """Dependency to get a CatalogService configured from settings."""
    return CatalogService(
        session,
        low_stock_threshold=settings.low_stock_threshold,
        recommended_min_inventory=settings.recommended_min_inventory,
        recommended_limit=settings.recommended_limit,
    )


def get_admin_gate(settings: Settings = Depends(get_settings)) -> AdminGate:
    """Dependency building the admin gate from the configured secret."""
    return AdminGate(settings.admin_key)


def require_admin_key(
    x_admin_key: str | None = Header(default=None, description="Shared admin secret"),
    gate: AdminGate = Depends(get_admin_gate),
) -> None:
    """Reject the request with 401 unless the admin key header matches.

    Runs before request body validation, so a bad key wins over a bad body.
    """
    try:
        gate.check(x_admin_key)
    except AuthorizationError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=exc.message) from exc
