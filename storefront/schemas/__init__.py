"""Public schema exports."""

from .product import (
    InventorySummaryResponse,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
    SortDirection,
    SortField,
    StorefrontResponse,
)

__all__ = [
    "InventorySummaryResponse",
    "ProductCreate",
    "ProductResponse",
    "ProductUpdate",
    "SortDirection",
    "SortField",
    "StorefrontResponse",
]
