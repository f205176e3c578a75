"""Services module for catalog queries, mutations and derived views."""
from __future__ import annotations

from .admin_gate import AdminGate
from .catalog_filter import category_options, filter_products
from .catalog_service import CatalogService
from .inventory_summary import InventorySummary, summarize_inventory
from .product_repository import ProductRepository

__all__ = [
    "AdminGate",
    "CatalogService",
    "InventorySummary",
    "ProductRepository",
    "category_options",
    "filter_products",
    "summarize_inventory",
]
