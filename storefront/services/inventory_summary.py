"""Inventory statistics derived from an already-fetched product list."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Protocol, Sequence

LOW_STOCK_THRESHOLD = 5


class StockedItem(Protocol):
    price: Decimal | float
    inventory: int
    category: str


@dataclass
class InventorySummary:
    """Dashboard figures computed from a product list."""

    total_products: int = 0
    low_stock_products: list = field(default_factory=list)
    total_value: Decimal = Decimal("0")
    categories: dict[str, int] = field(default_factory=dict)
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def summarize_inventory(
    products: Sequence[StockedItem], low_stock_threshold: int = LOW_STOCK_THRESHOLD
) -> InventorySummary:
    """Fold ``products`` into counts, low-stock items, stock value and per-category totals.

    The input order is preserved in ``low_stock_products`` and in the insertion
    order of ``categories``.
    """
    total_value = Decimal("0")
    categories: dict[str, int] = {}
    low_stock = []

    for product in products:
        total_value += Decimal(str(product.price)) * product.inventory
        categories[product.category] = categories.get(product.category, 0) + 1
        if product.inventory < low_stock_threshold:
            low_stock.append(product)

    return InventorySummary(
        total_products=len(products),
        low_stock_products=low_stock,
        total_value=total_value,
        categories=categories,
    )
