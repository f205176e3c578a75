"""Page-level catalog reads backing the storefront, detail, dashboard and recommendation views."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from storefront.core.errors import StoreError
from storefront.models.product import Product
from storefront.schemas.product import SortDirection, SortField
from storefront.services.catalog_filter import ALL_CATEGORIES, category_options, filter_products
from storefront.services.inventory_summary import (
    LOW_STOCK_THRESHOLD,
    InventorySummary,
    summarize_inventory,
)
from storefront.services.product_repository import ProductRepository

logger = logging.getLogger(__name__)

RECOMMENDED_MIN_INVENTORY = 10
RECOMMENDED_LIMIT = 6


class CatalogService:
    """Read-side service for catalog pages.

    Unlike the repository, page reads never raise on store failures: the error
    is logged and the page renders with an empty result instead.
    """

    def __init__(
        self,
        session: Session,
        *,
        low_stock_threshold: int = LOW_STOCK_THRESHOLD,
        recommended_min_inventory: int = RECOMMENDED_MIN_INVENTORY,
        recommended_limit: int = RECOMMENDED_LIMIT,
    ) -> None:
        """Initialize service with a database session.

        Args:
            session: Active database session
            low_stock_threshold: Inventory below which a product counts as low stock
            recommended_min_inventory: Minimum inventory for the recommended set
            recommended_limit: Maximum size of the recommended set
        """
        self._repository = ProductRepository(session)
        self._low_stock_threshold = low_stock_threshold
        self._recommended_min_inventory = recommended_min_inventory
        self._recommended_limit = recommended_limit

    def storefront(self) -> list[Product]:
        """All products, newest first."""
        try:
            return self._repository.list_all(SortField.CREATED_AT, SortDirection.DESC)
        except StoreError:
            logger.exception("Error fetching storefront products")
            return []

    def search(self, search: str = "", category: str = ALL_CATEGORIES) -> tuple[list[Product], list[str], int]:
        """Storefront listing narrowed by search term and category.

        Returns:
            Tuple of (matching products, category options, unfiltered total)
        """
        products = self.storefront()
        return filter_products(products, search, category), category_options(products), len(products)

    def product_detail(self, slug: str) -> Product | None:
        """Single product for its detail page; store failures read as not found."""
        try:
            return self._repository.get_by_slug(slug)
        except StoreError:
            logger.exception(f"Error fetching product '{slug}'")
            return None

    def recommendations(self) -> list[Product]:
        """Well-stocked products, most expensive first."""
        try:
            return self._repository.list_filtered(
                min_inventory=self._recommended_min_inventory,
                order_by=SortField.PRICE,
                direction=SortDirection.DESC,
                limit=self._recommended_limit,
            )
        except StoreError:
            logger.exception("Error fetching recommendations")
            return []

    def dashboard(self) -> InventorySummary:
        """Fresh inventory statistics, scarcest products first."""
        try:
            products = self._repository.list_all(SortField.INVENTORY, SortDirection.ASC)
        except StoreError:
            logger.exception("Error fetching dashboard data")
            products = []
        return summarize_inventory(products, self._low_stock_threshold)

    def static_slugs(self) -> list[str]:
        """Slugs of every product page to pre-generate."""
        try:
            return self._repository.list_slugs()
        except StoreError:
            logger.exception("Error fetching product slugs")
            return []
