"""Product repository: typed reads and writes against the catalog store."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Mapping, Sequence

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.core.errors import NotFoundError, StoreError, ValidationError
from storefront.models.product import Product
from storefront.schemas.product import ProductCreate, ProductUpdate, SortDirection, SortField

logger = logging.getLogger(__name__)


def _order_clause(order_by: SortField | str, direction: SortDirection | str):
    try:
        field = SortField(order_by)
        direction = SortDirection(direction)
    except ValueError as exc:
        raise ValidationError(f"Unsupported ordering: {order_by} {direction}") from exc
    column = getattr(Product, field.value)
    return column.asc() if direction is SortDirection.ASC else column.desc()


class ProductRepository:
    """Handles database operations for Product entities."""

    def __init__(self, session: Session) -> None:
        """Initialize repository with a SQLAlchemy session.

        Args:
            session: Active database session for executing queries
        """
        self._session = session

    def _fail(self, action: str, exc: SQLAlchemyError) -> StoreError:
        self._session.rollback()
        logger.exception(f"Catalog store error while {action}: {exc}")
        return StoreError(f"Failed {action}")

    def list_all(
        self,
        order_by: SortField | str = SortField.CREATED_AT,
        direction: SortDirection | str = SortDirection.DESC,
    ) -> list[Product]:
        """Fetch every product in the requested order.

        Raises:
            ValidationError: If the ordering is not supported
            StoreError: If the query fails
        """
        stmt = select(Product).order_by(_order_clause(order_by, direction))
        try:
            return list(self._session.scalars(stmt).all())
        except SQLAlchemyError as exc:
            raise self._fail("listing products", exc) from exc

    def get_by_slug(self, slug: str) -> Product | None:
        """Fetch a product by slug.

        Returns:
            Product instance if found, None otherwise

        Raises:
            StoreError: If the query fails
        """
        try:
            return self._session.scalars(select(Product).where(Product.slug == slug)).first()
        except SQLAlchemyError as exc:
            raise self._fail(f"fetching product '{slug}'", exc) from exc

    def list_filtered(
        self,
        min_inventory: int,
        order_by: SortField | str = SortField.PRICE,
        direction: SortDirection | str = SortDirection.DESC,
        limit: int = 6,
    ) -> list[Product]:
        """Fetch products with at least ``min_inventory`` units, sorted and capped at ``limit``."""
        stmt = (
            select(Product)
            .where(Product.inventory >= min_inventory)
            .order_by(_order_clause(order_by, direction))
            .limit(limit)
        )
        try:
            return list(self._session.scalars(stmt).all())
        except SQLAlchemyError as exc:
            raise self._fail("listing filtered products", exc) from exc

    def list_slugs(self) -> list[str]:
        """Return every product slug."""
        try:
            return list(self._session.scalars(select(Product.slug)).all())
        except SQLAlchemyError as exc:
            raise self._fail("listing slugs", exc) from exc

    def create(self, product: ProductCreate | Mapping[str, Any]) -> Product:
        """Create a new product.

        Args:
            product: ProductCreate schema or a raw mapping of its fields

        Returns:
            Created Product instance

        Raises:
            ValidationError: If a required field is missing or malformed
            StoreError: If the insert fails, including a duplicate slug
        """
        if not isinstance(product, ProductCreate):
            try:
                product = ProductCreate.model_validate(product)
            except PydanticValidationError as exc:
                raise ValidationError("Missing required fields") from exc

        db_product = Product(
            name=product.name,
            slug=product.slug,
            description=product.description,
            price=product.price,
            category=product.category,
            inventory=product.inventory,
            last_updated=datetime.now(timezone.utc),
        )
        try:
            self._session.add(db_product)
            self._session.commit()
            self._session.refresh(db_product)
        except IntegrityError as exc:
            self._session.rollback()
            logger.warning(f"Attempted to create product with duplicate slug: {product.slug}")
            raise StoreError(f"Product with slug '{product.slug}' already exists") from exc
        except SQLAlchemyError as exc:
            raise self._fail(f"creating product '{product.slug}'", exc) from exc

        logger.info(f"Created product {db_product.slug} ({db_product.id})")
        return db_product

    def update(self, slug: str, product: ProductUpdate | Mapping[str, Any]) -> Product:
        """Update the supplied fields of the product identified by ``slug``.

        ``last_updated`` is refreshed even when no other field changes.

        Raises:
            ValidationError: If a supplied field is malformed
            NotFoundError: If no product has this slug
            StoreError: If the update fails
        """
        if not isinstance(product, ProductUpdate):
            try:
                product = ProductUpdate.model_validate(product)
            except PydanticValidationError as exc:
                raise ValidationError("Invalid product fields") from exc

        db_product = self.get_by_slug(slug)
        if db_product is None:
            raise NotFoundError(f"Product '{slug}' not found")

        for field, value in product.changes().items():
            setattr(db_product, field, value)
        db_product.last_updated = datetime.now(timezone.utc)

        try:
            self._session.commit()
            self._session.refresh(db_product)
        except SQLAlchemyError as exc:
            raise self._fail(f"updating product '{slug}'", exc) from exc

        return db_product

    def bulk_create_missing(self, products: Sequence[ProductCreate]) -> int:
        """Insert the products whose slug is not stored yet.

        Returns:
            Number of products inserted
        """
        if not products:
            return 0

        try:
            existing = set(self._session.scalars(select(Product.slug)).all())
            now = datetime.now(timezone.utc)
            created = 0
            for product in products:
                if product.slug in existing:
                    continue
                self._session.add(Product(**product.model_dump(), last_updated=now))
                existing.add(product.slug)
                created += 1
            self._session.commit()
        except SQLAlchemyError as exc:
            raise self._fail("seeding products", exc) from exc
        return created
