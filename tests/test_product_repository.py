"""Tests for ProductRepository."""
from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from storefront.core.errors import NotFoundError, StoreError, ValidationError
from storefront.models.product import Product
from storefront.schemas.product import ProductCreate, ProductUpdate, SortDirection, SortField
from storefront.services.product_repository import ProductRepository


def _as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def _product(slug: str, **overrides) -> ProductCreate:
    fields = {
        "name": slug.replace("-", " ").title(),
        "slug": slug,
        "description": f"Description of {slug}",
        "price": Decimal("10.00"),
        "category": "general",
        "inventory": 1,
    }
    fields.update(overrides)
    return ProductCreate(**fields)


class TestProductRepository:
    """Test suite for ProductRepository."""

    def test_create_returns_stored_product(self, repository: ProductRepository) -> None:
        """Test creating a product assigns id and timestamps."""
        before = datetime.now(timezone.utc).replace(microsecond=0)

        product = repository.create(_product("desk-lamp", price=Decimal("24.50"), inventory=7))

        assert product.id is not None
        assert product.slug == "desk-lamp"
        assert product.price == Decimal("24.50")
        assert product.inventory == 7
        assert _as_utc(product.last_updated) >= before
        assert product.created_at is not None

    def test_create_accepts_mapping(self, repository: ProductRepository) -> None:
        """Test create validates a raw mapping the same way as the schema."""
        product = repository.create(
            {
                "name": "Cable",
                "slug": "cable",
                "description": "USB cable",
                "price": 5,
                "category": "Accessories",
                "inventory": 0,
            }
        )

        assert product.slug == "cable"
        assert product.inventory == 0

    @pytest.mark.parametrize("missing", ["name", "slug", "description", "price", "category", "inventory"])
    def test_create_missing_field_raises_validation_error(
        self, repository: ProductRepository, missing: str
    ) -> None:
        """Test every create field is required."""
        fields = _product("cable").model_dump()
        del fields[missing]

        with pytest.raises(ValidationError):
            repository.create(fields)

        assert len(repository.list_all()) == 0

    def test_create_empty_description_is_rejected(self, repository: ProductRepository) -> None:
        fields = _product("cable").model_dump()
        fields["description"] = ""

        with pytest.raises(ValidationError):
            repository.create(fields)

    def test_create_duplicate_slug_fails(self, repository: ProductRepository, db_session: Session) -> None:
        """Test the second create with the same slug fails and one row remains."""
        repository.create(_product("desk-lamp"))

        with pytest.raises(StoreError):
            repository.create(_product("desk-lamp", name="Another Lamp"))

        rows = db_session.query(Product).filter_by(slug="desk-lamp").all()
        assert len(rows) == 1
        assert rows[0].name == "Desk Lamp"

    def test_get_by_slug(self, repository: ProductRepository) -> None:
        repository.create(_product("desk-lamp"))

        product = repository.get_by_slug("desk-lamp")

        assert product is not None
        assert product.name == "Desk Lamp"

    def test_get_by_slug_not_found(self, repository: ProductRepository) -> None:
        """Test a never-created slug yields None rather than an error."""
        assert repository.get_by_slug("never-created") is None

    def test_get_by_slug_store_failure_raises_store_error(self) -> None:
        session = MagicMock(spec=Session)
        session.scalars.side_effect = OperationalError("SELECT", {}, Exception("connection lost"))

        with pytest.raises(StoreError):
            ProductRepository(session).get_by_slug("desk-lamp")

        session.rollback.assert_called_once()

    def test_list_all_orders_by_requested_field(self, repository: ProductRepository) -> None:
        repository.create(_product("b-item", price=Decimal("20")))
        repository.create(_product("a-item", price=Decimal("5")))
        repository.create(_product("c-item", price=Decimal("12")))

        ascending = repository.list_all(SortField.PRICE, SortDirection.ASC)
        descending = repository.list_all("price", "desc")

        assert [p.slug for p in ascending] == ["a-item", "c-item", "b-item"]
        assert [p.slug for p in descending] == ["b-item", "c-item", "a-item"]

    def test_list_all_empty(self, repository: ProductRepository) -> None:
        assert repository.list_all() == []

    def test_list_all_rejects_unknown_field(self, repository: ProductRepository) -> None:
        with pytest.raises(ValidationError):
            repository.list_all("id; DROP TABLE products", "asc")

    def test_list_filtered_applies_threshold_and_limit(self, repository: ProductRepository, sample_catalog) -> None:
        """Test the recommended set: inventory >= 10, price descending, at most 6."""
        products = repository.list_filtered(min_inventory=10, order_by="price", direction="desc", limit=6)

        assert len(products) <= 6
        assert all(p.inventory >= 10 for p in products)
        assert [p.slug for p in products] == [
            "laptop-pro-15",
            "noise-cancelling-headphones",
            "mechanical-keyboard",
            "webcam-hd",
            "wireless-mouse",
            "phone-stand",
        ]

    def test_list_filtered_small_limit(self, repository: ProductRepository, sample_catalog) -> None:
        products = repository.list_filtered(min_inventory=10, limit=2)

        assert [p.slug for p in products] == ["laptop-pro-15", "noise-cancelling-headphones"]

    def test_list_slugs(self, repository: ProductRepository, sample_catalog) -> None:
        slugs = repository.list_slugs()

        assert len(slugs) == 10
        assert "wireless-mouse" in slugs

    def test_update_changes_only_supplied_fields(
        self, repository: ProductRepository, db_session: Session
    ) -> None:
        """Test partial update keeps omitted fields and refreshes last_updated."""
        created = repository.create(_product("desk-lamp", price=Decimal("30"), inventory=4, category="Lighting"))
        created.last_updated = datetime(2020, 1, 1, tzinfo=timezone.utc)
        db_session.commit()

        updated = repository.update("desk-lamp", ProductUpdate(inventory=9))

        assert updated.inventory == 9
        assert updated.price == Decimal("30")
        assert updated.category == "Lighting"
        assert updated.name == "Desk Lamp"
        assert _as_utc(updated.last_updated) > datetime(2020, 1, 1, tzinfo=timezone.utc)

    def test_update_with_no_fields_still_refreshes_timestamp(
        self, repository: ProductRepository, db_session: Session
    ) -> None:
        created = repository.create(_product("desk-lamp"))
        created.last_updated = datetime(2020, 1, 1, tzinfo=timezone.utc)
        db_session.commit()

        updated = repository.update("desk-lamp", {})

        assert _as_utc(updated.last_updated) > datetime(2020, 1, 1, tzinfo=timezone.utc)

    def test_update_ignores_slug(self, repository: ProductRepository) -> None:
        """Test the slug cannot be changed through an update payload."""
        repository.create(_product("desk-lamp"))

        updated = repository.update("desk-lamp", {"slug": "renamed", "name": "Renamed Lamp"})

        assert updated.slug == "desk-lamp"
        assert updated.name == "Renamed Lamp"
        assert repository.get_by_slug("renamed") is None

    def test_update_not_found(self, repository: ProductRepository) -> None:
        with pytest.raises(NotFoundError):
            repository.update("never-created", ProductUpdate(name="Ghost"))

    def test_bulk_create_missing_is_idempotent(self, repository: ProductRepository) -> None:
        first = repository.bulk_create_missing([_product("a-item"), _product("b-item")])
        second = repository.bulk_create_missing([_product("a-item"), _product("c-item")])

        assert first == 2
        assert second == 1
        assert len(repository.list_all()) == 3

    def test_bulk_create_missing_empty(self, repository: ProductRepository) -> None:
        assert repository.bulk_create_missing([]) == 0
