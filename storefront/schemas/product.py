"""Pydantic schemas for product resources."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


NonEmptyStr = Annotated[str, Field(min_length=1)]


class SortField(str, Enum):
    """Columns the catalog can be ordered by."""

    NAME = "name"
    PRICE = "price"
    CATEGORY = "category"
    INVENTORY = "inventory"
    CREATED_AT = "created_at"
    LAST_UPDATED = "last_updated"


class SortDirection(str, Enum):
    """Ordering direction for catalog listings."""

    ASC = "asc"
    DESC = "desc"


class ProductCreate(BaseModel):
    """Payload used when creating a product; every field is required."""

    name: NonEmptyStr = Field(description="Display name for the product")
    slug: NonEmptyStr = Field(description="Unique URL-friendly identifier")
    description: NonEmptyStr = Field(description="Marketing copy shown on the detail page")
    price: Decimal = Field(description="Unit price")
    category: NonEmptyStr = Field(description="Category used for grouping and filtering")
    inventory: int = Field(description="Units in stock")

    @field_validator("name", "slug", "category", mode="before")
    @classmethod
    def strip_whitespace(cls, value: str) -> str:
        if isinstance(value, str):
            value = value.strip()
        return value


class ProductUpdate(BaseModel):
    """Partial update payload; the slug is immutable and therefore absent."""

    name: NonEmptyStr | None = Field(default=None, description="Display name for the product")
    description: str | None = Field(default=None, description="Marketing copy shown on the detail page")
    price: Decimal | None = Field(default=None, description="Unit price")
    category: NonEmptyStr | None = Field(default=None, description="Category used for grouping and filtering")
    inventory: int | None = Field(default=None, description="Units in stock")

    @field_validator("name", "category", mode="before")
    @classmethod
    def strip_whitespace(cls, value: str | None) -> str | None:
        if isinstance(value, str):
            value = value.strip()
        return value

    def changes(self) -> dict[str, object]:
        """Return only the fields the caller actually supplied."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class ProductResponse(BaseModel):
    """Response model returned by API endpoints."""

    id: UUID = Field(description="Database identifier")
    name: str
    slug: str
    description: str
    price: float
    category: str
    inventory: int
    last_updated: datetime | None = Field(default=None, description="Timestamp of the last mutation")
    created_at: datetime | None = Field(default=None, description="Timestamp when the product was created")

    model_config = ConfigDict(from_attributes=True)


class StorefrontResponse(BaseModel):
    """Listing shown on the storefront page together with its filter options."""

    products: list[ProductResponse]
    categories: list[str] = Field(description="Category selector options, starting with 'all'")
    total: int = Field(description="Number of products before search/category filtering")


class InventorySummaryResponse(BaseModel):
    """Aggregated inventory statistics for the dashboard."""

    total_products: int
    low_stock_products: list[ProductResponse]
    total_value: float = Field(description="Sum of price * inventory across the catalog")
    categories: dict[str, int] = Field(description="Product count per category")
    generated_at: datetime

    model_config = ConfigDict(from_attributes=True)
