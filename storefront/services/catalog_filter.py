"""In-memory search and category filtering over a fetched product list."""
from __future__ import annotations

from typing import Protocol, Sequence, TypeVar

ALL_CATEGORIES = "all"


class Listed(Protocol):
    name: str
    category: str


T = TypeVar("T", bound=Listed)


def filter_products(products: Sequence[T], search: str = "", category: str = ALL_CATEGORIES) -> list[T]:
    """Keep products whose name contains ``search`` (case-insensitive) and whose category matches."""
    term = (search or "").lower()
    selected = category or ALL_CATEGORIES
    return [
        product
        for product in products
        if term in product.name.lower()
        and (selected == ALL_CATEGORIES or product.category == selected)
    ]


def category_options(products: Sequence[Listed]) -> list[str]:
    """Selector options: ``all`` followed by each distinct category in first-seen order."""
    return [ALL_CATEGORIES, *dict.fromkeys(product.category for product in products)]
