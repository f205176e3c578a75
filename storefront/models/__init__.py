"""ORM models exposed for external modules."""
from .base import Base
from .product import Product

__all__ = [
    "Base",
    "Product",
]
