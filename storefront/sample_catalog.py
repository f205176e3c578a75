"""Demonstration products loaded by the seed migration and scripts/seed_products.py."""
from decimal import Decimal

from storefront.schemas.product import ProductCreate

SAMPLE_PRODUCTS: list[ProductCreate] = [
    ProductCreate(
        name='Laptop Pro 15"',
        slug="laptop-pro-15",
        description="High-performance laptop with 16GB RAM and 512GB SSD",
        price=Decimal("1299.99"),
        category="Electronics",
        inventory=12,
    ),
    ProductCreate(
        name="Wireless Mouse",
        slug="wireless-mouse",
        description="Ergonomic wireless mouse with precision tracking",
        price=Decimal("29.99"),
        category="Electronics",
        inventory=45,
    ),
    ProductCreate(
        name="Mechanical Keyboard",
        slug="mechanical-keyboard",
        description="RGB mechanical keyboard with blue switches",
        price=Decimal("89.99"),
        category="Electronics",
        inventory=23,
    ),
    ProductCreate(
        name="USB-C Hub",
        slug="usb-c-hub",
        description="7-in-1 USB-C hub with HDMI and USB 3.0 ports",
        price=Decimal("49.99"),
        category="Accessories",
        inventory=8,
    ),
    ProductCreate(
        name="Laptop Stand",
        slug="laptop-stand",
        description="Adjustable aluminum laptop stand",
        price=Decimal("39.99"),
        category="Accessories",
        inventory=3,
    ),
    ProductCreate(
        name="Noise Cancelling Headphones",
        slug="noise-cancelling-headphones",
        description="Premium wireless headphones with active noise cancellation",
        price=Decimal("249.99"),
        category="Audio",
        inventory=18,
    ),
    ProductCreate(
        name="Portable SSD 1TB",
        slug="portable-ssd-1tb",
        description="Fast external SSD with USB-C connectivity",
        price=Decimal("129.99"),
        category="Storage",
        inventory=2,
    ),
    ProductCreate(
        name="Webcam HD",
        slug="webcam-hd",
        description="1080p HD webcam with auto-focus",
        price=Decimal("79.99"),
        category="Electronics",
        inventory=15,
    ),
    ProductCreate(
        name="Phone Stand",
        slug="phone-stand",
        description="Adjustable phone stand for desk",
        price=Decimal("19.99"),
        category="Accessories",
        inventory=34,
    ),
    ProductCreate(
        name="Monitor 27\"",
        slug="monitor-27",
        description="27-inch 4K monitor with IPS panel",
        price=Decimal("399.99"),
        category="Electronics",
        inventory=7,
    ),
]
