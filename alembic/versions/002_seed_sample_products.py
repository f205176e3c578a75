"""Load the demonstration catalog."""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

from storefront.sample_catalog import SAMPLE_PRODUCTS

# revision identifiers, used by Alembic.
revision = "002_seed_sample_products"
down_revision = "001_create_products"
branch_labels = None
depends_on = None


def upgrade() -> None:
    insert = sa.text(
        """
        INSERT INTO products (name, slug, description, price, category, inventory)
        VALUES (:name, :slug, :description, :price, :category, :inventory)
        ON CONFLICT (slug) DO NOTHING
        """
    )
    bind = op.get_bind()
    for product in SAMPLE_PRODUCTS:
        bind.execute(insert, product.model_dump())


def downgrade() -> None:
    slugs = [product.slug for product in SAMPLE_PRODUCTS]
    op.get_bind().execute(
        sa.text("DELETE FROM products WHERE slug = ANY(:slugs)"),
        {"slugs": slugs},
    )
