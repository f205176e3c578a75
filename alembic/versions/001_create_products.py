"""Create the products table."""
from __future__ import annotations

from alembic import op

# revision identifiers, used by Alembic.
revision = "001_create_products"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.execute(
        """
        CREATE TABLE IF NOT EXISTS products (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            name TEXT NOT NULL,
            slug TEXT UNIQUE NOT NULL,
            description TEXT NOT NULL DEFAULT '',
            price NUMERIC(12, 2) NOT NULL DEFAULT 0,
            category TEXT NOT NULL DEFAULT 'general',
            inventory INTEGER NOT NULL DEFAULT 0,
            last_updated TIMESTAMP WITH TIME ZONE DEFAULT now(),
            created_at TIMESTAMP WITH TIME ZONE DEFAULT now()
        );
        """
    )


def downgrade() -> None:
    op.drop_table("products")
