#!/usr/bin/env python3
"""Seed the demonstration catalog.

Products whose slug already exists are left untouched, so the script can be
run repeatedly.

Usage:
    python scripts/seed_products.py
"""
import logging
import sys
from pathlib import Path

# Add parent directory to path so we can import storefront modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from storefront.core.config import get_settings
from storefront.core.db import session_scope
from storefront.core.logging_config import configure_logging
from storefront.sample_catalog import SAMPLE_PRODUCTS
from storefront.services.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def main() -> int:
    """Insert any missing sample products.

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    configure_logging(get_settings().log_level)
    try:
        with session_scope() as session:
            created = ProductRepository(session).bulk_create_missing(SAMPLE_PRODUCTS)
    except Exception as e:
        logger.error(f"✗ Seeding failed: {e}", exc_info=True)
        return 1

    logger.info(f"✓ Seeded {created} product(s); {len(SAMPLE_PRODUCTS) - created} already present")
    return 0


if __name__ == "__main__":
    sys.exit(main())
