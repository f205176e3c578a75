#!/usr/bin/env python3
"""Prepare the database before launching uvicorn.

Runs migrations, then tops up the sample catalog when SEED_SAMPLE_CATALOG=1.
"""
import logging
import os
import sys
from pathlib import Path

# Add parent directory to path so we can import storefront modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from scripts.run_migrations import main as run_migrations_main
from scripts.seed_products import main as seed_products_main

logger = logging.getLogger(__name__)


def main() -> int:
    """Run startup tasks.

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    if run_migrations_main() != 0:
        logger.error("Migrations failed. Exiting.")
        return 1

    if os.environ.get("SEED_SAMPLE_CATALOG", "0").lower() in ("1", "true", "yes"):
        if seed_products_main() != 0:
            logger.error("Seeding failed. Exiting.")
            return 1

    logger.info("✓ Startup completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
