#!/usr/bin/env python3
"""Bring the catalog schema up to date before the API server starts.

Waits for the database, reports the current Alembic revision and upgrades
to head (which also loads the demonstration catalog).
"""
import logging
import sys
import time
from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError, SQLAlchemyError

# Add parent directory to path so we can import storefront modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from storefront.core.config import get_settings
from storefront.core.logging_config import configure_logging

logger = logging.getLogger(__name__)

ALEMBIC_INI = Path(__file__).parent.parent / "alembic.ini"


def wait_for_db(database_url: str, max_retries: int = 30, retry_interval: int = 2) -> bool:
    """Wait for database to become available.

    Args:
        database_url: SQLAlchemy database URL
        max_retries: Maximum number of connection attempts
        retry_interval: Seconds to wait between retries

    Returns:
        True if database is available, False otherwise
    """
    logger.info("Waiting for database to become available...")
    engine = create_engine(database_url, pool_pre_ping=True)
    try:
        for attempt in range(1, max_retries + 1):
            try:
                with engine.connect() as conn:
                    conn.execute(text("SELECT 1"))
                logger.info("✓ Database connection established")
                return True
            except OperationalError as e:
                if attempt == max_retries:
                    logger.error(f"✗ Failed to connect to database after {max_retries} attempts: {e}")
                    return False
                logger.warning(f"  Attempt {attempt}/{max_retries} failed, retrying in {retry_interval}s...")
                time.sleep(retry_interval)
    finally:
        engine.dispose()
    return False


def current_revision(database_url: str) -> str | None:
    """Return the revision stamped in the database, or None if never migrated."""
    engine = create_engine(database_url, pool_pre_ping=True)
    try:
        with engine.connect() as conn:
            return MigrationContext.configure(conn).get_current_revision()
    finally:
        engine.dispose()


def run_migrations() -> bool:
    """Run Alembic migrations to upgrade database to latest version.

    Returns:
        True if migrations succeeded, False otherwise
    """
    if not ALEMBIC_INI.exists():
        logger.error(f"✗ Alembic config not found at {ALEMBIC_INI}")
        return False

    settings = get_settings()
    alembic_cfg = Config(str(ALEMBIC_INI))
    alembic_cfg.set_main_option("sqlalchemy.url", settings.database_url)

    try:
        logger.info("  Current database revision: %s", current_revision(settings.database_url))
        for rev in ScriptDirectory.from_config(alembic_cfg).walk_revisions():
            logger.info("    - %s: %s", rev.revision, rev.doc)

        logger.info("Running Alembic migrations to 'head'...")
        command.upgrade(alembic_cfg, "head")
    except SQLAlchemyError as e:
        logger.error(f"✗ Migration failed: {e}", exc_info=True)
        return False

    logger.info("✓ Migrations completed successfully")
    return True


def main() -> int:
    """Main entry point for migration script.

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    if not wait_for_db(settings.database_url):
        logger.error("Database is not available. Exiting.")
        return 1

    if not run_migrations():
        logger.error("Migrations failed. Exiting.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
