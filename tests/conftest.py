"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import os
from typing import Generator

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("ADMIN_KEY", "test-admin-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.core.config import Settings, get_settings
from storefront.core.db import get_session
from storefront.main import app
from storefront.models import Base, Product
from storefront.sample_catalog import SAMPLE_PRODUCTS
from storefront.services.product_repository import ProductRepository

ADMIN_KEY = "test-admin-key"

# SQLite in-memory by default; point TEST_DATABASE_URL at PostgreSQL to match production
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+pysqlite:///:memory:")


@pytest.fixture
def db_engine() -> Generator[Engine, None, None]:
    """Create a fresh schema for every test."""
    if TEST_DATABASE_URL.startswith("sqlite"):
        engine = create_engine(
            TEST_DATABASE_URL,
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(TEST_DATABASE_URL, future=True, pool_pre_ping=True)

    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(db_engine: Engine) -> Generator[Session, None, None]:
    """Provide a database session bound to the per-test engine."""
    SessionLocal = sessionmaker(bind=db_engine, autoflush=False, autocommit=False, expire_on_commit=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def repository(db_session: Session) -> ProductRepository:
    return ProductRepository(db_session)


@pytest.fixture
def sample_catalog(repository: ProductRepository) -> list[Product]:
    """Store the ten demonstration products."""
    repository.bulk_create_missing(SAMPLE_PRODUCTS)
    return repository.list_all()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(DATABASE_URL=TEST_DATABASE_URL, ADMIN_KEY=ADMIN_KEY)


@pytest.fixture
def client(db_session: Session, test_settings: Settings) -> Generator[TestClient, None, None]:
    """Create a FastAPI test client with overridden database session and settings."""

    def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_settings] = lambda: test_settings

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"x-admin-key": ADMIN_KEY}
