"""Shared fixtures: an in-memory SQLite catalog and a test client."""

import os

# Must be set before the catalog package builds its engine
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["CREATE_TABLES"] = "false"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from catalog.db import session as db_session
from catalog.db.base import Base
from catalog.db.store import ProductStore
from catalog.main import app
from catalog.services.product_service import ProductService


@pytest.fixture(autouse=True)
def schema() -> Generator[None, None, None]:
    """Give every test an empty products table."""
    db_session.init_db()
    yield
    Base.metadata.drop_all(bind=db_session.engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    session = db_session.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db: Session) -> ProductStore:
    return ProductStore(db)


@pytest.fixture
def service(store: ProductStore) -> ProductService:
    return ProductService(store)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def keyboard() -> dict:
    return {
        "name": "Keyboard",
        "description": "Mechanical, 87 keys",
        "price": 20.0,
        "stock": 5,
        "category": "ELECTRONICS",
    }
