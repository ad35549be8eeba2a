"""Tests for the SQLAlchemy-backed product store."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from catalog.core.errors import InfrastructureError
from catalog.db.models.product import Category, Product
from catalog.db.store import ProductStore


def make_product(name: str = "Keyboard", category: Category = Category.ELECTRONICS) -> Product:
    return Product(name=name, description=None, price=10.0, stock=3, category=category)


def test_insert_assigns_increasing_ids(store: ProductStore) -> None:
    first = store.insert(make_product("Keyboard"))
    second = store.insert(make_product("Mouse"))

    assert first.id == 1
    assert second.id == 2


def test_insert_rejects_existing_id(store: ProductStore) -> None:
    product = make_product()
    product.id = 7
    with pytest.raises(ValueError):
        store.insert(product)


def test_get_returns_none_when_absent(store: ProductStore) -> None:
    assert store.get(42) is None


def test_list_and_list_by_category(store: ProductStore) -> None:
    store.insert(make_product("Keyboard", Category.ELECTRONICS))
    store.insert(make_product("T-shirt", Category.CLOTHING))
    store.insert(make_product("Monitor", Category.ELECTRONICS))

    assert [p.name for p in store.list()] == ["Keyboard", "T-shirt", "Monitor"]
    assert [p.name for p in store.list_by_category(Category.ELECTRONICS)] == [
        "Keyboard",
        "Monitor",
    ]
    assert store.list_by_category(Category.FOOD) == []


def test_upsert_overwrites_existing_row(store: ProductStore, db: Session) -> None:
    product = store.insert(make_product())
    product.name = "Trackball"
    product.stock = 0
    store.upsert(product)

    db.expire_all()
    stored = store.get(product.id)
    assert stored.name == "Trackball"
    assert stored.stock == 0


def test_delete_reports_whether_row_existed(store: ProductStore) -> None:
    product = store.insert(make_product())

    assert store.delete(product.id) is True
    assert store.get(product.id) is None
    assert store.delete(product.id) is False


def test_ids_are_not_reused_after_delete(store: ProductStore) -> None:
    first = store.insert(make_product("Keyboard"))
    store.delete(first.id)

    second = store.insert(make_product("Mouse"))
    assert second.id == first.id + 1


def test_database_errors_become_infrastructure_errors() -> None:
    db = MagicMock(spec=Session)
    db.get.side_effect = OperationalError("SELECT", {}, Exception("connection refused"))
    store = ProductStore(db)

    with pytest.raises(InfrastructureError) as exc_info:
        store.get(1)

    assert "connection refused" in str(exc_info.value)
    db.rollback.assert_called_once()
