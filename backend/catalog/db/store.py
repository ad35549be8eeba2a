"""Durable keyed storage of product records."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.core.errors import InfrastructureError
from catalog.db.models.product import Category, Product

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ProductStore:
    """Point lookup, category scan and insert/upsert/delete over `products`.

    Every write commits its own transaction, so each operation is
    all-or-nothing for a single row. Database failures are rolled back and
    surfaced as `InfrastructureError`.
    """

    def __init__(self, db: Session):
        self.db = db

    def _run(self, action: str, operation: Callable[[], T]) -> T:
        try:
            return operation()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error during {action}: {e}", exc_info=True)
            raise InfrastructureError(str(e)) from e

    def insert(self, product: Product) -> Product:
        """Persist a new row; the database assigns the id."""
        if product.id is not None:
            raise ValueError("insert expects a product without an id")

        def _insert() -> Product:
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
            return product

        return self._run("insert", _insert)

    def get(self, product_id: int) -> Product | None:
        return self._run("get", lambda: self.db.get(Product, product_id))

    def list(self) -> list[Product]:
        return self._run(
            "list",
            lambda: list(self.db.scalars(select(Product).order_by(Product.id)).all()),
        )

    def list_by_category(self, category: Category) -> list[Product]:
        query = (
            select(Product).where(Product.category == category).order_by(Product.id)
        )
        return self._run(
            "list_by_category", lambda: list(self.db.scalars(query).all())
        )

    def upsert(self, product: Product) -> Product:
        """Overwrite every column of an existing row."""
        if product.id is None:
            raise ValueError("upsert expects a product with an id")

        def _upsert() -> Product:
            stored = self.db.merge(product)
            self.db.commit()
            self.db.refresh(stored)
            return stored

        return self._run("upsert", _upsert)

    def delete(self, product_id: int) -> bool:
        """Remove a row; report whether it existed."""

        def _delete() -> bool:
            result = self.db.execute(delete(Product).where(Product.id == product_id))
            self.db.commit()
            return result.rowcount > 0

        return self._run("delete", _delete)
