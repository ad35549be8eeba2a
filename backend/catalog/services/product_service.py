"""Business rules for the product catalog."""

from __future__ import annotations

import logging

from catalog.core.errors import ProductNotFoundError
from catalog.db.models.product import Category, Product
from catalog.db.store import ProductStore
from catalog.schemas.product import ProductInput, ProductRead
from catalog.utils.product_validator import validate_product, validate_stock

logger = logging.getLogger(__name__)


class ProductService:
    """Validate and apply catalog operations against a ProductStore.

    The service keeps no state between calls; it is the only place that
    decides a product is missing and raises ProductNotFoundError.
    """

    def __init__(self, store: ProductStore):
        self.store = store

    def create(self, payload: ProductInput) -> ProductRead:
        """Validate the payload and insert it as a new product."""
        validate_product(payload.model_dump())

        product = Product(
            name=payload.name,
            description=payload.description,
            price=payload.price,
            stock=payload.stock,
            category=payload.category,
        )
        product = self.store.insert(product)

        logger.info(f"Created product {product.id} ({product.name})")
        return ProductRead.model_validate(product)

    def get_all(self) -> list[ProductRead]:
        return [ProductRead.model_validate(p) for p in self.store.list()]

    def get_by_id(self, product_id: int) -> ProductRead:
        return ProductRead.model_validate(self._require(product_id))

    def get_by_category(self, category: Category) -> list[ProductRead]:
        return [
            ProductRead.model_validate(p)
            for p in self.store.list_by_category(category)
        ]

    def update(self, product_id: int, payload: ProductInput) -> ProductRead:
        """Replace every field of an existing product.

        A missing or null description clears the stored one.
        """
        product = self._require(product_id)
        validate_product(payload.model_dump())

        product.name = payload.name
        product.description = payload.description
        product.price = payload.price
        product.stock = payload.stock
        product.category = payload.category
        product = self.store.upsert(product)

        logger.info(f"Updated product {product_id}")
        return ProductRead.model_validate(product)

    def update_stock(self, product_id: int, stock: int | None) -> ProductRead:
        """Overwrite the stock level only."""
        product = self._require(product_id)
        validate_stock(stock)

        product.stock = stock
        product = self.store.upsert(product)

        logger.info(f"Updated stock of product {product_id} to {stock}")
        return ProductRead.model_validate(product)

    def delete(self, product_id: int) -> None:
        if not self.store.delete(product_id):
            raise ProductNotFoundError(product_id)
        logger.info(f"Deleted product {product_id}")

    def _require(self, product_id: int) -> Product:
        product = self.store.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
