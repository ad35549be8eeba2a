"""Wire the catalog layers together for request handlers."""

from fastapi import Depends
from sqlalchemy.orm import Session

from catalog.api.dependencies.db import get_session
from catalog.db.store import ProductStore
from catalog.services.product_service import ProductService


def get_product_store(db: Session = Depends(get_session)) -> ProductStore:
    return ProductStore(db)


def get_product_service(
    store: ProductStore = Depends(get_product_store),
) -> ProductService:
    """Build a ProductService bound to the request's store."""
    return ProductService(store)
