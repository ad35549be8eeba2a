"""CRUD endpoints for the product catalog."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from catalog.api.dependencies.services import get_product_service
from catalog.api.schemas.error import ErrorResponse
from catalog.schemas.product import ProductInput, ProductRead, StockUpdate
from catalog.db.models.product import Category
from catalog.services.product_service import ProductService

router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


@router.get(
    "",
    summary="List all products",
    response_model=list[ProductRead],
)
async def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[ProductRead]:
    """Return every product in the catalog."""
    return service.get_all()


@router.get(
    "/category/{category}",
    summary="Filter products by category",
    response_model=list[ProductRead],
    responses=BAD_REQUEST,
)
async def list_products_by_category(
    category: Category,
    service: ProductService = Depends(get_product_service),
) -> list[ProductRead]:
    """Return the products of one category; unknown tokens are rejected."""
    return service.get_by_category(category)


@router.get(
    "/{product_id}",
    summary="Get a product by id",
    response_model=ProductRead,
    responses=NOT_FOUND,
)
async def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    return service.get_by_id(product_id)


@router.post(
    "",
    summary="Create a product",
    status_code=status.HTTP_201_CREATED,
    response_model=ProductRead,
    responses=BAD_REQUEST,
)
async def create_product(
    payload: ProductInput,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Register a new product; the id is assigned by the store."""
    return service.create(payload)


@router.put(
    "/{product_id}",
    summary="Replace an existing product",
    response_model=ProductRead,
    responses={**NOT_FOUND, **BAD_REQUEST},
)
async def update_product(
    product_id: int,
    payload: ProductInput,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Overwrite every field of a product.

    This is a full replace: omitting the description clears it.
    """
    return service.update(product_id, payload)


@router.patch(
    "/{product_id}/stock",
    summary="Update only the stock of a product",
    response_model=ProductRead,
    responses={**NOT_FOUND, **BAD_REQUEST},
)
async def update_product_stock(
    product_id: int,
    payload: StockUpdate,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    return service.update_stock(product_id, payload.stock)


@router.delete(
    "/{product_id}",
    summary="Delete a product",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
async def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Permanently remove a product. Its id is never handed out again."""
    service.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
