"""Pydantic models describing Product payloads shared by the API and service."""

from pydantic import BaseModel, Field, StrictInt

from catalog.db.models.product import Category


class ProductInput(BaseModel):
    """Body for create and full update.

    Every field may be missing or null here; field constraints are enforced by
    the service so all violations are reported together.
    """

    name: str | None = Field(None, description="Product name (3-100 characters)")
    description: str | None = Field(
        None, description="Optional description (up to 500 characters)"
    )
    price: float | None = Field(
        None, strict=True, allow_inf_nan=False, description="Unit price, >= 0"
    )
    stock: StrictInt | None = Field(None, description="Units in stock, >= 0")
    category: Category | None = Field(None, description="Product category")


class StockUpdate(BaseModel):
    stock: StrictInt | None = Field(None, description="New stock level, >= 0")


class ProductRead(BaseModel):
    id: int
    name: str
    description: str | None = None
    price: float
    stock: int
    category: Category

    model_config = {"from_attributes": True}
