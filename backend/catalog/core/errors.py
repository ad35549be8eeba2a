"""Domain errors raised by the catalog service and store."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class CatalogError(Exception):
    """Base class for errors the API translates into error responses."""


class ValidationError(CatalogError):
    """One or more field constraints were violated by the input."""

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        super().__init__(", ".join(str(error) for error in self.errors))

    @property
    def fields(self) -> list[str]:
        return [error.field for error in self.errors]


class ProductNotFoundError(CatalogError):
    """The referenced product id does not exist in the store."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product not found with id: {product_id}")


class InfrastructureError(CatalogError):
    """The underlying store failed or is unavailable."""
