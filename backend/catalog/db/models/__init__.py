"""Database models package."""
from catalog.db.models.product import Category, Product

__all__ = ["Category", "Product"]
