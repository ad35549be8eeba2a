"""SQLAlchemy model for product records."""

import enum

from sqlalchemy import Column, Enum, Float, Integer, String

from catalog.db.base import Base


class Category(str, enum.Enum):
    """Closed set of product categories."""

    ELECTRONICS = "ELECTRONICS"
    CLOTHING = "CLOTHING"
    FOOD = "FOOD"
    HOME = "HOME"
    SPORTS = "SPORTS"


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    description = Column(String(500))
    price = Column(Float, nullable=False)
    stock = Column(Integer, nullable=False)
    category = Column(
        Enum(Category, name="product_category", native_enum=False, length=32),
        nullable=False,
        index=True,
    )

    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted last row
    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r} category={self.category}>"
