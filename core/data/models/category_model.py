"""SQLAlchemy ORM models for the product catalog."""

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from .base import Base


class CategoryModel(Base):
    """SQLAlchemy ORM model for categories table."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    category_name = Column(String(255), nullable=False)

    products = relationship(
        "ProductModel", back_populates="category", order_by="ProductModel.id", lazy="raise"
    )

    def __repr__(self):
        return f"<CategoryModel(id={self.id}, name={self.category_name})>"


class ProductModel(Base):
    """SQLAlchemy ORM model for products table."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    brand = Column(String(255), nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)

    category = relationship("CategoryModel", back_populates="products", lazy="raise")

    def __repr__(self):
        return f"<ProductModel(id={self.id}, name={self.product_name}, price={self.price})>"
