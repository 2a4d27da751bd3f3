"""Database models."""

from .base import Base
from .category_model import CategoryModel, ProductModel
from .order_model import CashierModel, OrderLineModel, OrderModel

__all__ = [
    "Base",
    "CashierModel",
    "CategoryModel",
    "OrderLineModel",
    "OrderModel",
    "ProductModel",
]
