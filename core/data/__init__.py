"""Data layer - infrastructure persistence and mapping."""

from .mappers import (
    CashierMapper,
    CategoryMapper,
    OrderLineMapper,
    OrderMapper,
    ProductMapper,
)
from .models import (
    Base,
    CashierModel,
    CategoryModel,
    OrderLineModel,
    OrderModel,
    ProductModel,
)
from .uow import UnitOfWork, create_uow

__all__ = [
    "Base",
    "CashierMapper",
    "CashierModel",
    "CategoryMapper",
    "CategoryModel",
    "create_uow",
    "OrderLineMapper",
    "OrderLineModel",
    "OrderMapper",
    "OrderModel",
    "ProductMapper",
    "ProductModel",
    "UnitOfWork",
]
