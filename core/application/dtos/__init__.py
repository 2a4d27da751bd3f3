"""Application DTOs."""

from .catalog_dto import CategoryDTO, CreateCategoryRequest, ProductDTO, ProductRequest
from .order_dto import (
    CashierDTO,
    CreateCashierRequest,
    CreateOrderRequest,
    OrderDTO,
    OrderLineDTO,
    OrderLineRequest,
)

__all__ = [
    "CashierDTO",
    "CategoryDTO",
    "CreateCashierRequest",
    "CreateCategoryRequest",
    "CreateOrderRequest",
    "OrderDTO",
    "OrderLineDTO",
    "OrderLineRequest",
    "ProductDTO",
    "ProductRequest",
]
