"""Application DTOs for cashiers and orders."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import Amount, TransferModel
from .catalog_dto import ProductDTO


class CashierDTO(TransferModel):
    """Response DTO for a cashier."""

    id: int = Field(..., description="Cashier ID")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    full_name: str = Field(..., description="First and last name")
    orders: Optional[List["OrderDTO"]] = Field(
        None, description="Orders rung up by the cashier, without the cashier"
    )


class OrderLineDTO(TransferModel):
    """DTO for an order line (product and quantity within an order)."""

    id: int = Field(..., description="Order line ID")
    order_id: int = Field(..., description="Order ID")
    product_id: int = Field(..., description="Product ID")
    quantity: int = Field(..., description="Quantity ordered")
    product: Optional[ProductDTO] = Field(None, description="Ordered product")


class OrderDTO(TransferModel):
    """Response DTO for order details."""

    id: int = Field(..., description="Order ID")
    cashier_id: int = Field(..., description="Cashier ID")
    paid_on_date: Optional[datetime] = Field(None, description="Payment timestamp")
    cashier: Optional[CashierDTO] = Field(None, description="Cashier, without orders")
    order_products: Optional[List[OrderLineDTO]] = Field(None, description="Order lines")
    total: Amount = Field(..., description="Sum of price * quantity over the lines")


CashierDTO.model_rebuild()


class CreateCashierRequest(TransferModel):
    """Request DTO for creating a cashier."""

    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")


class OrderLineRequest(TransferModel):
    """Request DTO for one line of a new order."""

    product_id: int = Field(..., description="Product ID")
    quantity: int = Field(..., description="Quantity ordered")


class CreateOrderRequest(TransferModel):
    """Request DTO for creating an order with its lines."""

    cashier_id: int = Field(..., description="Cashier ID")
    paid_on_date: Optional[datetime] = Field(None, description="Payment timestamp")
    order_products: Optional[List[OrderLineRequest]] = Field(
        default_factory=list, description="Order lines; null means none"
    )
