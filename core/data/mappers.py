"""Static mappers for database models → API transfer objects.

Nesting follows whatever the repository loaded: an association that was not
eagerly loaded is left as ``None`` in the DTO. Mappers never load anything
themselves (relationships are declared ``lazy="raise"``), and each nested
object is projected without its back-reference so the output has no cycles.
"""

from decimal import Decimal
from typing import Any, List, Optional

from sqlalchemy import inspect

from core.application.dtos import (
    CashierDTO,
    CategoryDTO,
    OrderDTO,
    OrderLineDTO,
    ProductDTO,
)
from core.domain.calculations import full_name, order_total

from .models import CashierModel, CategoryModel, OrderLineModel, OrderModel, ProductModel


def is_loaded(model: Any, attribute: str) -> bool:
    """Check whether a relationship was populated without touching it.

    Args:
        model: ORM instance
        attribute: Relationship attribute name

    Returns:
        True if reading the attribute will not trigger a load
    """
    return attribute not in inspect(model).unloaded


class CategoryMapper:
    """Static mapper for CategoryModel → CategoryDTO."""

    @staticmethod
    def to_dto(model: CategoryModel, include_products: bool = True) -> CategoryDTO:
        """Convert ORM model to DTO.

        Args:
            model: CategoryModel instance
            include_products: Nest the products if they were loaded

        Returns:
            CategoryDTO (nested products carry no category)
        """
        products: Optional[List[ProductDTO]] = None
        if include_products and is_loaded(model, "products"):
            products = [
                ProductMapper.to_dto(product, include_category=False)
                for product in model.products
            ]

        return CategoryDTO(
            id=model.id,
            category_name=model.category_name,
            products=products,
        )


class ProductMapper:
    """Static mapper for ProductModel → ProductDTO."""

    @staticmethod
    def to_dto(model: ProductModel, include_category: bool = True) -> ProductDTO:
        """Convert ORM model to DTO.

        Args:
            model: ProductModel instance
            include_category: Nest the category if it was loaded

        Returns:
            ProductDTO (nested category carries no products)
        """
        category: Optional[CategoryDTO] = None
        if include_category and is_loaded(model, "category") and model.category is not None:
            category = CategoryMapper.to_dto(model.category, include_products=False)

        return ProductDTO(
            id=model.id,
            product_name=model.product_name,
            price=model.price,
            brand=model.brand,
            category_id=model.category_id,
            category=category,
        )


class OrderLineMapper:
    """Static mapper for OrderLineModel → OrderLineDTO."""

    @staticmethod
    def to_dto(model: OrderLineModel) -> OrderLineDTO:
        product: Optional[ProductDTO] = None
        if is_loaded(model, "product") and model.product is not None:
            product = ProductMapper.to_dto(model.product)

        return OrderLineDTO(
            id=model.id,
            order_id=model.order_id,
            product_id=model.product_id,
            quantity=model.quantity,
            product=product,
        )


class OrderMapper:
    """Static mapper for OrderModel → OrderDTO with nested cashier and lines."""

    @staticmethod
    def to_dto(model: OrderModel, include_cashier: bool = True) -> OrderDTO:
        """Convert ORM model to DTO and compute the order total.

        Args:
            model: OrderModel instance
            include_cashier: Nest the cashier if it was loaded

        Returns:
            OrderDTO; ``total`` is 0 when the lines were not loaded
        """
        cashier: Optional[CashierDTO] = None
        if include_cashier and is_loaded(model, "cashier") and model.cashier is not None:
            cashier = CashierMapper.to_dto(model.cashier, include_orders=False)

        lines: Optional[List[OrderLineDTO]] = None
        if is_loaded(model, "order_products"):
            lines = [OrderLineMapper.to_dto(line) for line in model.order_products]

        return OrderDTO(
            id=model.id,
            cashier_id=model.cashier_id,
            paid_on_date=model.paid_on_date,
            cashier=cashier,
            order_products=lines,
            total=OrderMapper.total(lines),
        )

    @staticmethod
    def total(lines: Optional[List[OrderLineDTO]]) -> Decimal:
        """Order total over mapped lines; lines without a product add nothing."""
        if lines is None:
            return order_total(None)
        return order_total(
            (line.product.price if line.product else None, line.quantity)
            for line in lines
        )


class CashierMapper:
    """Static mapper for CashierModel → CashierDTO."""

    @staticmethod
    def to_dto(model: CashierModel, include_orders: bool = True) -> CashierDTO:
        """Convert ORM model to DTO.

        Args:
            model: CashierModel instance
            include_orders: Nest the orders if they were loaded

        Returns:
            CashierDTO with ``full_name`` computed
        """
        orders: Optional[List[OrderDTO]] = None
        if include_orders and is_loaded(model, "orders"):
            orders = [
                OrderMapper.to_dto(order, include_cashier=False) for order in model.orders
            ]

        return CashierDTO(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            full_name=full_name(model.first_name, model.last_name),
            orders=orders,
        )
