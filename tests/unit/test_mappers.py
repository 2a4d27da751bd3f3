"""
Tests for model → DTO mappers.

Models are built in memory (never attached to a session), so only the
relationships assigned here count as loaded.
"""
from datetime import datetime
from decimal import Decimal

import pytest

from core.data.mappers import (
    CashierMapper,
    CategoryMapper,
    OrderLineMapper,
    OrderMapper,
    ProductMapper,
    is_loaded,
)
from core.data.models import (
    CashierModel,
    CategoryModel,
    OrderLineModel,
    OrderModel,
    ProductModel,
)


@pytest.fixture
def beverages():
    return CategoryModel(id=1, category_name="Beverages")


@pytest.fixture
def cola(beverages):
    return ProductModel(
        id=1,
        product_name="Cola",
        price=Decimal("1.25"),
        brand="FizzCo",
        category_id=1,
        category=beverages,
    )


@pytest.fixture
def chips():
    """Product whose category was not loaded."""
    return ProductModel(
        id=2, product_name="Chips", price=Decimal("1.50"), brand="Crunchies", category_id=2
    )


@pytest.fixture
def ernie():
    return CashierModel(id=1, first_name="Ernie", last_name="Fairchild")


@pytest.fixture
def full_order(ernie, cola, chips):
    """Order 1 of the seed data with its whole graph assigned."""
    return OrderModel(
        id=1,
        cashier_id=1,
        paid_on_date=datetime(2025, 5, 20),
        cashier=ernie,
        order_products=[
            OrderLineModel(id=1, order_id=1, product_id=1, quantity=2, product=cola),
            OrderLineModel(id=2, order_id=1, product_id=2, quantity=1, product=chips),
        ],
    )


class TestIsLoaded:
    def test_unassigned_relationship_is_not_loaded(self, chips):
        assert not is_loaded(chips, "category")

    def test_assigned_relationship_is_loaded(self, cola):
        assert is_loaded(cola, "category")


class TestProductMapper:
    def test_nests_loaded_category_without_products(self, cola):
        dto = ProductMapper.to_dto(cola)

        assert dto.id == 1
        assert dto.product_name == "Cola"
        assert dto.price == Decimal("1.25")
        assert dto.brand == "FizzCo"
        assert dto.category_id == 1
        assert dto.category is not None
        assert dto.category.category_name == "Beverages"
        assert dto.category.products is None

    def test_unloaded_category_is_none(self, chips):
        dto = ProductMapper.to_dto(chips)

        assert dto.category is None
        assert dto.category_id == 2

    def test_category_can_be_suppressed(self, cola):
        assert ProductMapper.to_dto(cola, include_category=False).category is None


class TestCategoryMapper:
    def test_shallow_when_products_not_loaded(self):
        dto = CategoryMapper.to_dto(CategoryModel(id=3, category_name="Household"))

        assert dto.id == 3
        assert dto.category_name == "Household"
        assert dto.products is None

    def test_nested_products_have_no_category(self, beverages, cola):
        # Assigning cola.category populated beverages.products through the backref
        dto = CategoryMapper.to_dto(beverages)

        assert [p.product_name for p in dto.products] == ["Cola"]
        assert dto.products[0].category is None


class TestOrderLineMapper:
    def test_copies_fields_and_nests_product(self, cola):
        line = OrderLineModel(id=7, order_id=3, product_id=1, quantity=4, product=cola)

        dto = OrderLineMapper.to_dto(line)

        assert (dto.id, dto.order_id, dto.product_id, dto.quantity) == (7, 3, 1, 4)
        assert dto.product.product_name == "Cola"

    def test_unloaded_product_is_none(self):
        dto = OrderLineMapper.to_dto(OrderLineModel(id=1, order_id=1, product_id=9, quantity=1))

        assert dto.product is None


class TestOrderMapper:
    def test_full_projection(self, full_order):
        dto = OrderMapper.to_dto(full_order)

        assert dto.id == 1
        assert dto.cashier_id == 1
        assert dto.paid_on_date == datetime(2025, 5, 20)
        assert dto.cashier.full_name == "Ernie Fairchild"
        assert len(dto.order_products) == 2
        assert dto.total == Decimal("4.00")

    def test_nested_cashier_has_no_orders(self, full_order):
        # The backref made ernie.orders loaded; the projection must still cut it
        assert is_loaded(full_order.cashier, "orders")

        dto = OrderMapper.to_dto(full_order)

        assert dto.cashier.orders is None

    def test_shallow_projection_total_is_zero(self):
        order = OrderModel(id=2, cashier_id=2, paid_on_date=None)

        dto = OrderMapper.to_dto(order)

        assert dto.cashier is None
        assert dto.order_products is None
        assert dto.paid_on_date is None
        assert dto.total == Decimal("0")

    def test_empty_lines_total_is_zero(self):
        dto = OrderMapper.to_dto(OrderModel(id=3, cashier_id=1, order_products=[]))

        assert dto.order_products == []
        assert dto.total == Decimal("0")

    def test_line_without_loaded_product_adds_nothing(self, cola):
        order = OrderModel(
            id=4,
            cashier_id=1,
            order_products=[
                OrderLineModel(id=1, order_id=4, product_id=1, quantity=3, product=cola),
                OrderLineModel(id=2, order_id=4, product_id=2, quantity=10),
            ],
        )

        assert OrderMapper.to_dto(order).total == Decimal("3.75")


class TestCashierMapper:
    def test_shallow_projection(self):
        dto = CashierMapper.to_dto(CashierModel(id=2, first_name="Lana", last_name="Lopez"))

        assert dto.full_name == "Lana Lopez"
        assert dto.orders is None

    def test_nested_orders_have_no_cashier(self, full_order, ernie):
        dto = CashierMapper.to_dto(ernie)

        assert len(dto.orders) == 1
        order = dto.orders[0]
        assert order.cashier is None
        assert order.total == Decimal("4.00")

    def test_json_uses_camel_case_and_numbers(self, full_order):
        payload = OrderMapper.to_dto(full_order).model_dump(mode="json", by_alias=True)

        assert payload["cashierId"] == 1
        assert payload["paidOnDate"] == "2025-05-20T00:00:00"
        assert payload["cashier"]["fullName"] == "Ernie Fairchild"
        assert payload["orderProducts"][0]["product"]["productName"] == "Cola"
        assert payload["orderProducts"][0]["product"]["category"]["categoryName"] == "Beverages"
        assert payload["total"] == 4.0
