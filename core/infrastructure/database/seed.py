"""
Seed data loader.

Inserts the fixed demo rows (two cashiers, three categories, four
products, two orders, four order lines) into an empty store. These rows
are the baseline fixture for the integration tests.
"""
from datetime import datetime
from decimal import Decimal

from sqlalchemy import func, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from core.data.models import (
    CashierModel,
    CategoryModel,
    OrderLineModel,
    OrderModel,
    ProductModel,
)
from core.infrastructure.logging import get_logger


logger = get_logger(__name__)


CASHIERS = [
    {"id": 1, "first_name": "Ernie", "last_name": "Fairchild"},
    {"id": 2, "first_name": "Lana", "last_name": "Lopez"},
]

CATEGORIES = [
    {"id": 1, "category_name": "Beverages"},
    {"id": 2, "category_name": "Snacks"},
    {"id": 3, "category_name": "Household"},
]

PRODUCTS = [
    {"id": 1, "product_name": "Cola", "price": Decimal("1.25"), "brand": "FizzCo", "category_id": 1},
    {"id": 2, "product_name": "Chips", "price": Decimal("1.50"), "brand": "Crunchies", "category_id": 2},
    {"id": 3, "product_name": "Paper Towels", "price": Decimal("2.75"), "brand": "CleanUp", "category_id": 3},
    {"id": 4, "product_name": "Water Bottle", "price": Decimal("1.00"), "brand": "AquaPure", "category_id": 1},
]

ORDERS = [
    {"id": 1, "cashier_id": 1, "paid_on_date": datetime(2025, 5, 20)},
    {"id": 2, "cashier_id": 2, "paid_on_date": datetime(2025, 5, 21)},
]

ORDER_LINES = [
    {"id": 1, "order_id": 1, "product_id": 1, "quantity": 2},  # 2x Cola
    {"id": 2, "order_id": 1, "product_id": 2, "quantity": 1},  # 1x Chips
    {"id": 3, "order_id": 2, "product_id": 3, "quantity": 1},  # 1x Paper Towels
    {"id": 4, "order_id": 2, "product_id": 4, "quantity": 3},  # 3x Water Bottle
]

# Parents before children
SEED_ROWS = [
    (CashierModel, CASHIERS),
    (CategoryModel, CATEGORIES),
    (ProductModel, PRODUCTS),
    (OrderModel, ORDERS),
    (OrderLineModel, ORDER_LINES),
]


async def seed_database(session: AsyncSession) -> bool:
    """
    Insert the seed rows unless the store already holds data.

    Args:
        session: Open async session (committed on success)

    Returns:
        True if rows were inserted, False if the store was already seeded
    """
    existing = await session.scalar(select(func.count()).select_from(CashierModel))
    if existing:
        logger.info(f"Seed skipped: store already holds {existing} cashier(s)")
        return False

    for model, rows in SEED_ROWS:
        session.add_all(model(**row) for row in rows)
        # Flush per table so foreign keys resolve against already-written parents
        await session.flush()

    if session.bind.dialect.name == "postgresql":
        await _advance_sequences(session)

    await session.commit()
    logger.info(
        f"Seeded {len(CASHIERS)} cashiers, {len(CATEGORIES)} categories, "
        f"{len(PRODUCTS)} products, {len(ORDERS)} orders, {len(ORDER_LINES)} order lines"
    )
    return True


async def _advance_sequences(session: AsyncSession) -> None:
    """Move PostgreSQL id sequences past the explicitly inserted ids."""
    for model, _ in SEED_ROWS:
        table = model.__tablename__
        await session.execute(
            text(
                f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                f"(SELECT MAX(id) FROM {table}))"
            )
        )
