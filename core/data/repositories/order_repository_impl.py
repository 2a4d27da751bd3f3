"""SQLAlchemy repository for orders and their lines."""

from datetime import date, datetime, time, timedelta
from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models import OrderLineModel, OrderModel, ProductModel


class SqlAlchemyOrderRepository:
    """Order queries.

    ``get`` and ``find_paid_on`` load the order row only; ``get_with_lines``
    loads the full graph (cashier, lines, products, categories).
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def get(self, order_id: int) -> Optional[OrderModel]:
        """Load a single order without associations.

        Args:
            order_id: Order ID

        Returns:
            OrderModel if found, None otherwise
        """
        return await self._session.get(OrderModel, order_id)

    async def get_with_lines(self, order_id: int) -> Optional[OrderModel]:
        """Load an order with its cashier and lines → products → categories.

        Args:
            order_id: Order ID

        Returns:
            OrderModel if found, None otherwise
        """
        result = await self._session.execute(
            select(OrderModel)
            .where(OrderModel.id == order_id)
            .options(
                selectinload(OrderModel.cashier),
                selectinload(OrderModel.order_products)
                .selectinload(OrderLineModel.product)
                .selectinload(ProductModel.category),
            )
            # Rows created earlier in this session must pick up the eager loads
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def find_paid_on(self, day: Optional[date] = None) -> List[OrderModel]:
        """List orders without associations, optionally for one calendar day.

        Args:
            day: Keep orders paid within [day 00:00, next day 00:00)

        Returns:
            List of OrderModel ordered by id
        """
        query = select(OrderModel).order_by(OrderModel.id)

        if day is not None:
            start = datetime.combine(day, time.min)
            end = start + timedelta(days=1)
            query = query.where(OrderModel.paid_on_date >= start, OrderModel.paid_on_date < end)

        result = await self._session.execute(query)
        return list(result.scalars().all())

    async def add(self, order: OrderModel) -> OrderModel:
        """Stage a new order and flush it to obtain its id.

        Args:
            order: Transient OrderModel

        Returns:
            The same OrderModel, now with ``id`` assigned
        """
        self._session.add(order)
        await self._session.flush()  # Propagate to DB without committing
        return order

    async def add_lines(self, lines: Sequence[OrderLineModel]) -> None:
        """Stage order lines for an existing order.

        Args:
            lines: Transient OrderLineModel instances
        """
        self._session.add_all(lines)
        await self._session.flush()

    async def delete(self, order: OrderModel) -> None:
        """Delete an order; its lines go with it (``ON DELETE CASCADE``).

        Args:
            order: Persistent OrderModel
        """
        await self._session.delete(order)
        await self._session.flush()
