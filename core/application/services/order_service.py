"""Application service for Order operations."""

import logging
from datetime import date, datetime
from typing import List, Optional

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos import CreateOrderRequest, OrderDTO
from core.data.mappers import OrderMapper
from core.data.models import OrderLineModel, OrderModel
from core.data.uow import create_uow
from core.domain.exceptions import EntityNotFoundError


logger = logging.getLogger(__name__)


def _strip_timezone(value: Optional[datetime]) -> Optional[datetime]:
    """Orders keep wall-clock timestamps; offset information is dropped."""
    if value is None:
        return None
    return value.replace(tzinfo=None)


class OrderApplicationService:
    """
    Application service for order queries and writes.

    Responsibilities:
    - Pick the repository query variant each endpoint needs
    - Apply not-found semantics
    - Project models into OrderDTOs
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize order application service.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory

    async def get_order(self, order_id: int) -> OrderDTO:
        """Get an order with cashier, lines, products and categories.

        Args:
            order_id: Order ID

        Returns:
            Fully projected OrderDTO

        Raises:
            EntityNotFoundError: If no order has this id
        """
        async with create_uow(self._session_factory) as uow:
            order = await uow.orders.get_with_lines(order_id)
            if order is None:
                raise EntityNotFoundError("Order", order_id)
            return OrderMapper.to_dto(order)

    async def list_orders(self, paid_on: Optional[date] = None) -> List[OrderDTO]:
        """List orders, shallow, optionally only those paid on one day.

        Args:
            paid_on: Calendar day filter

        Returns:
            List of OrderDTO without cashier or lines (``total`` is 0)
        """
        async with create_uow(self._session_factory) as uow:
            orders = await uow.orders.find_paid_on(paid_on)
            return [OrderMapper.to_dto(order) for order in orders]

    async def delete_order(self, order_id: int) -> None:
        """Delete an order and, by cascade, its lines.

        Args:
            order_id: Order ID

        Raises:
            EntityNotFoundError: If no order has this id
        """
        async with create_uow(self._session_factory) as uow:
            order = await uow.orders.get(order_id)
            if order is None:
                raise EntityNotFoundError("Order", order_id)

            await uow.orders.delete(order)
            await uow.commit()

        logger.info(f"Deleted order {order_id}")

    async def create_order(self, request: CreateOrderRequest) -> OrderDTO:
        """Create an order, then its lines, then return the full graph.

        The order row is committed before its lines are inserted, so a
        failing line (e.g. unknown product) leaves the order without lines.

        Args:
            request: CreateOrderRequest DTO

        Returns:
            Fully projected OrderDTO of the new order
        """
        async with create_uow(self._session_factory) as uow:
            # 1. Insert the order to obtain its id
            order = await uow.orders.add(
                OrderModel(
                    cashier_id=request.cashier_id,
                    paid_on_date=_strip_timezone(request.paid_on_date),
                )
            )
            await uow.commit()
            logger.info(f"Created order {order.id} for cashier {order.cashier_id}")

            # 2. Insert one line per requested product
            if request.order_products:
                await uow.orders.add_lines(
                    [
                        OrderLineModel(
                            order_id=order.id,
                            product_id=line.product_id,
                            quantity=line.quantity,
                        )
                        for line in request.order_products
                    ]
                )
                await uow.commit()
                logger.info(f"Added {len(request.order_products)} line(s) to order {order.id}")

            # 3. Re-read and project the full graph
            created = await uow.orders.get_with_lines(order.id)
            return OrderMapper.to_dto(created)
