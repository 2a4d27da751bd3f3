"""SQLAlchemy repository for cashiers."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models import CashierModel, OrderLineModel, OrderModel


class SqlAlchemyCashierRepository:
    """Cashier queries: shallow listing and the orders → lines → products graph."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_all(self) -> List[CashierModel]:
        """List cashiers without their orders.

        Returns:
            List of CashierModel ordered by id
        """
        result = await self._session.execute(select(CashierModel).order_by(CashierModel.id))
        return list(result.scalars().all())

    async def get_with_orders(self, cashier_id: int) -> Optional[CashierModel]:
        """Load a cashier with orders → lines → products.

        Args:
            cashier_id: Cashier ID

        Returns:
            CashierModel if found, None otherwise
        """
        result = await self._session.execute(
            select(CashierModel)
            .where(CashierModel.id == cashier_id)
            .options(
                selectinload(CashierModel.orders)
                .selectinload(OrderModel.order_products)
                .selectinload(OrderLineModel.product)
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def add(self, cashier: CashierModel) -> CashierModel:
        """Stage a new cashier and flush it to obtain its id."""
        self._session.add(cashier)
        await self._session.flush()
        return cashier
