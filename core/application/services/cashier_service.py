"""Application service for Cashier operations."""

import logging
from typing import List

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos import CashierDTO, CreateCashierRequest
from core.data.mappers import CashierMapper
from core.data.models import CashierModel
from core.data.uow import create_uow
from core.domain.exceptions import EntityNotFoundError


logger = logging.getLogger(__name__)


class CashierApplicationService:
    """Application service for cashier queries and writes."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def list_cashiers(self) -> List[CashierDTO]:
        """List all cashiers without their orders."""
        async with create_uow(self._session_factory) as uow:
            cashiers = await uow.cashiers.find_all()
            return [CashierMapper.to_dto(cashier) for cashier in cashiers]

    async def create_cashier(self, request: CreateCashierRequest) -> CashierDTO:
        """Create a cashier.

        Args:
            request: CreateCashierRequest DTO

        Returns:
            Shallow CashierDTO with the assigned id
        """
        async with create_uow(self._session_factory) as uow:
            cashier = await uow.cashiers.add(
                CashierModel(first_name=request.first_name, last_name=request.last_name)
            )
            await uow.commit()
            logger.info(f"Created cashier {cashier.id}")
            return CashierMapper.to_dto(cashier)

    async def get_cashier(self, cashier_id: int) -> CashierDTO:
        """Get a cashier with orders, their lines and products.

        Args:
            cashier_id: Cashier ID

        Returns:
            CashierDTO with nested orders (each with lines and totals)

        Raises:
            EntityNotFoundError: If no cashier has this id
        """
        async with create_uow(self._session_factory) as uow:
            cashier = await uow.cashiers.get_with_orders(cashier_id)
            if cashier is None:
                raise EntityNotFoundError("Cashier", cashier_id)
            return CashierMapper.to_dto(cashier)
