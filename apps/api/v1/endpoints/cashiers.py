"""Cashier endpoints for REST API."""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from core.application.dtos import CashierDTO, CreateCashierRequest
from core.application.services import CashierApplicationService

from apps.api.deps import get_cashier_service

router = APIRouter(prefix="/cashiers", tags=["cashiers"])


@router.get("", response_model=List[CashierDTO])
async def list_cashiers(
    service: CashierApplicationService = Depends(get_cashier_service),
) -> List[CashierDTO]:
    """List all cashiers (without orders)."""
    return await service.list_cashiers()


@router.post("", response_model=CashierDTO, status_code=status.HTTP_201_CREATED)
async def create_cashier(
    request: CreateCashierRequest,
    response: Response,
    service: CashierApplicationService = Depends(get_cashier_service),
) -> CashierDTO:
    """Create a new cashier.

    Args:
        request: CreateCashierRequest DTO
        response: Outgoing response (for the Location header)
        service: CashierApplicationService instance

    Returns:
        CashierDTO with the assigned id
    """
    cashier = await service.create_cashier(request)
    response.headers["Location"] = f"/api/cashiers/{cashier.id}"
    return cashier


@router.get("/{cashier_id}", response_model=CashierDTO)
async def get_cashier(
    cashier_id: int,
    service: CashierApplicationService = Depends(get_cashier_service),
) -> CashierDTO:
    """Get a cashier with orders, order lines and products.

    Raises:
        EntityNotFoundError: If the cashier does not exist (404)
    """
    return await service.get_cashier(cashier_id)
