"""Order endpoints for REST API."""

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from core.application.dtos import CreateOrderRequest, OrderDTO
from core.application.services import OrderApplicationService

from apps.api.deps import get_order_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderDTO, status_code=status.HTTP_201_CREATED)
async def create_order(
    request: CreateOrderRequest,
    response: Response,
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Create a new order with its lines.

    Args:
        request: CreateOrderRequest DTO
        response: Outgoing response (for the Location header)
        service: OrderApplicationService instance

    Returns:
        OrderDTO with cashier, lines, products and total
    """
    order = await service.create_order(request)
    response.headers["Location"] = f"/api/orders/{order.id}"
    return order


@router.get("/{order_id}", response_model=OrderDTO)
async def get_order(
    order_id: int,
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Get order by ID with cashier, lines, products and categories.

    Raises:
        EntityNotFoundError: If the order does not exist (404)
    """
    return await service.get_order(order_id)


@router.get("", response_model=List[OrderDTO])
async def list_orders(
    order_date: Optional[datetime] = Query(
        default=None,
        alias="orderDate",
        description="Only orders paid on this day (YYYY-MM-DD; a time part is ignored)",
    ),
    service: OrderApplicationService = Depends(get_order_service),
) -> List[OrderDTO]:
    """List orders without lines, optionally filtered to one calendar day."""
    paid_on = order_date.date() if order_date is not None else None
    if paid_on is not None:
        logger.debug(f"Filtering orders paid on {paid_on.isoformat()}")
    return await service.list_orders(paid_on=paid_on)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_order(
    order_id: int,
    service: OrderApplicationService = Depends(get_order_service),
) -> Response:
    """Delete an order and its lines.

    Raises:
        EntityNotFoundError: If the order does not exist (404)
    """
    await service.delete_order(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
