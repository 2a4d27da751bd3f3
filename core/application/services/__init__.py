"""Application services."""
from .cashier_service import CashierApplicationService
from .catalog_service import CatalogApplicationService
from .order_service import OrderApplicationService

__all__ = [
    "CashierApplicationService",
    "CatalogApplicationService",
    "OrderApplicationService",
]
