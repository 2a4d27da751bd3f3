"""FastAPI dependencies for dependency injection."""

from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from core.application.services import (  # noqa: E402
    CashierApplicationService,
    CatalogApplicationService,
    OrderApplicationService,
)
from core.infrastructure.database import config as database  # noqa: E402


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get SQLAlchemy session factory bound to the current engine.

    Returns:
        async_sessionmaker instance
    """
    return database.get_session_factory()


def get_cashier_service() -> CashierApplicationService:
    """Get CashierApplicationService instance.

    Returns:
        CashierApplicationService instance
    """
    return CashierApplicationService(get_session_factory())


def get_catalog_service() -> CatalogApplicationService:
    """Get CatalogApplicationService instance.

    Returns:
        CatalogApplicationService instance
    """
    return CatalogApplicationService(get_session_factory())


def get_order_service() -> OrderApplicationService:
    """Get OrderApplicationService instance.

    Returns:
        OrderApplicationService instance
    """
    return OrderApplicationService(get_session_factory())
