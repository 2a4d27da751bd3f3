"""SQLAlchemy repositories."""

from .cashier_repository_impl import SqlAlchemyCashierRepository
from .catalog_repository_impl import SqlAlchemyCategoryRepository, SqlAlchemyProductRepository
from .order_repository_impl import SqlAlchemyOrderRepository

__all__ = [
    "SqlAlchemyCashierRepository",
    "SqlAlchemyCategoryRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyProductRepository",
]
