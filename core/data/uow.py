"""Unit of Work pattern for session-scoped repository access."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .repositories import (
    SqlAlchemyCashierRepository,
    SqlAlchemyCategoryRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyProductRepository,
)


class UnitOfWork:
    """
    Unit of Work pattern for one handler call.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Commit/rollback of staged repository operations
    3. Lazy initialization of repositories
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

        # Lazy-loaded repositories
        self._cashier_repository: Optional[SqlAlchemyCashierRepository] = None
        self._category_repository: Optional[SqlAlchemyCategoryRepository] = None
        self._product_repository: Optional[SqlAlchemyProductRepository] = None
        self._order_repository: Optional[SqlAlchemyOrderRepository] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception, then release the session."""
        if exc_type is not None:
            await self._session.rollback()
        await self._session.close()

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def cashiers(self) -> SqlAlchemyCashierRepository:
        if self._cashier_repository is None:
            self._cashier_repository = SqlAlchemyCashierRepository(self.session)
        return self._cashier_repository

    @property
    def categories(self) -> SqlAlchemyCategoryRepository:
        if self._category_repository is None:
            self._category_repository = SqlAlchemyCategoryRepository(self.session)
        return self._category_repository

    @property
    def products(self) -> SqlAlchemyProductRepository:
        if self._product_repository is None:
            self._product_repository = SqlAlchemyProductRepository(self.session)
        return self._product_repository

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        """Lazy-load order repository.

        Returns:
            SqlAlchemyOrderRepository instance
        """
        if self._order_repository is None:
            self._order_repository = SqlAlchemyOrderRepository(self.session)
        return self._order_repository

    async def commit(self) -> None:
        """Commit all pending changes."""
        await self.session.commit()

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        await self.session.rollback()


def create_uow(session_factory: async_sessionmaker) -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory)
