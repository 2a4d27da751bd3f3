"""
Database configuration.

Manages engine creation, session factories and schema initialization.
"""
from typing import Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from core.infrastructure.logging import get_logger
from core.settings import DatabaseSettings, get_app_settings


logger = get_logger(__name__)


# =============================================================================
# ENGINE CREATION
# =============================================================================

def _unicode_lower(value: Optional[str]) -> Optional[str]:
    return value.lower() if value is not None else None


def _configure_sqlite_connection(dbapi_connection, connection_record) -> None:
    """Per-connection SQLite setup.

    Foreign keys are off unless asked for, and the built-in ``lower()`` only
    folds ASCII letters; it is replaced with Python's Unicode lowercasing.
    """
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
    dbapi_connection.create_function("lower", 1, _unicode_lower)


def create_engine(settings: Optional[DatabaseSettings] = None) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    Args:
        settings: Database settings (defaults to the application settings)

    Returns:
        Configured async engine
    """
    settings = settings or get_app_settings().database
    logger.info(f"Creating database engine: {settings.database_url}")

    if settings.is_sqlite:
        kwargs = {"connect_args": {"check_same_thread": False}}
        if settings.is_in_memory:
            # One shared connection, otherwise every session sees an empty database
            kwargs["poolclass"] = StaticPool
        engine = create_async_engine(settings.database_url, echo=settings.echo_sql, **kwargs)
        event.listen(engine.sync_engine, "connect", _configure_sqlite_connection)
        return engine

    return create_async_engine(
        settings.database_url,
        echo=settings.echo_sql,
        pool_pre_ping=True,  # Test connections before using
    )


# Global engine instance
engine: Optional[AsyncEngine] = None


def get_engine() -> AsyncEngine:
    """
    Get or create global engine instance.

    Returns:
        Global async engine
    """
    global engine

    if engine is None:
        engine = create_engine()

    return engine


# =============================================================================
# SESSION FACTORY
# =============================================================================

def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Get session factory bound to the global engine.

    Returns:
        Session factory for creating sessions
    """
    return async_sessionmaker(
        bind=get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


# =============================================================================
# DATABASE INITIALIZATION
# =============================================================================

async def init_database(seed: Optional[bool] = None) -> None:
    """
    Initialize database.

    Creates all tables if they don't exist and loads the seed rows
    into an empty store.

    Args:
        seed: Override for the ``DATABASE_SEED_ON_STARTUP`` setting
    """
    from core.data.models import Base
    from core.infrastructure.database.seed import seed_database

    logger.info("Initializing database...")

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if seed is None:
        seed = get_app_settings().database.seed_on_startup

    if seed:
        async with get_session_factory()() as session:
            await seed_database(session)

    logger.info("✅ Database initialized successfully")


async def close_database() -> None:
    """Close database connections."""
    global engine

    if engine:
        logger.info("Closing database connections...")
        await engine.dispose()
        engine = None
        logger.info("✅ Database connections closed")
