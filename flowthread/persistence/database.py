"""Database connection, session management and schema provisioning."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from flowthread.config import Settings
from flowthread.persistence.tables import metadata
from flowthread.util.error import UnsupportedBackendError

SUPPORTED_DIALECTS = ("postgresql", "mysql", "sqlite")


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    options = {
        "echo": settings.debug,  # Log SQL queries in debug mode
        "pool_pre_ping": True,  # Verify connections before using
    }
    if not settings.database_url.startswith("sqlite"):
        options["pool_size"] = settings.database.pool_size
        options["max_overflow"] = settings.database.max_overflow
    return create_async_engine(settings.database_url, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
        autocommit=False,  # Explicit transaction management
    )


def check_backend(dialect: str) -> None:
    """Fail at setup time when the dialect cannot hold the comment schema.

    Raises:
        UnsupportedBackendError: If the dialect is not supported
    """
    if dialect not in SUPPORTED_DIALECTS:
        raise UnsupportedBackendError(dialect, SUPPORTED_DIALECTS)


async def ensure_schema(engine: AsyncEngine) -> None:
    """Create the comment tables if they do not exist yet.

    Production deployments run the Alembic migrations instead; this is used
    by local setups and scripts.

    Args:
        engine: Database engine

    Raises:
        UnsupportedBackendError: If the engine's dialect is not supported
    """
    dialect = engine.dialect.name
    check_backend(dialect)

    with logfire.span("database.ensure_schema", dialect=dialect):
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
        logfire.info("Comment schema ready", dialect=dialect)


@asynccontextmanager
async def get_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Get database session with automatic cleanup.

    Args:
        session_factory: Factory for creating sessions

    Yields:
        Database session
    """
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.close()
