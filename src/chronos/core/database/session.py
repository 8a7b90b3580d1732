"""Async database session management."""

from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import structlog
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from chronos.config import settings


logger = structlog.get_logger()


def _engine_options() -> dict[str, Any]:
    """Pool options for the configured backend.

    SQLite uses a single-connection pool that rejects sizing arguments.
    """
    if settings.is_sqlite:
        return {"echo": settings.database_echo}
    return {
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
        "echo": settings.database_echo,
        "pool_pre_ping": True,  # Verify connections before use
    }


# Create async engine
async_engine = create_async_engine(settings.async_database_url, **_engine_options())

# Create async session factory
async_session_factory = async_sessionmaker(
    bind=async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that provides a database session.

    One session per request; it is closed on every exit path.

    Usage:
        @router.get("/items")
        async def list_items(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


@asynccontextmanager
async def transaction(session: AsyncSession) -> AsyncIterator[AsyncSession]:
    """Run a multi-statement unit of work atomically.

    Commits when the block exits normally. Any exception rolls back every
    statement issued inside the block and is re-raised unchanged.

    Usage:
        async with transaction(db):
            await repo.clear_category(category_id)
            await repo.delete(category)
    """
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        logger.debug("transaction_rolled_back")
        raise
