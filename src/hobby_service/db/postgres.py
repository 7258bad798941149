"""PostgreSQL async connection."""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from ..config import get_settings


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""
    pass


# Engine and session factory
_engine: AsyncEngine | None = None
_async_session_factory: async_sessionmaker[AsyncSession] | None = None


async def init_postgres() -> None:
    """Initialize PostgreSQL connection and create missing tables."""
    global _engine, _async_session_factory

    settings = get_settings()
    engine_options = {
        "echo": settings.database_echo,
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
    }
    if settings.database_isolation_level:
        engine_options["isolation_level"] = settings.database_isolation_level

    _engine = create_async_engine(settings.database_url, **engine_options)
    _async_session_factory = async_sessionmaker(
        _engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Create tables
    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_postgres() -> None:
    """Close PostgreSQL connection."""
    global _engine, _async_session_factory
    if _engine:
        await _engine.dispose()
    _engine = None
    _async_session_factory = None


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get the session factory created by ``init_postgres``."""
    if not _async_session_factory:
        raise RuntimeError("PostgreSQL not initialized")
    return _async_session_factory


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped database session.

    Services commit their own writes; whatever is still pending when the
    request fails is rolled back here.
    """
    async with get_session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
