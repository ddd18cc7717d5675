"""
Async database engine and session management.

One engine per process (cached); one session per request via the
get_async_db FastAPI dependency.

Dependencies: sqlalchemy, backend.configs
System role: Database connection lifecycle for the care plan store
"""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from backend.configs import get_settings


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Build the process-wide async engine from DatabaseSettings.

    Connections are pinged before checkout so a restarted database does not
    surface as errors on the first attribution write after it comes back.

    Returns:
        AsyncEngine: asyncpg-backed engine
    """
    db_config = get_settings().database
    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Session factory bound to the shared engine.

    Sessions do not autoflush and keep attributes loaded after commit, so a
    stored care plan can still be read once AttributionService commits.

    Returns:
        async_sessionmaker: Factory producing AsyncSession objects
    """
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding a request-scoped session.

    Yields:
        AsyncSession: Closed when the request finishes
    """
    session_factory = get_async_session_factory()
    async with session_factory() as session:
        yield session
