"""Async SQLAlchemy engine and sessions for PostgreSQL (asyncpg)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from prompthub.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Engine with a pre-pinged pool sized by ``database.pool_size``.

    SQL is echoed in debug mode.
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Loaded rows stay readable after the request commits
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
