"""Persistence providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from prompthub.config import Settings
from prompthub.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
    PromptRepository,
    UserRepository,
)
from prompthub.persistence.database import create_engine, create_session_factory
from prompthub.persistence.repository import (
    PostgresCommentRepository,
    PostgresLikeRepository,
    PostgresPostRepository,
    PostgresPromptRepository,
    PostgresUserRepository,
)
from prompthub.util.di.base import ProviderBase
from prompthub.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Repositories and whatever backs them."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL repositories sharing one session per request."""

    __is_mock__ = False

    users = provide(
        PostgresUserRepository, provides=UserRepository, scope=Scope.REQUEST
    )
    posts = provide(
        PostgresPostRepository, provides=PostRepository, scope=Scope.REQUEST
    )
    comments = provide(
        PostgresCommentRepository, provides=CommentRepository, scope=Scope.REQUEST
    )
    likes = provide(
        PostgresLikeRepository, provides=LikeRepository, scope=Scope.REQUEST
    )
    prompts = provide(
        PostgresPromptRepository, provides=PromptRepository, scope=Scope.REQUEST
    )

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Connection pool for the app's lifetime."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        logfire.info("Database engine created", pool_size=settings.database.pool_size)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request.

        A comment and its counter bumps, or a like and the like count, commit
        together when the request finishes. An exception rolls all of it back.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logfire.warn(
                    "Request transaction rolled back", error_type=type(e).__name__
                )
                raise
            else:
                await session.commit()
