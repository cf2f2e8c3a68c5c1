"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from roost.config import Settings
from roost.domain.repository import (
    CommentMetricsRepository,
    CommentRepository,
    InteractionRepository,
    NotificationRepository,
    PostRepository,
    ReactionRepository,
    UserRepository,
)
from roost.domain.service.view_tracking import InteractionRepositoryFactory
from roost.persistence.database import (
    create_engine,
    create_session_factory,
    transaction,
)
from roost.persistence.repository import (
    PostgresCommentMetricsRepository,
    PostgresCommentRepository,
    PostgresInteractionRepository,
    PostgresNotificationRepository,
    PostgresPostRepository,
    PostgresReactionRepository,
    PostgresUserRepository,
)
from roost.util.di.base import ProviderBase
from roost.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.APP)
    def get_interaction_repository_factory(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> InteractionRepositoryFactory:
        """Provide short-lived interaction repositories for background work.

        Each repository gets its own session and commits when the block exits.
        """

        @asynccontextmanager
        async def open_repository() -> AsyncIterator[InteractionRepository]:
            async with transaction(session_factory) as session:
                yield PostgresInteractionRepository(session)

        return open_repository

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_reaction_repository(self, session: AsyncSession) -> ReactionRepository:
        """Provide Reaction repository."""
        return PostgresReactionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_metrics_repository(
        self, session: AsyncSession
    ) -> CommentMetricsRepository:
        """Provide CommentMetrics repository."""
        return PostgresCommentMetricsRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_interaction_repository(
        self, session: AsyncSession
    ) -> InteractionRepository:
        """Provide Interaction repository."""
        return PostgresInteractionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, session: AsyncSession
    ) -> NotificationRepository:
        """Provide Notification repository."""
        return PostgresNotificationRepository(session)
