"""PostgreSQL persistence providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from discuss.config import Settings
from discuss.domain.repository import (
    CommentRepository,
    CommentVoteRepository,
    ParentEntityPort,
)
from discuss.domain.value import ParentKind
from discuss.persistence.database import create_engine, create_session_factory
from discuss.persistence.repository import (
    PostgresCommentRepository,
    PostgresCommentVoteRepository,
    PostgresParentEntityPort,
)
from discuss.persistence.tables import posts_table, reviews_table
from discuss.util.di.base import ProviderBase
from discuss.util.observability import instrument_sqlalchemy

# Table holding the entities of each parent kind
PARENT_TABLES = {
    ParentKind.POST: posts_table,
    ParentKind.REVIEW: reviews_table,
}


class PersistenceProvider(ProviderBase):
    """Persistence component; mocked with in-memory stores in tests."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories over one SQLAlchemy session per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

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

        Committed when the request finishes, rolled back if it raised, so a
        comment row and its parent's counter change land together.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logfire.warn("Request transaction rolled back", error=str(e))
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_vote_repository(
        self, session: AsyncSession
    ) -> CommentVoteRepository:
        return PostgresCommentVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_parent_ports(
        self, session: AsyncSession
    ) -> dict[ParentKind, ParentEntityPort]:
        """A port per parent kind, sharing the request session."""
        return {
            kind: PostgresParentEntityPort(session, table, kind)
            for kind, table in PARENT_TABLES.items()
        }
