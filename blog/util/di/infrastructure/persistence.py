"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from blog.config import Settings
from blog.domain.repository import (
    AnswerRepository,
    CategoryRepository,
    CommentRepository,
    LoginAttemptRepository,
    PostRepository,
    QuestionRepository,
    StatsRepository,
    TagRepository,
    UserRepository,
    VoteRepository,
)
from blog.persistence.database import create_engine, create_session_factory
from blog.persistence.repository import (
    PostgresAnswerRepository,
    PostgresCategoryRepository,
    PostgresCommentRepository,
    PostgresLoginAttemptRepository,
    PostgresPostRepository,
    PostgresQuestionRepository,
    PostgresStatsRepository,
    PostgresTagRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from blog.util.di.base import ProviderBase
from blog.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed when the request scope closes cleanly and
        rolled back when it closes with an exception. Vote rows and their
        target's counters are written in this one transaction.

        dishka hands the scope's exception to the generator as the value of
        ``yield`` rather than raising it there.
        """
        async with session_factory() as session:
            exc = yield session
            if exc is None:
                await session.commit()
                logfire.debug("Session committed")
            else:
                logfire.warn(
                    "Session rollback", error_type=type(exc).__name__, error=str(exc)
                )
                await session.rollback()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_category_repository(self, session: AsyncSession) -> CategoryRepository:
        """Provide Category repository."""
        return PostgresCategoryRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, session: AsyncSession) -> TagRepository:
        """Provide Tag repository."""
        return PostgresTagRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_question_repository(self, session: AsyncSession) -> QuestionRepository:
        """Provide Question repository."""
        return PostgresQuestionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_answer_repository(self, session: AsyncSession) -> AnswerRepository:
        """Provide Answer repository."""
        return PostgresAnswerRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_stats_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> StatsRepository:
        """Provide Stats repository.

        Takes the factory rather than the request session so its
        concurrent counts each run on their own connection.
        """
        return PostgresStatsRepository(session_factory)

    @provide(scope=Scope.REQUEST)
    def get_login_attempt_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> LoginAttemptRepository:
        """Provide LoginAttempt repository.

        Commits on its own session, so failures outlive the request's
        rollback.
        """
        return PostgresLoginAttemptRepository(session_factory)
