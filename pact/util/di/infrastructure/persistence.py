"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from pact.config import Settings
from pact.domain.repository import (
    ExclusionRepository,
    InviteCodeRepository,
    PartnershipRepository,
    ReportRepository,
    RunLock,
    UserRepository,
)
from pact.persistence.database import create_engine, create_session_factory
from pact.persistence.repository import (
    PostgresExclusionRepository,
    PostgresInviteCodeRepository,
    PostgresPartnershipRepository,
    PostgresReportRepository,
    PostgresRunLock,
    PostgresUserRepository,
)
from pact.util.di.base import ProviderBase
from pact.util.observability import instrument_sqlalchemy


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
    def get_exclusion_repository(self, session: AsyncSession) -> ExclusionRepository:
        """Provide Exclusion repository."""
        return PostgresExclusionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_partnership_repository(
        self, session: AsyncSession
    ) -> PartnershipRepository:
        """Provide Partnership repository."""
        return PostgresPartnershipRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invite_code_repository(
        self, session: AsyncSession
    ) -> InviteCodeRepository:
        """Provide InviteCode repository."""
        return PostgresInviteCodeRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_report_repository(self, session: AsyncSession) -> ReportRepository:
        """Provide Report repository."""
        return PostgresReportRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_run_lock(self, session: AsyncSession) -> RunLock:
        """Provide advisory-lock backed run lock."""
        return PostgresRunLock(session)
