"""PostgreSQL advisory-lock implementation of RunLock."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from pact.domain.repository import RunLock


class PostgresRunLock(RunLock):
    """Session-level advisory lock keyed by ``hashtext(name)``.

    Acquire and release must happen on the same session, which holds for
    a single request scope.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize lock with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def try_acquire(self, name: str) -> bool:
        result = await self.session.execute(
            select(func.pg_try_advisory_lock(func.hashtext(name)))
        )
        return bool(result.scalar())

    async def release(self, name: str) -> None:
        await self.session.execute(select(func.pg_advisory_unlock(func.hashtext(name))))
