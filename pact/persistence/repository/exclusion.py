"""PostgreSQL implementation of Exclusion repository."""

from sqlalchemy import delete, exists, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from pact.domain.model import Exclusion
from pact.domain.repository import ExclusionRepository
from pact.domain.value import ExclusionId, UserId
from pact.persistence.mappers import exclusion_to_dict, row_to_exclusion
from pact.persistence.tables import exclusions_table


class PostgresExclusionRepository(ExclusionRepository):
    """PostgreSQL implementation of ExclusionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, exclusion: Exclusion) -> Exclusion:
        stmt = insert(exclusions_table).values(**exclusion_to_dict(exclusion))
        await self.session.execute(stmt)
        await self.session.flush()
        return exclusion

    async def find_by_id(self, exclusion_id: ExclusionId) -> Exclusion | None:
        stmt = select(exclusions_table).where(exclusions_table.c.id == exclusion_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_exclusion(dict(row)) if row else None

    async def delete(self, exclusion_id: ExclusionId) -> bool:
        stmt = delete(exclusions_table).where(exclusions_table.c.id == exclusion_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def find_by_owner(self, owner_id: UserId) -> list[Exclusion]:
        stmt = (
            select(exclusions_table)
            .where(exclusions_table.c.owner_id == owner_id)
            .order_by(exclusions_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_exclusion(dict(row)) for row in result.mappings().all()]

    async def exists(self, owner_id: UserId, excluded_id: UserId) -> bool:
        stmt = select(
            exists().where(
                exclusions_table.c.owner_id == owner_id,
                exclusions_table.c.excluded_id == excluded_id,
            )
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())
