"""PostgreSQL implementation of Partnership repository."""

from datetime import datetime
from uuid import UUID

import logfire
from sqlalchemy import desc, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pact.domain.model import Partnership
from pact.domain.repository import PartnershipRepository
from pact.domain.value import PartnershipId, PartnershipStatus, UserId
from pact.persistence.mappers import partnership_to_dict, row_to_partnership
from pact.persistence.tables import partnerships_table


def advisory_lock_key(user_id: UUID) -> int:
    """Map a user id onto the signed 64-bit key space of pg advisory locks."""
    return int.from_bytes(user_id.bytes[:8], "big", signed=True)


def _involves(user_id: UserId):
    return or_(
        partnerships_table.c.user_a_id == user_id,
        partnerships_table.c.user_b_id == user_id,
    )


class PostgresPartnershipRepository(PartnershipRepository):
    """PostgreSQL implementation of PartnershipRepository.

    Guarded creation serializes on transaction-scoped advisory locks, one
    per participant, taken in sorted order so two creators never deadlock.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, partnership_id: PartnershipId) -> Partnership | None:
        stmt = select(partnerships_table).where(
            partnerships_table.c.id == partnership_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_partnership(dict(row)) if row else None

    async def find_active_for_user(self, user_id: UserId) -> Partnership | None:
        stmt = (
            select(partnerships_table)
            .where(_involves(user_id))
            .where(partnerships_table.c.status == PartnershipStatus.ACTIVE.value)
            .order_by(desc(partnerships_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_partnership(dict(row)) if row else None

    async def find_for_user(self, user_id: UserId) -> list[Partnership]:
        stmt = (
            select(partnerships_table)
            .where(_involves(user_id))
            .order_by(desc(partnerships_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_partnership(dict(row)) for row in result.mappings().all()]

    async def find_all(self) -> list[Partnership]:
        stmt = select(partnerships_table).order_by(
            desc(partnerships_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_partnership(dict(row)) for row in result.mappings().all()]

    async def find_active_user_ids(self) -> set[UserId]:
        stmt = select(
            partnerships_table.c.user_a_id, partnerships_table.c.user_b_id
        ).where(partnerships_table.c.status == PartnershipStatus.ACTIVE.value)
        result = await self.session.execute(stmt)
        user_ids: set[UserId] = set()
        for row in result.all():
            user_ids.add(UserId(row.user_a_id))
            user_ids.add(UserId(row.user_b_id))
        return user_ids

    async def find_expired_active(self, now: datetime) -> list[Partnership]:
        stmt = (
            select(partnerships_table)
            .where(partnerships_table.c.status == PartnershipStatus.ACTIVE.value)
            .where(partnerships_table.c.end_date <= now)
            .order_by(partnerships_table.c.end_date)
        )
        result = await self.session.execute(stmt)
        return [row_to_partnership(dict(row)) for row in result.mappings().all()]

    async def count_active(self) -> int:
        stmt = (
            select(func.count())
            .select_from(partnerships_table)
            .where(partnerships_table.c.status == PartnershipStatus.ACTIVE.value)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def create_if_available(self, partnership: Partnership) -> Partnership | None:
        """Insert an active partnership unless a participant is already booked.

        Runs inside a SAVEPOINT so a failure here leaves the surrounding
        transaction usable. The advisory locks are held until the outer
        transaction ends.
        """
        participants = sorted((partnership.user_a_id, partnership.user_b_id))

        async with self.session.begin_nested():
            for user_id in participants:
                await self.session.execute(
                    select(func.pg_advisory_xact_lock(advisory_lock_key(user_id)))
                )

            stmt = (
                select(func.count())
                .select_from(partnerships_table)
                .where(partnerships_table.c.status == PartnershipStatus.ACTIVE.value)
                .where(
                    or_(
                        partnerships_table.c.user_a_id.in_(participants),
                        partnerships_table.c.user_b_id.in_(participants),
                    )
                )
            )
            booked = (await self.session.execute(stmt)).scalar_one()
            if booked:
                logfire.info(
                    "Participant already in an active partnership",
                    partnership_id=str(partnership.id),
                )
                return None

            await self.session.execute(
                insert(partnerships_table).values(**partnership_to_dict(partnership))
            )

        return partnership

    async def update_status(
        self,
        partnership_id: PartnershipId,
        expected: PartnershipStatus,
        new_status: PartnershipStatus,
    ) -> Partnership | None:
        stmt = (
            update(partnerships_table)
            .where(partnerships_table.c.id == partnership_id)
            .where(partnerships_table.c.status == expected.value)
            .values(status=new_status.value)
            .returning(partnerships_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_partnership(dict(row)) if row else None
