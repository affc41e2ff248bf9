"""PostgreSQL implementation of InviteCode repository."""

from sqlalchemy import desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pact.domain.model import InviteCode
from pact.domain.repository import InviteCodeRepository
from pact.domain.value import InviteCodeValue
from pact.persistence.mappers import invite_code_to_dict, row_to_invite_code
from pact.persistence.tables import invite_codes_table


class PostgresInviteCodeRepository(InviteCodeRepository):
    """PostgreSQL implementation of InviteCodeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_code(self, code: InviteCodeValue) -> InviteCode | None:
        stmt = select(invite_codes_table).where(invite_codes_table.c.code == code.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite_code(dict(row)) if row else None

    async def add(self, invite_code: InviteCode) -> InviteCode:
        """Insert a new code.

        The insert runs in a SAVEPOINT so a duplicate key can be retried
        with a fresh code on the same session.
        """
        async with self.session.begin_nested():
            await self.session.execute(
                insert(invite_codes_table).values(**invite_code_to_dict(invite_code))
            )
        return invite_code

    async def compare_and_swap(
        self, invite_code: InviteCode, expected_version: int
    ) -> bool:
        values = invite_code_to_dict(invite_code)
        code = values.pop("code")
        stmt = (
            update(invite_codes_table)
            .where(invite_codes_table.c.code == code)
            .where(invite_codes_table.c.version == expected_version)
            .values(**values)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def find_all(self) -> list[InviteCode]:
        stmt = select(invite_codes_table).order_by(
            desc(invite_codes_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_invite_code(dict(row)) for row in result.mappings().all()]
