"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from pact.domain.model import User
from pact.domain.repository import UserRepository
from pact.domain.value import UserId, Username
from pact.persistence.mappers import row_to_user, user_to_dict
from pact.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_active(self) -> list[User]:
        stmt = select(users_table).where(users_table.c.is_active.is_(True))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def count_active(self) -> int:
        stmt = (
            select(func.count())
            .select_from(users_table)
            .where(users_table.c.is_active.is_(True))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        The write runs in a SAVEPOINT so a username collision leaves the
        session usable for compensating writes.

        Args:
            user: User to save

        Returns:
            Saved user

        Raises:
            IntegrityError: If another user already has the username
        """
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)

        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return user
