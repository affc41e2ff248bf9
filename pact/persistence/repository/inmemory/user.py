"""In-memory user repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from pact.domain.model.user import User
from pact.domain.repository.user import UserRepository
from pact.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_active(self) -> list[User]:
        """Find active users."""
        return [user for user in self._users.values() if user.is_active]

    async def count_active(self) -> int:
        """Count active users."""
        return len(await self.find_active())

    async def save(self, user: User) -> User:
        """Save or update a user.

        Raises:
            IntegrityError: If another user already has the username
        """
        for existing in self._users.values():
            if existing.username == user.username and existing.id != user.id:
                raise IntegrityError("Duplicate username", None, Exception())
        self._users[user.id] = user
        return user
