"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pact.domain.model.user import User
from pact.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for the User read model.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The user's login name

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_active(self) -> list[User]:
        """Find every user whose activity flag is set.

        Returns:
            Active users, in no particular order
        """
        pass

    @abstractmethod
    async def count_active(self) -> int:
        """Count users whose activity flag is set."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If the username is already taken by another user
        """
        pass
