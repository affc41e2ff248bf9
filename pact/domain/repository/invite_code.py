"""Invite code repository interface."""

from abc import ABC, abstractmethod

from pact.domain.model.invite_code import InviteCode
from pact.domain.value import InviteCodeValue


class InviteCodeRepository(ABC):
    """Repository for InviteCode entity.

    Updates are optimistic: every write must present the version it read.
    """

    @abstractmethod
    async def find_by_code(self, code: InviteCodeValue) -> InviteCode | None:
        """Find an invite code.

        Args:
            code: The code value

        Returns:
            The invite code if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, invite_code: InviteCode) -> InviteCode:
        """Insert a newly issued code.

        Args:
            invite_code: The code to store

        Returns:
            The stored code

        Raises:
            IntegrityError: If the code value already exists
        """
        pass

    @abstractmethod
    async def compare_and_swap(
        self, invite_code: InviteCode, expected_version: int
    ) -> bool:
        """Replace the stored row if its version still equals ``expected_version``.

        Args:
            invite_code: New state; its version must be expected_version + 1
            expected_version: Version read before computing the new state

        Returns:
            True if the write happened, False if another writer got there first
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[InviteCode]:
        """List all invite codes, newest first."""
        pass
