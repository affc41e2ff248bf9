"""Partnership repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from pact.domain.model.partnership import Partnership
from pact.domain.value import PartnershipId, PartnershipStatus, UserId


class PartnershipRepository(ABC):
    """Repository for Partnership entity.

    Partnerships are never deleted. Writes go through two atomic
    operations only: guarded creation and guarded status change.
    """

    @abstractmethod
    async def find_by_id(self, partnership_id: PartnershipId) -> Partnership | None:
        """Find a partnership by ID.

        Args:
            partnership_id: The partnership's unique identifier

        Returns:
            The partnership if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_active_for_user(self, user_id: UserId) -> Partnership | None:
        """Find the active partnership a user belongs to.

        Args:
            user_id: The participant

        Returns:
            The active partnership if any, None otherwise
        """
        pass

    @abstractmethod
    async def find_for_user(self, user_id: UserId) -> list[Partnership]:
        """List all partnerships involving a user, newest first.

        Args:
            user_id: The participant

        Returns:
            Partnerships in every status
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Partnership]:
        """List every partnership, newest first."""
        pass

    @abstractmethod
    async def find_active_user_ids(self) -> set[UserId]:
        """Return the ids of all users currently in an active partnership."""
        pass

    @abstractmethod
    async def find_expired_active(self, now: datetime) -> list[Partnership]:
        """Find active partnerships whose end date is at or before ``now``.

        Args:
            now: Reference time

        Returns:
            Partnerships due for completion
        """
        pass

    @abstractmethod
    async def count_active(self) -> int:
        """Count partnerships with ACTIVE status."""
        pass

    @abstractmethod
    async def create_if_available(self, partnership: Partnership) -> Partnership | None:
        """Insert an active partnership unless a participant is already booked.

        The availability check and the insert form one atomic unit scoped
        to the two participant ids.

        Args:
            partnership: The new active partnership

        Returns:
            The stored partnership, or None if either user already holds an
            active partnership
        """
        pass

    @abstractmethod
    async def update_status(
        self,
        partnership_id: PartnershipId,
        expected: PartnershipStatus,
        new_status: PartnershipStatus,
    ) -> Partnership | None:
        """Atomically change status if the current status equals ``expected``.

        Args:
            partnership_id: The partnership to update
            expected: Status the row must currently hold
            new_status: Status to write

        Returns:
            The updated partnership, or None if the row is missing or its
            status did not match
        """
        pass
