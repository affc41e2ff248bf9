"""In-memory partnership repository for testing."""

from datetime import datetime

from pact.domain.model.partnership import Partnership
from pact.domain.repository.partnership import PartnershipRepository
from pact.domain.value import PartnershipId, PartnershipStatus, UserId


def _newest_first(partnerships: list[Partnership]) -> list[Partnership]:
    # Stable sort over reversed insertion order: later inserts win ties
    return sorted(reversed(partnerships), key=lambda p: p.created_at, reverse=True)


class InMemoryPartnershipRepository(PartnershipRepository):
    """In-memory implementation of PartnershipRepository for testing.

    Check-and-insert runs without an await in between, so it is atomic
    on a single event loop.
    """

    def __init__(self) -> None:
        self._partnerships: dict[PartnershipId, Partnership] = {}

    async def find_by_id(self, partnership_id: PartnershipId) -> Partnership | None:
        """Find a partnership by ID."""
        return self._partnerships.get(partnership_id)

    async def find_active_for_user(self, user_id: UserId) -> Partnership | None:
        """Find a user's active partnership."""
        for partnership in self._partnerships.values():
            if (
                partnership.status == PartnershipStatus.ACTIVE
                and partnership.involves(user_id)
            ):
                return partnership
        return None

    async def find_for_user(self, user_id: UserId) -> list[Partnership]:
        """List a user's partnerships, newest first."""
        return _newest_first(
            [p for p in self._partnerships.values() if p.involves(user_id)]
        )

    async def find_all(self) -> list[Partnership]:
        """List every partnership, newest first."""
        return _newest_first(list(self._partnerships.values()))

    async def find_active_user_ids(self) -> set[UserId]:
        """Collect participants of active partnerships."""
        user_ids: set[UserId] = set()
        for partnership in self._partnerships.values():
            if partnership.status == PartnershipStatus.ACTIVE:
                user_ids.update((partnership.user_a_id, partnership.user_b_id))
        return user_ids

    async def find_expired_active(self, now: datetime) -> list[Partnership]:
        """Find active partnerships that have reached their end date."""
        return [
            p
            for p in self._partnerships.values()
            if p.status == PartnershipStatus.ACTIVE and p.end_date <= now
        ]

    async def count_active(self) -> int:
        """Count active partnerships."""
        return sum(
            1
            for p in self._partnerships.values()
            if p.status == PartnershipStatus.ACTIVE
        )

    async def create_if_available(self, partnership: Partnership) -> Partnership | None:
        """Insert unless either participant is already booked."""
        for existing in self._partnerships.values():
            if existing.status == PartnershipStatus.ACTIVE and (
                existing.involves(partnership.user_a_id)
                or existing.involves(partnership.user_b_id)
            ):
                return None
        self._partnerships[partnership.id] = partnership
        return partnership

    async def update_status(
        self,
        partnership_id: PartnershipId,
        expected: PartnershipStatus,
        new_status: PartnershipStatus,
    ) -> Partnership | None:
        """Change status if it still equals ``expected``."""
        current = self._partnerships.get(partnership_id)
        if current is None or current.status != expected:
            return None
        updated = current.model_copy(update={"status": new_status})
        self._partnerships[partnership_id] = updated
        return updated
