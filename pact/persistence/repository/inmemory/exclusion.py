"""In-memory exclusion repository for testing."""

from pact.domain.model.exclusion import Exclusion
from pact.domain.repository.exclusion import ExclusionRepository
from pact.domain.value import ExclusionId, UserId


class InMemoryExclusionRepository(ExclusionRepository):
    """In-memory implementation of ExclusionRepository for testing."""

    def __init__(self) -> None:
        self._exclusions: list[Exclusion] = []

    async def save(self, exclusion: Exclusion) -> Exclusion:
        """Append an exclusion; duplicates are kept."""
        self._exclusions.append(exclusion)
        return exclusion

    async def find_by_id(self, exclusion_id: ExclusionId) -> Exclusion | None:
        """Find an exclusion by ID."""
        for exclusion in self._exclusions:
            if exclusion.id == exclusion_id:
                return exclusion
        return None

    async def delete(self, exclusion_id: ExclusionId) -> bool:
        """Delete an exclusion by ID."""
        before = len(self._exclusions)
        self._exclusions = [e for e in self._exclusions if e.id != exclusion_id]
        return len(self._exclusions) < before

    async def find_by_owner(self, owner_id: UserId) -> list[Exclusion]:
        """List an owner's exclusions, oldest first."""
        return sorted(
            (e for e in self._exclusions if e.owner_id == owner_id),
            key=lambda e: e.created_at,
        )

    async def exists(self, owner_id: UserId, excluded_id: UserId) -> bool:
        """Directional existence check."""
        return any(
            e.owner_id == owner_id and e.excluded_id == excluded_id
            for e in self._exclusions
        )
