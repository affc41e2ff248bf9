"""Exclusion repository interface."""

from abc import ABC, abstractmethod

from pact.domain.model.exclusion import Exclusion
from pact.domain.value import ExclusionId, UserId


class ExclusionRepository(ABC):
    """Repository for Exclusion entity.

    The store keeps every record it is given: it does not collapse
    duplicate (owner, excluded) pairs.
    """

    @abstractmethod
    async def save(self, exclusion: Exclusion) -> Exclusion:
        """Persist a new exclusion.

        Args:
            exclusion: The exclusion to store

        Returns:
            The stored exclusion
        """
        pass

    @abstractmethod
    async def find_by_id(self, exclusion_id: ExclusionId) -> Exclusion | None:
        """Find an exclusion by ID.

        Args:
            exclusion_id: The exclusion's unique identifier

        Returns:
            The exclusion if found, None otherwise
        """
        pass

    @abstractmethod
    async def delete(self, exclusion_id: ExclusionId) -> bool:
        """Delete an exclusion.

        Args:
            exclusion_id: The exclusion to delete

        Returns:
            True if a row was deleted, False if it did not exist
        """
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: UserId) -> list[Exclusion]:
        """List exclusions created by a user, oldest first.

        Args:
            owner_id: The excluding user

        Returns:
            List of exclusions
        """
        pass

    @abstractmethod
    async def exists(self, owner_id: UserId, excluded_id: UserId) -> bool:
        """Check whether owner_id excludes excluded_id.

        Directional: says nothing about excluded_id excluding owner_id.

        Args:
            owner_id: The excluding user
            excluded_id: The candidate partner

        Returns:
            True if at least one matching exclusion exists
        """
        pass
