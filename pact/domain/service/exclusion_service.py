"""Exclusion domain service."""

from uuid import uuid4

import logfire

from pact.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from pact.domain.model import Exclusion
from pact.domain.model.common import utc_now
from pact.domain.repository import ExclusionRepository
from pact.domain.value import ExclusionId, UserId

from .base import Service


class ExclusionService(Service):
    """Domain service for the exclusion store.

    The store does not deduplicate: callers that want set semantics check
    ``is_excluded`` before ``add_exclusion``.
    """

    def __init__(self, exclusion_repository: ExclusionRepository) -> None:
        """Initialize exclusion service.

        Args:
            exclusion_repository: Exclusion repository
        """
        self.exclusion_repository = exclusion_repository

    async def add_exclusion(
        self, owner_id: UserId, excluded_id: UserId, reason: str | None = None
    ) -> Exclusion:
        """Record that owner_id never wants to be matched with excluded_id.

        Args:
            owner_id: The excluding user
            excluded_id: The user to avoid
            reason: Optional free-text reason

        Returns:
            Created exclusion

        Raises:
            ValidationError: If a user tries to exclude themselves
        """
        with logfire.span(
            "exclusion_service.add_exclusion",
            owner_id=str(owner_id),
            excluded_id=str(excluded_id),
        ):
            if owner_id == excluded_id:
                raise ValidationError("Users cannot exclude themselves")

            exclusion = Exclusion(
                id=ExclusionId(uuid4()),
                owner_id=owner_id,
                excluded_id=excluded_id,
                reason=reason.strip() if reason and reason.strip() else None,
                created_at=utc_now(),
            )
            saved = await self.exclusion_repository.save(exclusion)
            logfire.info(
                "Exclusion added",
                exclusion_id=str(saved.id),
                owner_id=str(owner_id),
            )
            return saved

    async def is_excluded(self, owner_id: UserId, candidate_id: UserId) -> bool:
        """Directional check: does owner_id exclude candidate_id?"""
        return await self.exclusion_repository.exists(owner_id, candidate_id)

    async def either_excludes(self, user_a: UserId, user_b: UserId) -> bool:
        """Check both directions of a candidate pair.

        Args:
            user_a: First candidate
            user_b: Second candidate

        Returns:
            True if a excludes b or b excludes a
        """
        if await self.is_excluded(user_a, user_b):
            return True
        return await self.is_excluded(user_b, user_a)

    async def remove_exclusion(
        self, exclusion_id: ExclusionId, owner_id: UserId | None = None
    ) -> None:
        """Delete an exclusion.

        Args:
            exclusion_id: Exclusion to delete
            owner_id: If given, the exclusion must belong to this user

        Raises:
            NotFoundError: If the exclusion does not exist
            NotAuthorizedError: If owner_id is given and does not own it
        """
        with logfire.span(
            "exclusion_service.remove_exclusion", exclusion_id=str(exclusion_id)
        ):
            exclusion = await self.exclusion_repository.find_by_id(exclusion_id)
            if not exclusion:
                raise NotFoundError("Exclusion", str(exclusion_id))

            if owner_id is not None and exclusion.owner_id != owner_id:
                logfire.warn(
                    "Exclusion removal by non-owner",
                    exclusion_id=str(exclusion_id),
                    user_id=str(owner_id),
                )
                raise NotAuthorizedError("remove this exclusion", str(owner_id))

            if not await self.exclusion_repository.delete(exclusion_id):
                raise NotFoundError("Exclusion", str(exclusion_id))
            logfire.info("Exclusion removed", exclusion_id=str(exclusion_id))

    async def list_for_owner(self, owner_id: UserId) -> list[Exclusion]:
        """List exclusions created by a user."""
        return await self.exclusion_repository.find_by_owner(owner_id)
