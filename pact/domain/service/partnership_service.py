"""Partnership lifecycle domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from pact.domain.error import (
    ConflictError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from pact.domain.model import Partnership
from pact.domain.model.common import utc_now
from pact.domain.repository import PartnershipRepository
from pact.domain.value import PartnershipId, PartnershipStatus, UserId

from .base import Service


class PartnershipService(Service):
    """Domain service owning partnership creation and status transitions.

    Creation is guarded per participant and transitions are conditional
    updates, so a user is never in two active partnerships and terminal
    partnerships never change again.
    """

    def __init__(self, partnership_repository: PartnershipRepository) -> None:
        """Initialize partnership service.

        Args:
            partnership_repository: Partnership repository
        """
        self.partnership_repository = partnership_repository

    async def create(
        self,
        user_a_id: UserId,
        user_b_id: UserId,
        start_date: datetime,
        end_date: datetime,
    ) -> Partnership:
        """Create an active partnership between two users.

        Args:
            user_a_id: First participant
            user_b_id: Second participant
            start_date: Start of the partnership
            end_date: Scheduled end

        Returns:
            Created partnership

        Raises:
            ValidationError: If the users are the same or the dates are inverted
            ConflictError: If either user already holds an active partnership
        """
        with logfire.span(
            "partnership_service.create",
            user_a_id=str(user_a_id),
            user_b_id=str(user_b_id),
        ):
            if user_a_id == user_b_id:
                raise ValidationError("A partnership needs two distinct users")
            if end_date <= start_date:
                raise ValidationError("Partnership must end after it starts")

            partnership = Partnership(
                id=PartnershipId(uuid4()),
                user_a_id=user_a_id,
                user_b_id=user_b_id,
                start_date=start_date,
                end_date=end_date,
                status=PartnershipStatus.ACTIVE,
                created_at=utc_now(),
            )
            saved = await self.partnership_repository.create_if_available(partnership)
            if saved is None:
                logfire.warn(
                    "Partnership refused, participant already booked",
                    user_a_id=str(user_a_id),
                    user_b_id=str(user_b_id),
                )
                raise ConflictError(
                    "A user already holds an active partnership",
                    reason="already_partnered",
                )

            logfire.info(
                "Partnership created",
                partnership_id=str(saved.id),
                end_date=saved.end_date.isoformat(),
            )
            return saved

    async def get_by_id(self, partnership_id: PartnershipId) -> Partnership:
        """Get partnership by ID.

        Raises:
            NotFoundError: If the partnership does not exist
        """
        partnership = await self.partnership_repository.find_by_id(partnership_id)
        if not partnership:
            raise NotFoundError("Partnership", str(partnership_id))
        return partnership

    async def complete(self, partnership_id: PartnershipId) -> Partnership:
        """Mark an active partnership as having run its course."""
        return await self._transition(partnership_id, PartnershipStatus.COMPLETED)

    async def end_early(self, partnership_id: PartnershipId) -> Partnership:
        """End an active partnership before its scheduled end."""
        return await self._transition(partnership_id, PartnershipStatus.ENDED_EARLY)

    async def cancel(self, partnership_id: PartnershipId) -> Partnership:
        """Cancel an active partnership."""
        return await self._transition(partnership_id, PartnershipStatus.CANCELLED)

    async def _transition(
        self, partnership_id: PartnershipId, target: PartnershipStatus
    ) -> Partnership:
        with logfire.span(
            "partnership_service.transition",
            partnership_id=str(partnership_id),
            target=target.value,
        ):
            current = await self.get_by_id(partnership_id)
            if not current.status.can_transition_to(target):
                logfire.warn(
                    "Illegal partnership transition",
                    partnership_id=str(partnership_id),
                    current=current.status.value,
                    target=target.value,
                )
                raise InvalidStateError(
                    "partnership", str(partnership_id), current.status.value, target.value
                )

            updated = await self.partnership_repository.update_status(
                partnership_id, current.status, target
            )
            if updated is None:
                # Lost a race with another transition
                latest = await self.get_by_id(partnership_id)
                raise InvalidStateError(
                    "partnership", str(partnership_id), latest.status.value, target.value
                )

            logfire.info(
                "Partnership status changed",
                partnership_id=str(partnership_id),
                status=updated.status.value,
            )
            return updated

    async def get_active_for_user(self, user_id: UserId) -> Partnership | None:
        """Get the active partnership of a user, if any."""
        with logfire.span(
            "partnership_service.get_active_for_user", user_id=str(user_id)
        ):
            return await self.partnership_repository.find_active_for_user(user_id)

    async def get_history_for_user(self, user_id: UserId) -> list[Partnership]:
        """Get every partnership involving a user, newest first."""
        with logfire.span(
            "partnership_service.get_history_for_user", user_id=str(user_id)
        ):
            return await self.partnership_repository.find_for_user(user_id)

    async def list_all(self) -> list[Partnership]:
        """List every partnership, newest first."""
        return await self.partnership_repository.find_all()

    async def active_user_ids(self) -> set[UserId]:
        """Ids of users currently in an active partnership."""
        return await self.partnership_repository.find_active_user_ids()

    async def count_active(self) -> int:
        """Count active partnerships."""
        return await self.partnership_repository.count_active()

    async def complete_expired(self, now: datetime | None = None) -> list[Partnership]:
        """Complete every active partnership whose end date has passed.

        Args:
            now: Reference time, defaults to the current time

        Returns:
            The partnerships completed by this sweep
        """
        now = now or utc_now()
        with logfire.span("partnership_service.complete_expired"):
            completed = []
            for partnership in await self.partnership_repository.find_expired_active(
                now
            ):
                try:
                    completed.append(await self.complete(partnership.id))
                except InvalidStateError:
                    # Ended or cancelled since it was listed
                    continue

            logfire.info("Expired partnerships completed", count=len(completed))
            return completed
