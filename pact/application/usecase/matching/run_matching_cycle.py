"""Run matching cycle use case."""

from uuid import UUID

import logfire
from pydantic import AwareDatetime, BaseModel

from pact.application.usecase.base import BaseUseCase
from pact.application.usecase.partnership.items import PartnershipItem
from pact.domain.model.common import utc_now
from pact.domain.service import MatchingService, UserService
from pact.domain.value import UserId


class RunMatchingCycleRequest(BaseModel):
    """Run matching cycle request."""

    admin_id: str
    current_date: AwareDatetime | None = None  # Defaults to the current time


class RunMatchingCycleResponse(BaseModel):
    """Outcome of a matching cycle."""

    partnerships: list[PartnershipItem]
    excluded_pairs: list[tuple[str, str]]
    failed_pairs: list[tuple[str, str]]
    unmatched: list[str]


class RunMatchingCycleUseCase(BaseUseCase):
    """Use case for an administrator triggering a matching cycle."""

    def __init__(
        self, matching_service: MatchingService, user_service: UserService
    ) -> None:
        """Initialize run matching cycle use case.

        Args:
            matching_service: Matching domain service
            user_service: User domain service
        """
        self.matching_service = matching_service
        self.user_service = user_service

    async def execute(self, request: RunMatchingCycleRequest) -> RunMatchingCycleResponse:
        """Run one matching cycle.

        Args:
            request: Acting administrator and cycle start date

        Returns:
            Created partnerships and the users left unmatched

        Raises:
            NotAuthorizedError: If the caller is not an administrator
            ConflictError: If a cycle is already running
        """
        admin_id = UserId(UUID(request.admin_id))
        with logfire.span("run_matching_cycle.execute", admin_id=str(admin_id)):
            await self.user_service.require_admin(admin_id, "run matching")

            result = await self.matching_service.run_matching_cycle(
                request.current_date or utc_now()
            )
            return RunMatchingCycleResponse(
                partnerships=[PartnershipItem.from_entity(p) for p in result.partnerships],
                excluded_pairs=[(str(a), str(b)) for a, b in result.excluded_pairs],
                failed_pairs=[(str(a), str(b)) for a, b in result.failed_pairs],
                unmatched=[str(user_id) for user_id in result.unmatched],
            )
