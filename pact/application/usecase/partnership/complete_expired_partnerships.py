"""Complete expired partnerships use case."""

from uuid import UUID

from pydantic import AwareDatetime, BaseModel

from pact.application.usecase.base import BaseUseCase
from pact.application.usecase.partnership.items import PartnershipItem
from pact.domain.service import PartnershipService, UserService
from pact.domain.value import UserId


class CompleteExpiredPartnershipsRequest(BaseModel):
    """Complete expired partnerships request."""

    admin_id: str
    now: AwareDatetime | None = None  # Defaults to the current time


class CompleteExpiredPartnershipsResponse(BaseModel):
    """Partnerships completed by the sweep."""

    completed: list[PartnershipItem]


class CompleteExpiredPartnershipsUseCase(BaseUseCase):
    """Use case for the sweep that closes partnerships past their end date."""

    def __init__(
        self, partnership_service: PartnershipService, user_service: UserService
    ) -> None:
        self.partnership_service = partnership_service
        self.user_service = user_service

    async def execute(
        self, request: CompleteExpiredPartnershipsRequest
    ) -> CompleteExpiredPartnershipsResponse:
        admin_id = UserId(UUID(request.admin_id))
        await self.user_service.require_admin(admin_id, "sweep partnerships")
        completed = await self.partnership_service.complete_expired(request.now)
        return CompleteExpiredPartnershipsResponse(
            completed=[PartnershipItem.from_entity(p) for p in completed]
        )
