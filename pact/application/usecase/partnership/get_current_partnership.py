"""Get current partnership use case."""

from uuid import UUID

from pydantic import BaseModel

from pact.application.usecase.partnership.items import PartnershipItem
from pact.domain.service import PartnershipService
from pact.domain.value import UserId


class GetCurrentPartnershipRequest(BaseModel):
    """Get current partnership request."""

    user_id: str


class GetCurrentPartnershipResponse(BaseModel):
    """The caller's active partnership, if any."""

    partnership: PartnershipItem | None


class GetCurrentPartnershipUseCase:
    """Use case for looking up a user's active partnership."""

    def __init__(self, partnership_service: PartnershipService) -> None:
        self.partnership_service = partnership_service

    async def execute(
        self, request: GetCurrentPartnershipRequest
    ) -> GetCurrentPartnershipResponse:
        user_id = UserId(UUID(request.user_id))
        partnership = await self.partnership_service.get_active_for_user(user_id)
        return GetCurrentPartnershipResponse(
            partnership=PartnershipItem.from_entity(partnership, user_id)
            if partnership
            else None
        )
