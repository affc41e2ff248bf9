"""Get partnership history use case."""

from uuid import UUID

from pydantic import BaseModel

from pact.application.usecase.partnership.items import PartnershipItem
from pact.domain.service import PartnershipService
from pact.domain.value import UserId


class GetPartnershipHistoryRequest(BaseModel):
    """Get partnership history request."""

    user_id: str


class GetPartnershipHistoryResponse(BaseModel):
    """Every partnership the user took part in, newest first."""

    partnerships: list[PartnershipItem]


class GetPartnershipHistoryUseCase:
    """Use case for listing a user's past and present partnerships."""

    def __init__(self, partnership_service: PartnershipService) -> None:
        self.partnership_service = partnership_service

    async def execute(
        self, request: GetPartnershipHistoryRequest
    ) -> GetPartnershipHistoryResponse:
        user_id = UserId(UUID(request.user_id))
        partnerships = await self.partnership_service.get_history_for_user(user_id)
        return GetPartnershipHistoryResponse(
            partnerships=[PartnershipItem.from_entity(p, user_id) for p in partnerships]
        )
