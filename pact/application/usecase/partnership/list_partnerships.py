"""List partnerships use case."""

from uuid import UUID

from pydantic import BaseModel

from pact.application.usecase.base import BaseUseCase
from pact.application.usecase.partnership.items import PartnershipItem
from pact.domain.service import PartnershipService, UserService
from pact.domain.value import UserId


class ListPartnershipsRequest(BaseModel):
    """List partnerships request."""

    admin_id: str


class ListPartnershipsResponse(BaseModel):
    """Every partnership, newest first."""

    partnerships: list[PartnershipItem]


class ListPartnershipsUseCase(BaseUseCase):
    """Use case for the administrator's partnership overview."""

    def __init__(
        self, partnership_service: PartnershipService, user_service: UserService
    ) -> None:
        self.partnership_service = partnership_service
        self.user_service = user_service

    async def execute(
        self, request: ListPartnershipsRequest
    ) -> ListPartnershipsResponse:
        admin_id = UserId(UUID(request.admin_id))
        await self.user_service.require_admin(admin_id, "list partnerships")
        partnerships = await self.partnership_service.list_all()
        return ListPartnershipsResponse(
            partnerships=[PartnershipItem.from_entity(p) for p in partnerships]
        )
