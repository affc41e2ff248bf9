"""List invite codes use case."""

from uuid import UUID

from pydantic import BaseModel

from pact.application.usecase.base import BaseUseCase
from pact.application.usecase.invite.items import InviteCodeItem
from pact.domain.service import InviteService, UserService
from pact.domain.value import UserId


class ListInviteCodesRequest(BaseModel):
    """List invite codes request."""

    admin_id: str


class ListInviteCodesResponse(BaseModel):
    """Every invite code, newest first."""

    invite_codes: list[InviteCodeItem]


class ListInviteCodesUseCase(BaseUseCase):
    """Use case for the administrator's invite code overview."""

    def __init__(self, invite_service: InviteService, user_service: UserService) -> None:
        self.invite_service = invite_service
        self.user_service = user_service

    async def execute(self, request: ListInviteCodesRequest) -> ListInviteCodesResponse:
        admin_id = UserId(UUID(request.admin_id))
        await self.user_service.require_admin(admin_id, "list invite codes")
        invite_codes = await self.invite_service.list_all()
        return ListInviteCodesResponse(
            invite_codes=[InviteCodeItem.from_entity(c) for c in invite_codes]
        )
