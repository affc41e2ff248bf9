"""Deactivate invite code use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from pact.application.usecase.base import BaseUseCase
from pact.application.usecase.invite.items import InviteCodeItem
from pact.domain.service import InviteService, UserService
from pact.domain.value import UserId


class DeactivateInviteCodeRequest(BaseModel):
    """Deactivate invite code request."""

    admin_id: str
    code: str


class DeactivateInviteCodeResponse(BaseModel):
    """Deactivated invite code."""

    invite_code: InviteCodeItem


class DeactivateInviteCodeUseCase(BaseUseCase):
    """Use case for revoking an invite code. Irreversible."""

    def __init__(self, invite_service: InviteService, user_service: UserService) -> None:
        self.invite_service = invite_service
        self.user_service = user_service

    async def execute(
        self, request: DeactivateInviteCodeRequest
    ) -> DeactivateInviteCodeResponse:
        admin_id = UserId(UUID(request.admin_id))
        with logfire.span(
            "deactivate_invite_code.execute", admin_id=str(admin_id), code=request.code
        ):
            await self.user_service.require_admin(admin_id, "deactivate invite codes")
            invite_code = await self.invite_service.deactivate(request.code)
            return DeactivateInviteCodeResponse(
                invite_code=InviteCodeItem.from_entity(invite_code)
            )
