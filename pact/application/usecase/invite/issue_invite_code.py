"""Issue invite code use case."""

from uuid import UUID

import logfire
from pydantic import AwareDatetime, BaseModel, Field

from pact.application.usecase.base import BaseUseCase
from pact.application.usecase.invite.items import InviteCodeItem
from pact.domain.service import InviteService, UserService
from pact.domain.value import UserId


class IssueInviteCodeRequest(BaseModel):
    """Request to issue an invite code."""

    admin_id: str
    max_uses: int | None = Field(default=None, ge=1)
    expires_at: AwareDatetime | None = None
    code: str | None = None  # Custom code; generated when omitted


class IssueInviteCodeResponse(BaseModel):
    """Issued invite code."""

    invite_code: InviteCodeItem


class IssueInviteCodeUseCase(BaseUseCase):
    """Use case for an administrator issuing a registration code."""

    def __init__(self, invite_service: InviteService, user_service: UserService) -> None:
        """Initialize use case.

        Args:
            invite_service: Invite domain service
            user_service: User domain service
        """
        self.invite_service = invite_service
        self.user_service = user_service

    async def execute(self, request: IssueInviteCodeRequest) -> IssueInviteCodeResponse:
        """Issue a code.

        Raises:
            NotAuthorizedError: If the caller is not an administrator
            ValidationError: If the parameters are invalid
            ConflictError: If a custom code already exists
        """
        admin_id = UserId(UUID(request.admin_id))
        with logfire.span("issue_invite_code.execute", admin_id=str(admin_id)):
            await self.user_service.require_admin(admin_id, "issue invite codes")
            invite_code = await self.invite_service.issue(
                created_by=admin_id,
                max_uses=request.max_uses,
                expires_at=request.expires_at,
                code=request.code,
            )
            return IssueInviteCodeResponse(
                invite_code=InviteCodeItem.from_entity(invite_code)
            )
