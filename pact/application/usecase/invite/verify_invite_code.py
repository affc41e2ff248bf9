"""Verify invite code use case."""

from pydantic import BaseModel

from pact.domain.service import InviteService
from pact.domain.value import InviteRejection


class VerifyInviteCodeRequest(BaseModel):
    """Verify invite code request."""

    code: str


class VerifyInviteCodeResponse(BaseModel):
    """Verify invite code response."""

    valid: bool
    reason: InviteRejection | None = None


class VerifyInviteCodeUseCase:
    """Use case for checking a code before registration.

    This lets the sign-up form reject a bad code early; registration
    re-validates when it consumes the code.
    """

    def __init__(self, invite_service: InviteService) -> None:
        self.invite_service = invite_service

    async def execute(
        self, request: VerifyInviteCodeRequest
    ) -> VerifyInviteCodeResponse:
        verification = await self.invite_service.verify(request.code)
        return VerifyInviteCodeResponse(
            valid=verification.valid, reason=verification.reason
        )
