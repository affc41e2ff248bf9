"""Invite code routes (public)."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from pact.application.usecase.invite import VerifyInviteCodeUseCase
from pact.application.usecase.invite.verify_invite_code import (
    VerifyInviteCodeRequest,
    VerifyInviteCodeResponse,
)

router = APIRouter(prefix="/invites", tags=["invites"], route_class=DishkaRoute)


@router.post("/verify", response_model=VerifyInviteCodeResponse)
async def verify_invite_code(
    request: VerifyInviteCodeRequest,
    verify_use_case: FromDishka[VerifyInviteCodeUseCase],
) -> VerifyInviteCodeResponse:
    """Check whether an invite code can currently be used.

    Never consumes the code. An unusable code comes back with
    ``valid=false`` and one of not_found, exhausted, deactivated, expired.
    """
    return await verify_use_case.execute(request)
