"""Profile routes for the signed-in user."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from pact.application.usecase.account import (
    GetCurrentUserUseCase,
    UpdateProfileUseCase,
)
from pact.application.usecase.account.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
)
from pact.application.usecase.account.update_profile import UpdateProfileRequest
from pact.domain.service import JWTService
from pact.domain.value import ContactPreference, Gender
from pact.interface.api.auth import require_user_id

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for editing the caller's profile."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    gender: Gender | None = None
    timezone: str | None = Field(default=None, max_length=64)
    contact_preference: ContactPreference | None = None


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_profile(
    use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetCurrentUserResponse:
    """Get the caller's profile."""
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(GetCurrentUserRequest(user_id=user_id))


@router.put("/me", response_model=GetCurrentUserResponse)
async def update_profile(
    request: UpdateProfileAPIRequest,
    use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetCurrentUserResponse:
    """Update name, gender, timezone or contact preference.

    Examples:
        PUT /users/me
        {"gender": "non_binary", "timezone": "Europe/Dublin"}
    """
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        UpdateProfileRequest(user_id=user_id, **request.model_dump())
    )
