"""Update profile use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from pact.application.usecase.account.get_current_user import GetCurrentUserResponse
from pact.domain.service import UserService
from pact.domain.value import ContactPreference, Gender, UserId


class UpdateProfileRequest(BaseModel):
    """Profile changes; omitted fields stay as they are."""

    user_id: str
    name: str | None = Field(default=None, min_length=1, max_length=100)
    gender: Gender | None = None
    timezone: str | None = Field(default=None, max_length=64)
    contact_preference: ContactPreference | None = None


class UpdateProfileUseCase:
    """Use case for a user editing their own profile."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: UpdateProfileRequest) -> GetCurrentUserResponse:
        user = await self.user_service.update_profile(
            UserId(UUID(request.user_id)),
            name=request.name,
            gender=request.gender,
            timezone=request.timezone,
            contact_preference=request.contact_preference,
        )
        return GetCurrentUserResponse.from_entity(user)
