"""Get current user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from pact.domain.model import User
from pact.domain.service import UserService
from pact.domain.value import ContactPreference, Gender, UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    username: str
    name: str
    gender: Gender
    contact_preference: ContactPreference
    timezone: str | None
    is_active: bool
    is_admin: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "GetCurrentUserResponse":
        return cls(
            user_id=str(user.id),
            username=user.username.root,
            name=user.name,
            gender=user.gender,
            contact_preference=user.contact_preference,
            timezone=user.timezone,
            is_active=user.is_active,
            is_admin=user.is_admin,
            created_at=user.created_at,
        )


class GetCurrentUserUseCase:
    """Use case for loading the authenticated user's profile."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        return GetCurrentUserResponse.from_entity(user)
