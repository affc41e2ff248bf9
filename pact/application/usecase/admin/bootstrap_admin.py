"""Bootstrap admin use case."""

from uuid import uuid4

import logfire
from pydantic import BaseModel, Field

from pact.domain.error import ValidationError
from pact.domain.model import User
from pact.domain.service import AuthService, UserService
from pact.domain.value import ContactPreference, Gender, UserId, Username


class BootstrapAdminRequest(BaseModel):
    """Request to create or promote an administrator."""

    setup_token: str | None
    username: str
    password: str = Field(min_length=8, max_length=72)
    name: str = Field(min_length=1, max_length=100)
    gender: Gender
    contact_preference: ContactPreference = ContactPreference.APP_ONLY
    timezone: str | None = Field(default=None, max_length=64)


class BootstrapAdminResponse(BaseModel):
    """Bootstrapped administrator."""

    user_id: str
    username: str
    is_admin: bool
    created: bool  # False when an existing account was promoted


class BootstrapAdminUseCase:
    """Use case for creating the first administrator on a fresh deploy.

    Needs no session: the caller proves itself with the setup token from
    settings. An existing username is promoted without touching its
    password; otherwise a new admin account is created.
    """

    def __init__(self, auth_service: AuthService, user_service: UserService) -> None:
        """Initialize bootstrap admin use case.

        Args:
            auth_service: Setup token check and password hashing
            user_service: User domain service
        """
        self.auth_service = auth_service
        self.user_service = user_service

    async def execute(self, request: BootstrapAdminRequest) -> BootstrapAdminResponse:
        """Create or promote the administrator.

        Raises:
            AuthenticationError: If bootstrap is disabled or the token is wrong
            ValidationError: If the username or password is malformed
            ConflictError: If the username was taken concurrently
        """
        with logfire.span("bootstrap_admin.execute", username=request.username):
            self.auth_service.check_setup_token(request.setup_token)

            try:
                username = Username(request.username)
            except ValueError as e:
                raise ValidationError(str(e))

            existing = await self.user_service.get_by_username(username)
            if existing:
                user = await self.user_service.grant_admin(existing.id)
                return BootstrapAdminResponse(
                    user_id=str(user.id),
                    username=user.username.root,
                    is_admin=user.is_admin,
                    created=False,
                )

            if not request.name.strip():
                raise ValidationError("Name must not be blank")

            user = await self.user_service.create_user(
                User(
                    id=UserId(uuid4()),
                    username=username,
                    name=request.name.strip(),
                    gender=request.gender,
                    contact_preference=request.contact_preference,
                    timezone=request.timezone,
                    is_admin=True,
                    password_hash=self.auth_service.hash_password(request.password),
                )
            )
            logfire.info("Admin account created", user_id=str(user.id))
            return BootstrapAdminResponse(
                user_id=str(user.id),
                username=user.username.root,
                is_admin=user.is_admin,
                created=True,
            )
