"""Register user use case."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import BaseModel, Field

from pact.domain.error import ConflictError, ValidationError
from pact.domain.model import User
from pact.domain.model.common import utc_now
from pact.domain.service import AuthService, InviteService, JWTService, UserService
from pact.domain.value import ContactPreference, Gender, UserId, Username


class RegisterUserRequest(BaseModel):
    """Register user request."""

    username: str
    name: str = Field(min_length=1, max_length=100)
    gender: Gender
    contact_preference: ContactPreference = ContactPreference.APP_ONLY
    timezone: str | None = None
    invite_code: str
    password: str = Field(min_length=8, max_length=72)


class RegisterUserResponse(BaseModel):
    """Register user response."""

    user_id: str
    username: str
    token: str  # Session JWT
    created_at: datetime


class RegisterUserUseCase:
    """Use case for creating an account with an invite code.

    Consuming the code and creating the user form one unit: if the user
    cannot be created, the consumption is released before the error
    propagates. In production the request transaction also rolls back.
    """

    def __init__(
        self,
        user_service: UserService,
        invite_service: InviteService,
        jwt_service: JWTService,
        auth_service: AuthService,
    ) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
            invite_service: Invite domain service
            jwt_service: JWT domain service
            auth_service: Password hashing
        """
        self.user_service = user_service
        self.invite_service = invite_service
        self.jwt_service = jwt_service
        self.auth_service = auth_service

    async def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """Register a new user.

        Args:
            request: Registration details and invite code

        Returns:
            The new user's id and a session token

        Raises:
            ValidationError: If the username is malformed or the code is unusable
            ConflictError: If the username is taken or the code was used up
                concurrently
        """
        with logfire.span("register_user.execute", username=request.username):
            try:
                username = Username(request.username)
            except ValueError as e:
                raise ValidationError(str(e))

            now = utc_now()
            verification = await self.invite_service.verify(request.invite_code, now)
            if not verification.valid:
                logfire.warn(
                    "Registration with unusable invite code",
                    reason=verification.reason.value,
                )
                raise ValidationError(
                    f"Invite code is {verification.reason.value.replace('_', ' ')}"
                )

            # Fail before touching the code when the name is already taken
            if await self.user_service.get_by_username(username):
                raise ConflictError(
                    f"Username {username} is already taken", reason="username_taken"
                )
            if not request.name.strip():
                raise ValidationError("Name must not be blank")
            password_hash = self.auth_service.hash_password(request.password)

            user_id = UserId(uuid4())
            invite_code = await self.invite_service.consume(
                request.invite_code, user_id, now
            )

            try:
                user = await self.user_service.create_user(
                    self._build_user(user_id, username, request, password_hash, now)
                )
            except Exception:
                logfire.warn(
                    "User creation failed after invite consumption, releasing",
                    code=invite_code.code.root,
                    user_id=str(user_id),
                )
                await self.invite_service.release(request.invite_code, user_id)
                raise

            token = self.jwt_service.create_token(str(user.id), user.username.root)
            logfire.info(
                "User registered",
                user_id=str(user.id),
                code=invite_code.code.root,
            )
            return RegisterUserResponse(
                user_id=str(user.id),
                username=user.username.root,
                token=token,
                created_at=user.created_at,
            )

    def _build_user(
        self,
        user_id: UserId,
        username: Username,
        request: RegisterUserRequest,
        password_hash: str,
        now: datetime,
    ) -> User:
        return User(
            id=user_id,
            username=username,
            name=request.name.strip(),
            gender=request.gender,
            contact_preference=request.contact_preference,
            timezone=request.timezone,
            password_hash=password_hash,
            created_at=now,
        )
