"""Login user use case."""

import logfire
from pydantic import BaseModel

from pact.domain.service import AuthService, JWTService, UserService


class LoginUserRequest(BaseModel):
    """Login request."""

    username: str
    password: str


class LoginUserResponse(BaseModel):
    """Login response."""

    user_id: str
    username: str
    is_admin: bool
    token: str  # Session JWT


class LoginUserUseCase:
    """Use case for starting a session with a username and password."""

    def __init__(
        self,
        auth_service: AuthService,
        user_service: UserService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize login use case.

        Args:
            auth_service: Credential checks
            user_service: User domain service
            jwt_service: JWT domain service
        """
        self.auth_service = auth_service
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginUserRequest) -> LoginUserResponse:
        """Check credentials and issue a session token.

        Raises:
            AuthenticationError: If the credentials are wrong or the account
                is deactivated
        """
        with logfire.span("login_user.execute", username=request.username):
            user = await self.auth_service.authenticate(
                request.username, request.password
            )
            user = await self.user_service.record_login(user)

            token = self.jwt_service.create_token(str(user.id), user.username.root)
            logfire.info("User logged in", user_id=str(user.id))
            return LoginUserResponse(
                user_id=str(user.id),
                username=user.username.root,
                is_admin=user.is_admin,
                token=token,
            )
