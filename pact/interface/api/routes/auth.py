"""Registration and session routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from pydantic import BaseModel

from pact.application.usecase.account import (
    GetCurrentUserUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
)
from pact.application.usecase.account.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
)
from pact.application.usecase.account.login_user import (
    LoginUserRequest,
    LoginUserResponse,
)
from pact.application.usecase.account.register_user import (
    RegisterUserRequest,
    RegisterUserResponse,
)
from pact.config import Settings
from pact.domain.error import NotFoundError
from pact.domain.service import JWTService
from pact.interface.api.auth import clear_session_cookie, set_session_cookie

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Used by /auth/me to return current user if authenticated,
    or indicate unauthenticated state without raising an error.
    """

    authenticated: bool
    user: GetCurrentUserResponse | None = None


@router.post(
    "/register",
    response_model=RegisterUserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterUserRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUserUseCase],
    settings: FromDishka[Settings],
) -> RegisterUserResponse:
    """Register a new account with an invite code and start a session.

    Examples:
        POST /auth/register
        {
            "username": "alice",
            "name": "Alice",
            "gender": "female",
            "invite_code": "K7QM3XPA",
            "password": "correct horse"
        }
    """
    result = await register_use_case.execute(request)
    set_session_cookie(response, result.token, settings)
    logger.info(f"Registered user {result.username}, session cookie set")
    return result


@router.post("/login", response_model=LoginUserResponse)
async def login(
    request: LoginUserRequest,
    response: Response,
    login_use_case: FromDishka[LoginUserUseCase],
    settings: FromDishka[Settings],
) -> LoginUserResponse:
    """Start a session with a username and password (401 on bad credentials)."""
    result = await login_use_case.execute(request)
    set_session_cookie(response, result.token, settings)
    logger.info(f"User {result.username} logged in, session cookie set")
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    clear_session_cookie(response, settings)
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    Safe to call without a session: returns ``authenticated=false`` instead
    of an error so the frontend can check the session quietly.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if user_id is None:
        return AuthStatusResponse(authenticated=False)

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(user_id=user_id)
        )
    except NotFoundError:
        # Token outlived the account
        return AuthStatusResponse(authenticated=False)
    return AuthStatusResponse(authenticated=True, user=user)
