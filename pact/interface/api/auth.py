"""Session cookie helpers shared by the routes."""

from fastapi import HTTPException, Response, status

from pact.config import Settings
from pact.domain.service import JWTService
from pact.util.jwt import JWTError

COOKIE_NAME = "auth_token"


def require_user_id(jwt_service: JWTService, auth_token: str | None) -> str:
    """Resolve the authenticated user id from the session cookie.

    Raises:
        HTTPException: 401 if the cookie is missing or the token is invalid
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        payload = jwt_service.verify_token(auth_token)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    return payload.user_id


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session token as an HTTP-only cookie."""
    # Cross-site cookies in production require SameSite=None with Secure
    is_production = settings.environment == "production"
    response.set_cookie(
        key=COOKIE_NAME,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        domain=settings.api.cookie_domain if is_production else None,
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    """Delete the session cookie with the same domain/path it was set with."""
    is_production = settings.environment == "production"
    response.delete_cookie(
        key=COOKIE_NAME,
        domain=settings.api.cookie_domain if is_production else None,
        path="/",
    )
