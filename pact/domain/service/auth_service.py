"""Authentication domain service."""

import secrets

import logfire

from pact.config import AuthSettings
from pact.domain.error import AuthenticationError, ValidationError
from pact.domain.model import User
from pact.domain.value import Username
from pact.util.password import PasswordError, hash_password, verify_password

from .base import Service
from .user_service import UserService

MIN_PASSWORD_LENGTH = 8

# Same message for unknown users and wrong passwords
INVALID_CREDENTIALS = "Invalid username or password"


class AuthService(Service):
    """Domain service for password login and administrator bootstrap."""

    def __init__(self, user_service: UserService, auth_settings: AuthSettings) -> None:
        """Initialize auth service.

        Args:
            user_service: User domain service
            auth_settings: Authentication settings
        """
        self.user_service = user_service
        self.auth_settings = auth_settings

    def hash_password(self, password: str) -> str:
        """Check the password policy and hash the password.

        Raises:
            ValidationError: If the password is too short or too long
        """
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        try:
            return hash_password(password, self.auth_settings.password_hash_rounds)
        except PasswordError as e:
            raise ValidationError(str(e))

    async def authenticate(self, username: str, password: str) -> User:
        """Resolve a user from their username and password.

        Args:
            username: Login name
            password: Plain-text password

        Returns:
            The authenticated user

        Raises:
            AuthenticationError: If the credentials are wrong or the account
                is deactivated
        """
        with logfire.span("auth_service.authenticate", username=username):
            try:
                parsed = Username(username)
            except ValueError:
                raise AuthenticationError(INVALID_CREDENTIALS)

            user = await self.user_service.get_by_username(parsed)
            if (
                user is None
                or user.password_hash is None
                or not verify_password(password, user.password_hash)
            ):
                logfire.warn("Login failed", username=parsed.root)
                raise AuthenticationError(INVALID_CREDENTIALS)

            if not user.is_active:
                logfire.warn("Login to deactivated account", user_id=str(user.id))
                raise AuthenticationError("Account has been deactivated")

            return user

    def check_setup_token(self, token: str | None) -> None:
        """Check the shared secret that guards administrator bootstrap.

        Raises:
            AuthenticationError: If bootstrap is disabled or the token is wrong
        """
        expected = self.auth_settings.admin_setup_token
        if not expected:
            logfire.warn("Admin bootstrap attempted while disabled")
            raise AuthenticationError("Admin bootstrap is disabled")
        if not token or not secrets.compare_digest(
            token.encode("utf-8"), expected.encode("utf-8")
        ):
            logfire.warn("Admin bootstrap with invalid setup token")
            raise AuthenticationError("Invalid admin setup token")
