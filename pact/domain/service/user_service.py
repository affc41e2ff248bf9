"""User domain service."""

from datetime import datetime

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from pact.domain.error import (
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from pact.domain.model import User
from pact.domain.model.common import utc_now
from pact.domain.repository import UserRepository
from pact.domain.value import ContactPreference, Gender, UserId, Username

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_username(self, username: Username) -> User | None:
        """Get user by username.

        Args:
            username: Login name

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_by_username", username=username.root):
            return await self.user_repository.find_by_username(username)

    async def require_admin(self, user_id: UserId, action: str) -> User:
        """Load a user and check the administrator flag.

        Args:
            user_id: Acting user
            action: Human readable action, used in the error message

        Returns:
            The administrator

        Raises:
            NotFoundError: If the user does not exist
            NotAuthorizedError: If the user is not an administrator
        """
        user = await self.get_by_id(user_id)
        if not user.is_admin:
            logfire.warn("Admin action refused", user_id=str(user_id), action=action)
            raise NotAuthorizedError(action, str(user_id))
        return user

    async def create_user(self, user: User) -> User:
        """Create a new user.

        Args:
            user: User to create

        Returns:
            Created user

        Raises:
            ConflictError: If the username is already taken
        """
        with logfire.span(
            "user_service.create_user",
            user_id=str(user.id),
            username=user.username.root,
        ):
            existing = await self.user_repository.find_by_username(user.username)
            if existing:
                logfire.warn("Username already taken", username=user.username.root)
                raise ConflictError(
                    f"Username {user.username} is already taken",
                    reason="username_taken",
                )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                logfire.warn("Username taken concurrently", username=user.username.root)
                raise ConflictError(
                    f"Username {user.username} is already taken",
                    reason="username_taken",
                )

            logfire.info(
                "User created", user_id=str(saved.id), username=saved.username.root
            )
            return saved

    async def update_profile(
        self,
        user_id: UserId,
        name: str | None = None,
        gender: Gender | None = None,
        timezone: str | None = None,
        contact_preference: ContactPreference | None = None,
    ) -> User:
        """Update the fields a user may change about themselves.

        Fields left as None are unchanged. A gender change takes effect
        from the next matching cycle; an active partnership is kept.

        Args:
            user_id: User to update
            name: Display name
            gender: Compatibility category for matching
            timezone: IANA timezone name
            contact_preference: How the user wants to be reached

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
            ValidationError: If the name is blank
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            updates: dict = {}
            if name is not None:
                if not name.strip():
                    raise ValidationError("Name must not be blank")
                updates["name"] = name.strip()
            if gender is not None:
                updates["gender"] = gender
            if timezone is not None:
                updates["timezone"] = timezone.strip() or None
            if contact_preference is not None:
                updates["contact_preference"] = contact_preference

            if not updates:
                return user

            try:
                candidate = User.model_validate(
                    user.model_copy(update=updates).model_dump()
                )
            except PydanticValidationError as e:
                raise ValidationError(str(e))

            updated = await self.user_repository.save(candidate)
            logfire.info(
                "Profile updated", user_id=str(user_id), fields=sorted(updates)
            )
            return updated

    async def grant_admin(self, user_id: UserId) -> User:
        """Give a user administrator rights.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.grant_admin", user_id=str(user_id)):
            user = await self.get_by_id(user_id)
            if user.is_admin:
                return user
            promoted = await self.user_repository.save(
                user.model_copy(update={"is_admin": True})
            )
            logfire.info("User promoted to admin", user_id=str(user_id))
            return promoted

    async def record_login(self, user: User, now: datetime | None = None) -> User:
        """Stamp a successful login."""
        return await self.user_repository.save(
            user.model_copy(update={"last_login_at": now or utc_now()})
        )

    async def list_active(self) -> list[User]:
        """List users eligible for matching by activity flag."""
        with logfire.span("user_service.list_active"):
            users = await self.user_repository.find_active()
            logfire.info("Active users loaded", count=len(users))
            return users

    async def count_active(self) -> int:
        """Count active users."""
        return await self.user_repository.count_active()
