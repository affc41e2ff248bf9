"""Invite ledger domain service."""

import secrets
from datetime import datetime

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from pact.config import InvitationSettings
from pact.domain.error import ConflictError, NotFoundError, ValidationError
from pact.domain.model import InviteCode
from pact.domain.model.common import utc_now
from pact.domain.repository import InviteCodeRepository
from pact.domain.value import (
    InviteCodeValue,
    InviteRejection,
    InviteVerification,
    UserId,
)

from .base import Service


def generate_code(length: int, alphabet: str) -> str:
    """Draw a random invite code from a cryptographically secure source."""
    return "".join(secrets.choice(alphabet) for _ in range(length))


def parse_code(raw: str) -> InviteCodeValue | None:
    """Normalize user-supplied text into a code, or None if malformed."""
    try:
        return InviteCodeValue(raw)
    except PydanticValidationError:
        return None


class InviteService(Service):
    """Domain service for issuing and consuming invite codes.

    Every write is a compare-and-swap on the code's version, so concurrent
    consumers of the same code are serialized without cross-code locking.
    """

    def __init__(
        self,
        invite_code_repository: InviteCodeRepository,
        settings: InvitationSettings,
    ) -> None:
        """Initialize invite service.

        Args:
            invite_code_repository: Invite code repository
            settings: Invitation settings
        """
        self.invite_code_repository = invite_code_repository
        self.settings = settings

    async def issue(
        self,
        created_by: UserId,
        max_uses: int | None = None,
        expires_at: datetime | None = None,
        code: str | None = None,
        now: datetime | None = None,
    ) -> InviteCode:
        """Issue a new invite code.

        Args:
            created_by: Issuing administrator
            max_uses: Number of registrations the code allows
            expires_at: Optional expiry instant
            code: Optional custom code; generated when omitted
            now: Reference time, defaults to the current time

        Returns:
            The stored invite code

        Raises:
            ValidationError: If max_uses, expires_at or the custom code is invalid
            ConflictError: If the custom code exists or no unique code could be drawn
        """
        now = now or utc_now()
        max_uses = self.settings.default_max_uses if max_uses is None else max_uses

        with logfire.span(
            "invite_service.issue",
            created_by=str(created_by),
            max_uses=max_uses,
            custom=code is not None,
        ):
            if max_uses < 1:
                raise ValidationError("max_uses must be at least 1")
            if expires_at is not None and expires_at.tzinfo is None:
                raise ValidationError("expires_at must include a timezone")
            if expires_at is not None and expires_at <= now:
                raise ValidationError("expires_at must be in the future")

            if code is not None:
                value = parse_code(code)
                if value is None:
                    raise ValidationError("Invite code must be 4-20 letters or digits")
                if not set(value.root) <= set(self.settings.code_alphabet):
                    raise ValidationError(
                        "Invite code may only use the characters "
                        f"{self.settings.code_alphabet}"
                    )
                try:
                    saved = await self.invite_code_repository.add(
                        self._new_code(value, created_by, max_uses, expires_at, now)
                    )
                except IntegrityError:
                    logfire.warn("Custom invite code already exists", code=value.root)
                    raise ConflictError(
                        f"Invite code {value} already exists", reason="duplicate_code"
                    )
                logfire.info("Invite code issued", code=saved.code.root)
                return saved

            for attempt in range(self.settings.max_generation_attempts):
                value = InviteCodeValue(
                    generate_code(self.settings.code_length, self.settings.code_alphabet)
                )
                try:
                    saved = await self.invite_code_repository.add(
                        self._new_code(value, created_by, max_uses, expires_at, now)
                    )
                except IntegrityError:
                    logfire.warn("Generated invite code collided", attempt=attempt + 1)
                    continue
                logfire.info("Invite code issued", code=saved.code.root)
                return saved

            logfire.error(
                "Could not generate a unique invite code",
                attempts=self.settings.max_generation_attempts,
            )
            raise ConflictError(
                "Could not generate a unique invite code", reason="generation_failed"
            )

    def _new_code(
        self,
        value: InviteCodeValue,
        created_by: UserId,
        max_uses: int,
        expires_at: datetime | None,
        now: datetime,
    ) -> InviteCode:
        return InviteCode(
            code=value,
            created_by=created_by,
            max_uses=max_uses,
            expires_at=expires_at,
            created_at=now,
        )

    async def get(self, code: str) -> InviteCode:
        """Get an invite code.

        Raises:
            NotFoundError: If the code does not exist or is malformed
        """
        value = parse_code(code)
        invite_code = (
            await self.invite_code_repository.find_by_code(value) if value else None
        )
        if not invite_code:
            raise NotFoundError("Invite code", code)
        return invite_code

    async def verify(self, code: str, now: datetime | None = None) -> InviteVerification:
        """Check whether a code can be used, without consuming it.

        Args:
            code: Code as typed by the user
            now: Reference time, defaults to the current time

        Returns:
            Verification outcome; reason is set when invalid
        """
        now = now or utc_now()
        with logfire.span("invite_service.verify"):
            value = parse_code(code)
            invite_code = (
                await self.invite_code_repository.find_by_code(value)
                if value
                else None
            )
            if not invite_code:
                logfire.info("Invite code rejected", reason="not_found")
                return InviteVerification(valid=False, reason=InviteRejection.NOT_FOUND)

            rejection = invite_code.rejection(now)
            if rejection:
                logfire.info(
                    "Invite code rejected", code=value.root, reason=rejection.value
                )
                return InviteVerification(valid=False, reason=rejection)
            return InviteVerification(valid=True)

    async def consume(
        self, code: str, used_by: UserId, now: datetime | None = None
    ) -> InviteCode:
        """Use up one registration slot of a code.

        Re-validates against the stored state on every attempt and writes
        with a version check; a lost race is retried.

        Args:
            code: Code to consume
            used_by: The registering user
            now: Reference time, defaults to the current time

        Returns:
            Updated invite code

        Raises:
            NotFoundError: If the code does not exist
            ConflictError: If the code is exhausted, expired or deactivated,
                or contention persisted through every retry
        """
        now = now or utc_now()
        with logfire.span("invite_service.consume", used_by=str(used_by)):
            for attempt in range(self.settings.max_consume_attempts):
                current = await self.get(code)

                rejection = current.rejection(now)
                if rejection:
                    logfire.warn(
                        "Invite code cannot be consumed",
                        code=current.code.root,
                        reason=rejection.value,
                    )
                    raise ConflictError(
                        f"Invite code {current.code} is {rejection.value}",
                        reason=rejection.value,
                    )

                uses = current.current_uses + 1
                updated = InviteCode.model_validate(
                    current.model_copy(
                        update={
                            "current_uses": uses,
                            "used_by": used_by,
                            "used_at": now,
                            "is_active": uses < current.max_uses,
                            "version": current.version + 1,
                        }
                    ).model_dump()
                )
                if await self.invite_code_repository.compare_and_swap(
                    updated, current.version
                ):
                    logfire.info(
                        "Invite code consumed",
                        code=updated.code.root,
                        current_uses=updated.current_uses,
                        is_active=updated.is_active,
                    )
                    return updated

                logfire.warn(
                    "Invite code changed concurrently, retrying",
                    code=current.code.root,
                    attempt=attempt + 1,
                )

            raise ConflictError(
                f"Invite code {code} is busy, try again", reason="contention"
            )

    async def release(self, code: str, used_by: UserId) -> InviteCode:
        """Undo a consumption whose registration did not go through.

        This is the compensating step for a failed account creation: the
        consumption is treated as never having happened. A code that an
        administrator deactivated in the meantime stays inactive.

        Args:
            code: Code that was consumed
            used_by: User id the consumption was recorded for

        Returns:
            Updated invite code

        Raises:
            NotFoundError: If the code does not exist
            ConflictError: If contention persisted through every retry
        """
        with logfire.span("invite_service.release", used_by=str(used_by)):
            for attempt in range(self.settings.max_consume_attempts):
                current = await self.get(code)
                if current.current_uses == 0:
                    return current

                uses = current.current_uses - 1
                update: dict = {
                    "current_uses": uses,
                    "is_active": current.revoked_at is None and uses < current.max_uses,
                    "version": current.version + 1,
                }
                if current.used_by == used_by:
                    update["used_by"] = None
                    update["used_at"] = None

                updated = current.model_copy(update=update)
                if await self.invite_code_repository.compare_and_swap(
                    updated, current.version
                ):
                    logfire.info(
                        "Invite code consumption released",
                        code=updated.code.root,
                        current_uses=updated.current_uses,
                    )
                    return updated

                logfire.warn(
                    "Invite code changed concurrently, retrying release",
                    code=current.code.root,
                    attempt=attempt + 1,
                )

            logfire.error("Invite code release gave up", code=code)
            raise ConflictError(
                f"Invite code {code} is busy, try again", reason="contention"
            )

    async def deactivate(self, code: str, now: datetime | None = None) -> InviteCode:
        """Permanently deactivate a code.

        Args:
            code: Code to deactivate
            now: Reference time, defaults to the current time

        Returns:
            Updated invite code

        Raises:
            NotFoundError: If the code does not exist
            ConflictError: If contention persisted through every retry
        """
        now = now or utc_now()
        with logfire.span("invite_service.deactivate", code=code):
            for attempt in range(self.settings.max_consume_attempts):
                current = await self.get(code)
                if current.revoked_at is not None:
                    return current

                updated = current.model_copy(
                    update={
                        "is_active": False,
                        "revoked_at": now,
                        "version": current.version + 1,
                    }
                )
                if await self.invite_code_repository.compare_and_swap(
                    updated, current.version
                ):
                    logfire.info("Invite code deactivated", code=updated.code.root)
                    return updated

                logfire.warn(
                    "Invite code changed concurrently, retrying deactivation",
                    code=current.code.root,
                    attempt=attempt + 1,
                )

            raise ConflictError(
                f"Invite code {code} is busy, try again", reason="contention"
            )

    async def list_all(self) -> list[InviteCode]:
        """List every invite code, newest first."""
        with logfire.span("invite_service.list_all"):
            return await self.invite_code_repository.find_all()
