"""Invite code entity.

Invite codes gate registration. Administrators issue them; each
successful registration consumes one use.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from pact.domain.model.common import DomainModel, utc_now
from pact.domain.value import InviteCodeValue, InviteRejection, UserId


class InviteCode(DomainModel):
    """Consumable registration token.

    Business rules:
    - 0 <= current_uses <= max_uses; uses only go back down when a failed
      registration releases its consumption
    - is_active turns false once current_uses reaches max_uses
    - Deactivation is permanent; revoked_at records an administrator revoke
    - Never deleted
    """

    code: InviteCodeValue
    created_by: UserId
    used_by: Optional[UserId] = None  # Most recent consumer
    is_active: bool = True
    max_uses: int = Field(default=1, ge=1)
    current_uses: int = Field(default=0, ge=0)
    expires_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utc_now)
    used_at: Optional[datetime] = None
    revoked_at: Optional[datetime] = None
    version: int = Field(default=0, ge=0)  # Optimistic concurrency token

    @model_validator(mode="after")
    def check_usage_bounds(self) -> "InviteCode":
        if self.current_uses > self.max_uses:
            raise ValueError("current_uses cannot exceed max_uses")
        if self.current_uses == self.max_uses and self.is_active:
            raise ValueError("An exhausted invite code cannot be active")
        return self

    @property
    def is_exhausted(self) -> bool:
        return self.current_uses >= self.max_uses

    @property
    def remaining_uses(self) -> int:
        return self.max_uses - self.current_uses

    def rejection(self, now: datetime) -> InviteRejection | None:
        """Return why this code cannot be used at ``now``, or None if usable.

        Exhaustion is reported ahead of deactivation because exhausting a
        code also clears is_active.
        """
        if self.is_exhausted:
            return InviteRejection.EXHAUSTED
        if not self.is_active:
            return InviteRejection.DEACTIVATED
        if self.expires_at is not None and self.expires_at <= now:
            return InviteRejection.EXPIRED
        return None
