"""Partnership entity."""

from datetime import datetime

from pydantic import Field, model_validator

from pact.domain.model.common import DomainModel, utc_now
from pact.domain.value import PartnershipId, PartnershipStatus, UserId


class Partnership(DomainModel):
    """Time-bounded pairing of two users for mutual accountability.

    Business rules:
    - A user appears in at most one ACTIVE partnership at any instant
    - Created only by a matching cycle, never deleted
    - ACTIVE -> COMPLETED | ENDED_EARLY | CANCELLED, all terminal
    """

    id: PartnershipId
    user_a_id: UserId
    user_b_id: UserId
    start_date: datetime
    end_date: datetime
    status: PartnershipStatus = PartnershipStatus.ACTIVE
    created_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def check_participants_and_dates(self) -> "Partnership":
        if self.user_a_id == self.user_b_id:
            raise ValueError("A partnership needs two distinct users")
        if self.end_date <= self.start_date:
            raise ValueError("Partnership must end after it starts")
        return self

    def involves(self, user_id: UserId) -> bool:
        return user_id in (self.user_a_id, self.user_b_id)

    def partner_of(self, user_id: UserId) -> UserId:
        """Return the other participant."""
        if user_id == self.user_a_id:
            return self.user_b_id
        if user_id == self.user_b_id:
            return self.user_a_id
        raise ValueError(f"User {user_id} is not part of partnership {self.id}")
