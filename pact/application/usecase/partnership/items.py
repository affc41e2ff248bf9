"""Partnership response item."""

from datetime import datetime

from pydantic import BaseModel

from pact.domain.model import Partnership
from pact.domain.value import PartnershipStatus, UserId


class PartnershipItem(BaseModel):
    """Partnership as returned to callers.

    partner_id is filled in when the partnership is viewed by one of its
    participants.
    """

    partnership_id: str
    user_a_id: str
    user_b_id: str
    partner_id: str | None = None
    start_date: datetime
    end_date: datetime
    status: PartnershipStatus
    created_at: datetime

    @classmethod
    def from_entity(
        cls, partnership: Partnership, viewer_id: UserId | None = None
    ) -> "PartnershipItem":
        partner_id = None
        if viewer_id is not None and partnership.involves(viewer_id):
            partner_id = str(partnership.partner_of(viewer_id))
        return cls(
            partnership_id=str(partnership.id),
            user_a_id=str(partnership.user_a_id),
            user_b_id=str(partnership.user_b_id),
            partner_id=partner_id,
            start_date=partnership.start_date,
            end_date=partnership.end_date,
            status=partnership.status,
            created_at=partnership.created_at,
        )
