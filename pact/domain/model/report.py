"""Safety report entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from pact.domain.model.common import DomainModel, utc_now
from pact.domain.value import PartnershipId, ReportId, ReportStatus, UserId


class Report(DomainModel):
    """A user's complaint about another user, reviewed by administrators."""

    id: ReportId
    reporter_id: UserId
    reported_id: UserId
    partnership_id: Optional[PartnershipId] = None
    reason: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    status: ReportStatus = ReportStatus.PENDING
    created_at: datetime = Field(default_factory=utc_now)
