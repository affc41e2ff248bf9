"""Report response item."""

from datetime import datetime

from pydantic import BaseModel

from pact.domain.model import Report
from pact.domain.value import ReportStatus


class ReportItem(BaseModel):
    """Report as returned to callers."""

    report_id: str
    reporter_id: str
    reported_id: str
    partnership_id: str | None
    reason: str
    description: str | None
    status: ReportStatus
    created_at: datetime

    @classmethod
    def from_entity(cls, report: Report) -> "ReportItem":
        return cls(
            report_id=str(report.id),
            reporter_id=str(report.reporter_id),
            reported_id=str(report.reported_id),
            partnership_id=str(report.partnership_id) if report.partnership_id else None,
            reason=report.reason,
            description=report.description,
            status=report.status,
            created_at=report.created_at,
        )
