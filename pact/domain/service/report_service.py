"""Report triage domain service."""

from uuid import uuid4

import logfire

from pact.domain.error import InvalidStateError, NotFoundError, ValidationError
from pact.domain.model import Report
from pact.domain.model.common import utc_now
from pact.domain.repository import ReportRepository
from pact.domain.value import PartnershipId, ReportId, ReportStatus, UserId

from .base import Service
from .partnership_service import PartnershipService


class ReportService(Service):
    """Domain service for safety reports and their review workflow."""

    def __init__(
        self,
        report_repository: ReportRepository,
        partnership_service: PartnershipService,
    ) -> None:
        """Initialize report service.

        Args:
            report_repository: Report repository
            partnership_service: Partnership domain service
        """
        self.report_repository = report_repository
        self.partnership_service = partnership_service

    async def file(
        self,
        reporter_id: UserId,
        reported_id: UserId,
        reason: str,
        partnership_id: PartnershipId | None = None,
        description: str | None = None,
    ) -> Report:
        """File a report against another user.

        Args:
            reporter_id: User filing the report
            reported_id: User being reported
            reason: Short reason, required
            partnership_id: Optional partnership the report is about
            description: Optional details

        Returns:
            The pending report

        Raises:
            ValidationError: If the reason is blank or users report themselves
            NotFoundError: If partnership_id does not exist
        """
        with logfire.span(
            "report_service.file",
            reporter_id=str(reporter_id),
            reported_id=str(reported_id),
        ):
            reason = reason.strip()
            if not reason:
                raise ValidationError("A report needs a reason")
            if len(reason) > 200:
                raise ValidationError("Report reason must be at most 200 characters")
            if reporter_id == reported_id:
                raise ValidationError("Users cannot report themselves")
            if partnership_id is not None:
                await self.partnership_service.get_by_id(partnership_id)

            report = Report(
                id=ReportId(uuid4()),
                reporter_id=reporter_id,
                reported_id=reported_id,
                partnership_id=partnership_id,
                reason=reason,
                description=description.strip() if description else None,
                status=ReportStatus.PENDING,
                created_at=utc_now(),
            )
            saved = await self.report_repository.save(report)
            logfire.info("Report filed", report_id=str(saved.id))
            return saved

    async def get_by_id(self, report_id: ReportId) -> Report:
        """Get report by ID.

        Raises:
            NotFoundError: If the report does not exist
        """
        report = await self.report_repository.find_by_id(report_id)
        if not report:
            raise NotFoundError("Report", str(report_id))
        return report

    async def transition(self, report_id: ReportId, new_status: ReportStatus) -> Report:
        """Move a report along its review workflow.

        Args:
            report_id: Report to update
            new_status: Requested status

        Returns:
            Updated report

        Raises:
            NotFoundError: If the report does not exist
            InvalidStateError: If the move is not an allowed edge
        """
        with logfire.span(
            "report_service.transition",
            report_id=str(report_id),
            target=new_status.value,
        ):
            current = await self.get_by_id(report_id)
            if not current.status.can_transition_to(new_status):
                logfire.warn(
                    "Illegal report transition",
                    report_id=str(report_id),
                    current=current.status.value,
                    target=new_status.value,
                )
                raise InvalidStateError(
                    "report", str(report_id), current.status.value, new_status.value
                )

            updated = await self.report_repository.update_status(
                report_id, current.status, new_status
            )
            if updated is None:
                latest = await self.get_by_id(report_id)
                raise InvalidStateError(
                    "report", str(report_id), latest.status.value, new_status.value
                )

            logfire.info(
                "Report status changed",
                report_id=str(report_id),
                status=updated.status.value,
            )
            return updated

    async def list_all(self, status: ReportStatus | None = None) -> list[Report]:
        """List reports newest first, optionally filtered by status."""
        with logfire.span(
            "report_service.list_all", status=status.value if status else None
        ):
            return await self.report_repository.find_all(status)

    async def count_pending(self) -> int:
        """Count reports awaiting review."""
        return await self.report_repository.count_by_status(ReportStatus.PENDING)
