"""Transition report use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from pact.application.usecase.base import BaseUseCase
from pact.application.usecase.report.items import ReportItem
from pact.domain.service import ReportService, UserService
from pact.domain.value import ReportId, ReportStatus, UserId


class TransitionReportRequest(BaseModel):
    """Transition report request."""

    admin_id: str
    report_id: str
    status: ReportStatus


class TransitionReportResponse(BaseModel):
    """The report after the transition."""

    report: ReportItem


class TransitionReportUseCase(BaseUseCase):
    """Use case for an administrator moving a report through review."""

    def __init__(self, report_service: ReportService, user_service: UserService) -> None:
        self.report_service = report_service
        self.user_service = user_service

    async def execute(
        self, request: TransitionReportRequest
    ) -> TransitionReportResponse:
        """Move a report to a new status.

        Raises:
            NotAuthorizedError: If the caller is not an administrator
            NotFoundError: If the report does not exist
            InvalidStateError: If the transition is not allowed
        """
        admin_id = UserId(UUID(request.admin_id))
        report_id = ReportId(UUID(request.report_id))

        with logfire.span(
            "transition_report.execute",
            report_id=str(report_id),
            status=request.status.value,
        ):
            await self.user_service.require_admin(admin_id, "review reports")
            report = await self.report_service.transition(report_id, request.status)
            return TransitionReportResponse(report=ReportItem.from_entity(report))
