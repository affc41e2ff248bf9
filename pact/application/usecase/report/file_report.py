"""File report use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from pact.application.usecase.report.items import ReportItem
from pact.domain.service import ReportService, UserService
from pact.domain.value import PartnershipId, UserId


class FileReportRequest(BaseModel):
    """File report request."""

    reporter_id: str
    reported_id: str
    reason: str
    partnership_id: str | None = None
    description: str | None = Field(default=None, max_length=5000)


class FileReportResponse(BaseModel):
    """The filed report."""

    report: ReportItem


class FileReportUseCase:
    """Use case for a user reporting another user."""

    def __init__(self, report_service: ReportService, user_service: UserService) -> None:
        """Initialize file report use case.

        Args:
            report_service: Report domain service
            user_service: User domain service
        """
        self.report_service = report_service
        self.user_service = user_service

    async def execute(self, request: FileReportRequest) -> FileReportResponse:
        """File a report.

        Raises:
            NotFoundError: If the reported user or the partnership does not exist
            ValidationError: If the reason is blank or users report themselves
        """
        reporter_id = UserId(UUID(request.reporter_id))
        reported_id = UserId(UUID(request.reported_id))

        with logfire.span("file_report.execute", reporter_id=str(reporter_id)):
            await self.user_service.get_by_id(reported_id)
            report = await self.report_service.file(
                reporter_id=reporter_id,
                reported_id=reported_id,
                reason=request.reason,
                partnership_id=PartnershipId(UUID(request.partnership_id))
                if request.partnership_id
                else None,
                description=request.description,
            )
            return FileReportResponse(report=ReportItem.from_entity(report))
