"""List reports use case."""

from uuid import UUID

from pydantic import BaseModel

from pact.application.usecase.base import BaseUseCase
from pact.application.usecase.report.items import ReportItem
from pact.domain.service import ReportService, UserService
from pact.domain.value import ReportStatus, UserId


class ListReportsRequest(BaseModel):
    """List reports request."""

    admin_id: str
    status: ReportStatus | None = None


class ListReportsResponse(BaseModel):
    """Reports, newest first."""

    reports: list[ReportItem]


class ListReportsUseCase(BaseUseCase):
    """Use case for the administrator's report queue."""

    def __init__(self, report_service: ReportService, user_service: UserService) -> None:
        self.report_service = report_service
        self.user_service = user_service

    async def execute(self, request: ListReportsRequest) -> ListReportsResponse:
        admin_id = UserId(UUID(request.admin_id))
        await self.user_service.require_admin(admin_id, "list reports")
        reports = await self.report_service.list_all(request.status)
        return ListReportsResponse(reports=[ReportItem.from_entity(r) for r in reports])
