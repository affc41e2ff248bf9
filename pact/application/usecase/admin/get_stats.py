"""Get admin stats use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from pact.application.usecase.base import BaseUseCase
from pact.domain.service import PartnershipService, ReportService, UserService
from pact.domain.value import UserId


class GetStatsRequest(BaseModel):
    """Get stats request."""

    admin_id: str


class GetStatsResponse(BaseModel):
    """Dashboard counters."""

    active_users: int
    active_partnerships: int
    pending_reports: int


class GetStatsUseCase(BaseUseCase):
    """Use case for the administrator dashboard counters."""

    def __init__(
        self,
        user_service: UserService,
        partnership_service: PartnershipService,
        report_service: ReportService,
    ) -> None:
        """Initialize get stats use case.

        Args:
            user_service: User domain service
            partnership_service: Partnership domain service
            report_service: Report domain service
        """
        self.user_service = user_service
        self.partnership_service = partnership_service
        self.report_service = report_service

    async def execute(self, request: GetStatsRequest) -> GetStatsResponse:
        admin_id = UserId(UUID(request.admin_id))
        with logfire.span("get_stats.execute", admin_id=str(admin_id)):
            await self.user_service.require_admin(admin_id, "view stats")
            return GetStatsResponse(
                active_users=await self.user_service.count_active(),
                active_partnerships=await self.partnership_service.count_active(),
                pending_reports=await self.report_service.count_pending(),
            )
