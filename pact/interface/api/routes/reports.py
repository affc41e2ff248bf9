"""Safety report routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from pact.application.usecase.report import FileReportUseCase
from pact.application.usecase.report.file_report import (
    FileReportRequest,
    FileReportResponse,
)
from pact.domain.service import JWTService
from pact.interface.api.auth import require_user_id

router = APIRouter(prefix="/reports", tags=["reports"], route_class=DishkaRoute)


class FileReportAPIRequest(BaseModel):
    """API request for reporting another user."""

    reported_id: UUID
    reason: str
    partnership_id: UUID | None = None
    description: str | None = Field(default=None, max_length=5000)


@router.post(
    "/", response_model=FileReportResponse, status_code=status.HTTP_201_CREATED
)
async def file_report(
    request: FileReportAPIRequest,
    use_case: FromDishka[FileReportUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> FileReportResponse:
    """File a safety report; it starts out pending review."""
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        FileReportRequest(
            reporter_id=user_id,
            reported_id=str(request.reported_id),
            reason=request.reason,
            partnership_id=(
                str(request.partnership_id) if request.partnership_id else None
            ),
            description=request.description,
        )
    )
