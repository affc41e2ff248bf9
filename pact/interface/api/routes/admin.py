"""Administrator routes.

Every route except bootstrap resolves the caller from the session cookie
and the use case checks that the caller is an administrator (403
otherwise). Bootstrap is authorized by the setup token instead.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Cookie, Header, Query, Response, status
from pydantic import AwareDatetime, BaseModel, Field

from pact.application.usecase.admin import BootstrapAdminUseCase, GetStatsUseCase
from pact.application.usecase.admin.bootstrap_admin import (
    BootstrapAdminRequest,
    BootstrapAdminResponse,
)
from pact.application.usecase.admin.get_stats import GetStatsRequest, GetStatsResponse
from pact.application.usecase.invite import (
    DeactivateInviteCodeUseCase,
    IssueInviteCodeUseCase,
    ListInviteCodesUseCase,
)
from pact.application.usecase.invite.deactivate_invite_code import (
    DeactivateInviteCodeRequest,
    DeactivateInviteCodeResponse,
)
from pact.application.usecase.invite.issue_invite_code import (
    IssueInviteCodeRequest,
    IssueInviteCodeResponse,
)
from pact.application.usecase.invite.list_invite_codes import (
    ListInviteCodesRequest,
    ListInviteCodesResponse,
)
from pact.application.usecase.matching import RunMatchingCycleUseCase
from pact.application.usecase.matching.run_matching_cycle import (
    RunMatchingCycleRequest,
    RunMatchingCycleResponse,
)
from pact.application.usecase.partnership import (
    ChangePartnershipStatusUseCase,
    CompleteExpiredPartnershipsUseCase,
    ListPartnershipsUseCase,
)
from pact.application.usecase.partnership.change_partnership_status import (
    ChangePartnershipStatusRequest,
    ChangePartnershipStatusResponse,
)
from pact.application.usecase.partnership.complete_expired_partnerships import (
    CompleteExpiredPartnershipsRequest,
    CompleteExpiredPartnershipsResponse,
)
from pact.application.usecase.partnership.list_partnerships import (
    ListPartnershipsRequest,
    ListPartnershipsResponse,
)
from pact.application.usecase.report import ListReportsUseCase, TransitionReportUseCase
from pact.application.usecase.report.list_reports import (
    ListReportsRequest,
    ListReportsResponse,
)
from pact.application.usecase.report.transition_report import (
    TransitionReportRequest,
    TransitionReportResponse,
)
from pact.domain.service import JWTService
from pact.domain.value import ContactPreference, Gender, ReportStatus
from pact.interface.api.auth import require_user_id

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class BootstrapAdminAPIRequest(BaseModel):
    """API request for creating the first administrator."""

    username: str
    password: str = Field(min_length=8, max_length=72)
    name: str = Field(min_length=1, max_length=100)
    gender: Gender
    contact_preference: ContactPreference = ContactPreference.APP_ONLY
    timezone: str | None = Field(default=None, max_length=64)


class RunMatchingAPIRequest(BaseModel):
    """API request for a matching run."""

    current_date: AwareDatetime | None = None


class SweepAPIRequest(BaseModel):
    """API request for completing expired partnerships."""

    now: AwareDatetime | None = None


class IssueInviteCodeAPIRequest(BaseModel):
    """API request for issuing an invite code."""

    max_uses: int | None = Field(default=None, ge=1)
    expires_at: AwareDatetime | None = None
    code: str | None = None


class TransitionReportAPIRequest(BaseModel):
    """API request for moving a report through review."""

    status: ReportStatus


@router.post("/bootstrap", response_model=BootstrapAdminResponse)
async def bootstrap_admin(
    request: BootstrapAdminAPIRequest,
    response: Response,
    use_case: FromDishka[BootstrapAdminUseCase],
    authorization: str | None = Header(default=None),
) -> BootstrapAdminResponse:
    """Create or promote an administrator using the setup token.

    Examples:
        POST /admin/bootstrap
        Authorization: Bearer <AUTH__ADMIN_SETUP_TOKEN>
        {"username": "root", "password": "...", "name": "Root", "gender": "female"}

    Returns 201 when an account was created and 200 when an existing one
    was promoted.
    """
    setup_token = None
    if authorization and authorization.startswith("Bearer "):
        setup_token = authorization.removeprefix("Bearer ").strip()

    result = await use_case.execute(
        BootstrapAdminRequest(setup_token=setup_token, **request.model_dump())
    )
    if result.created:
        response.status_code = status.HTTP_201_CREATED
    return result


@router.get("/stats", response_model=GetStatsResponse)
async def get_stats(
    use_case: FromDishka[GetStatsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetStatsResponse:
    """Dashboard counters."""
    admin_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(GetStatsRequest(admin_id=admin_id))


@router.post("/matching-runs", response_model=RunMatchingCycleResponse)
async def run_matching_cycle(
    use_case: FromDishka[RunMatchingCycleUseCase],
    jwt_service: FromDishka[JWTService],
    request: RunMatchingAPIRequest | None = Body(default=None),
    auth_token: str | None = Cookie(default=None),
) -> RunMatchingCycleResponse:
    """Pair every eligible user; 409 if another run is in progress."""
    admin_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        RunMatchingCycleRequest(
            admin_id=admin_id,
            current_date=request.current_date if request else None,
        )
    )


@router.get("/partnerships", response_model=ListPartnershipsResponse)
async def list_partnerships(
    use_case: FromDishka[ListPartnershipsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListPartnershipsResponse:
    """All partnerships, newest first."""
    admin_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(ListPartnershipsRequest(admin_id=admin_id))


@router.post("/partnerships/sweep", response_model=CompleteExpiredPartnershipsResponse)
async def complete_expired_partnerships(
    use_case: FromDishka[CompleteExpiredPartnershipsUseCase],
    jwt_service: FromDishka[JWTService],
    request: SweepAPIRequest | None = Body(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CompleteExpiredPartnershipsResponse:
    """Complete every active partnership whose end date has passed."""
    admin_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        CompleteExpiredPartnershipsRequest(
            admin_id=admin_id, now=request.now if request else None
        )
    )


async def _change_status(
    use_case: ChangePartnershipStatusUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
    partnership_id: UUID,
    action: str,
) -> ChangePartnershipStatusResponse:
    admin_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        ChangePartnershipStatusRequest(
            admin_id=admin_id, partnership_id=str(partnership_id), action=action
        )
    )


@router.post(
    "/partnerships/{partnership_id}/complete",
    response_model=ChangePartnershipStatusResponse,
)
async def complete_partnership(
    partnership_id: UUID,
    use_case: FromDishka[ChangePartnershipStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ChangePartnershipStatusResponse:
    return await _change_status(
        use_case, jwt_service, auth_token, partnership_id, "complete"
    )


@router.post(
    "/partnerships/{partnership_id}/end-early",
    response_model=ChangePartnershipStatusResponse,
)
async def end_partnership_early(
    partnership_id: UUID,
    use_case: FromDishka[ChangePartnershipStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ChangePartnershipStatusResponse:
    return await _change_status(
        use_case, jwt_service, auth_token, partnership_id, "end_early"
    )


@router.post(
    "/partnerships/{partnership_id}/cancel",
    response_model=ChangePartnershipStatusResponse,
)
async def cancel_partnership(
    partnership_id: UUID,
    use_case: FromDishka[ChangePartnershipStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ChangePartnershipStatusResponse:
    return await _change_status(
        use_case, jwt_service, auth_token, partnership_id, "cancel"
    )


@router.get("/invite-codes", response_model=ListInviteCodesResponse)
async def list_invite_codes(
    use_case: FromDishka[ListInviteCodesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListInviteCodesResponse:
    """All invite codes, newest first."""
    admin_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(ListInviteCodesRequest(admin_id=admin_id))


@router.post(
    "/invite-codes",
    response_model=IssueInviteCodeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def issue_invite_code(
    request: IssueInviteCodeAPIRequest,
    use_case: FromDishka[IssueInviteCodeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> IssueInviteCodeResponse:
    """Issue a generated or custom invite code."""
    admin_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        IssueInviteCodeRequest(
            admin_id=admin_id,
            max_uses=request.max_uses,
            expires_at=request.expires_at,
            code=request.code,
        )
    )


@router.delete("/invite-codes/{code}", response_model=DeactivateInviteCodeResponse)
async def deactivate_invite_code(
    code: str,
    use_case: FromDishka[DeactivateInviteCodeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeactivateInviteCodeResponse:
    """Deactivate a code; the record is kept for auditing."""
    admin_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        DeactivateInviteCodeRequest(admin_id=admin_id, code=code)
    )


@router.get("/reports", response_model=ListReportsResponse)
async def list_reports(
    use_case: FromDishka[ListReportsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    status_filter: ReportStatus | None = Query(default=None, alias="status"),
) -> ListReportsResponse:
    """Reports, newest first, optionally filtered by status."""
    admin_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        ListReportsRequest(admin_id=admin_id, status=status_filter)
    )


@router.put("/reports/{report_id}", response_model=TransitionReportResponse)
async def transition_report(
    report_id: UUID,
    request: TransitionReportAPIRequest,
    use_case: FromDishka[TransitionReportUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> TransitionReportResponse:
    """Move a report along its review workflow."""
    admin_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        TransitionReportRequest(
            admin_id=admin_id, report_id=str(report_id), status=request.status
        )
    )
