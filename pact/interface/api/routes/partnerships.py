"""Partnership routes for participants."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from pact.application.usecase.partnership import (
    EndPartnershipUseCase,
    GetCurrentPartnershipUseCase,
    GetPartnershipHistoryUseCase,
)
from pact.application.usecase.partnership.end_partnership import (
    EndPartnershipRequest,
    EndPartnershipResponse,
)
from pact.application.usecase.partnership.get_current_partnership import (
    GetCurrentPartnershipRequest,
    GetCurrentPartnershipResponse,
)
from pact.application.usecase.partnership.get_partnership_history import (
    GetPartnershipHistoryRequest,
    GetPartnershipHistoryResponse,
)
from pact.domain.service import JWTService
from pact.interface.api.auth import require_user_id

router = APIRouter(
    prefix="/partnerships", tags=["partnerships"], route_class=DishkaRoute
)


@router.get("/current", response_model=GetCurrentPartnershipResponse)
async def get_current_partnership(
    use_case: FromDishka[GetCurrentPartnershipUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetCurrentPartnershipResponse:
    """Get the caller's active partnership, if any."""
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(GetCurrentPartnershipRequest(user_id=user_id))


@router.get("/history", response_model=GetPartnershipHistoryResponse)
async def get_partnership_history(
    use_case: FromDishka[GetPartnershipHistoryUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetPartnershipHistoryResponse:
    """Get every partnership the caller has been part of, newest first."""
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(GetPartnershipHistoryRequest(user_id=user_id))


@router.post("/{partnership_id}/end-early", response_model=EndPartnershipResponse)
async def end_partnership_early(
    partnership_id: UUID,
    use_case: FromDishka[EndPartnershipUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> EndPartnershipResponse:
    """End the caller's active partnership before its end date."""
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        EndPartnershipRequest(
            user_id=user_id, partnership_id=str(partnership_id), action="end_early"
        )
    )


@router.post("/{partnership_id}/cancel", response_model=EndPartnershipResponse)
async def cancel_partnership(
    partnership_id: UUID,
    use_case: FromDishka[EndPartnershipUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> EndPartnershipResponse:
    """Cancel the caller's active partnership."""
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        EndPartnershipRequest(
            user_id=user_id, partnership_id=str(partnership_id), action="cancel"
        )
    )
