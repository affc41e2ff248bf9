"""Exclusion routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from pact.application.usecase.exclusion import (
    AddExclusionUseCase,
    ListExclusionsUseCase,
    RemoveExclusionUseCase,
)
from pact.application.usecase.exclusion.add_exclusion import (
    AddExclusionRequest,
    AddExclusionResponse,
)
from pact.application.usecase.exclusion.list_exclusions import (
    ListExclusionsRequest,
    ListExclusionsResponse,
)
from pact.application.usecase.exclusion.remove_exclusion import (
    RemoveExclusionRequest,
)
from pact.domain.service import JWTService
from pact.interface.api.auth import require_user_id

router = APIRouter(prefix="/exclusions", tags=["exclusions"], route_class=DishkaRoute)


class AddExclusionAPIRequest(BaseModel):
    """API request for excluding a user from future matches."""

    excluded_id: UUID
    reason: str | None = Field(default=None, max_length=500)


@router.get("/", response_model=ListExclusionsResponse)
async def list_exclusions(
    use_case: FromDishka[ListExclusionsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListExclusionsResponse:
    """List the users the caller has excluded."""
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(ListExclusionsRequest(owner_id=user_id))


@router.post(
    "/", response_model=AddExclusionResponse, status_code=status.HTTP_201_CREATED
)
async def add_exclusion(
    request: AddExclusionAPIRequest,
    use_case: FromDishka[AddExclusionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AddExclusionResponse:
    """Never match the caller with the given user again."""
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        AddExclusionRequest(
            owner_id=user_id,
            excluded_id=str(request.excluded_id),
            reason=request.reason,
        )
    )


@router.delete("/{exclusion_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_exclusion(
    exclusion_id: UUID,
    use_case: FromDishka[RemoveExclusionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Remove one of the caller's exclusions."""
    user_id = require_user_id(jwt_service, auth_token)
    await use_case.execute(
        RemoveExclusionRequest(owner_id=user_id, exclusion_id=str(exclusion_id))
    )
