"""List exclusions use case."""

from uuid import UUID

from pydantic import BaseModel

from pact.application.usecase.exclusion.items import ExclusionItem
from pact.domain.service import ExclusionService
from pact.domain.value import UserId


class ListExclusionsRequest(BaseModel):
    """List exclusions request."""

    owner_id: str


class ListExclusionsResponse(BaseModel):
    """The owner's exclusions, oldest first."""

    exclusions: list[ExclusionItem]


class ListExclusionsUseCase:
    """Use case for listing the exclusions a user created."""

    def __init__(self, exclusion_service: ExclusionService) -> None:
        self.exclusion_service = exclusion_service

    async def execute(self, request: ListExclusionsRequest) -> ListExclusionsResponse:
        exclusions = await self.exclusion_service.list_for_owner(
            UserId(UUID(request.owner_id))
        )
        return ListExclusionsResponse(
            exclusions=[ExclusionItem.from_entity(e) for e in exclusions]
        )
