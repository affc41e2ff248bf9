"""Remove exclusion use case."""

from uuid import UUID

from pydantic import BaseModel

from pact.domain.service import ExclusionService
from pact.domain.value import ExclusionId, UserId


class RemoveExclusionRequest(BaseModel):
    """Remove exclusion request."""

    owner_id: str
    exclusion_id: str


class RemoveExclusionUseCase:
    """Use case for a user lifting one of their exclusions."""

    def __init__(self, exclusion_service: ExclusionService) -> None:
        self.exclusion_service = exclusion_service

    async def execute(self, request: RemoveExclusionRequest) -> None:
        await self.exclusion_service.remove_exclusion(
            ExclusionId(UUID(request.exclusion_id)),
            owner_id=UserId(UUID(request.owner_id)),
        )
