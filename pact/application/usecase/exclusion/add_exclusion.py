"""Add exclusion use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from pact.application.usecase.exclusion.items import ExclusionItem
from pact.domain.error import ConflictError
from pact.domain.service import ExclusionService, UserService
from pact.domain.value import UserId


class AddExclusionRequest(BaseModel):
    """Add exclusion request."""

    owner_id: str
    excluded_id: str
    reason: str | None = Field(default=None, max_length=500)


class AddExclusionResponse(BaseModel):
    """Created exclusion."""

    exclusion: ExclusionItem


class AddExclusionUseCase:
    """Use case for a user excluding someone from future matches.

    The user-facing operation has set semantics: excluding the same
    person twice is a conflict rather than a second record.
    """

    def __init__(
        self, exclusion_service: ExclusionService, user_service: UserService
    ) -> None:
        """Initialize add exclusion use case.

        Args:
            exclusion_service: Exclusion domain service
            user_service: User domain service
        """
        self.exclusion_service = exclusion_service
        self.user_service = user_service

    async def execute(self, request: AddExclusionRequest) -> AddExclusionResponse:
        """Add an exclusion.

        Raises:
            NotFoundError: If the excluded user does not exist
            ValidationError: If users try to exclude themselves
            ConflictError: If the exclusion already exists
        """
        owner_id = UserId(UUID(request.owner_id))
        excluded_id = UserId(UUID(request.excluded_id))

        with logfire.span(
            "add_exclusion.execute",
            owner_id=str(owner_id),
            excluded_id=str(excluded_id),
        ):
            await self.user_service.get_by_id(excluded_id)

            if await self.exclusion_service.is_excluded(owner_id, excluded_id):
                raise ConflictError(
                    "This user is already excluded", reason="already_excluded"
                )

            exclusion = await self.exclusion_service.add_exclusion(
                owner_id, excluded_id, request.reason
            )
            return AddExclusionResponse(exclusion=ExclusionItem.from_entity(exclusion))
