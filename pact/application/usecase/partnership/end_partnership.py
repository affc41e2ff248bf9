"""End partnership use case."""

from typing import Literal
from uuid import UUID

import logfire
from pydantic import BaseModel

from pact.application.usecase.partnership.items import PartnershipItem
from pact.domain.error import NotAuthorizedError
from pact.domain.service import PartnershipService
from pact.domain.value import PartnershipId, UserId


class EndPartnershipRequest(BaseModel):
    """End partnership request."""

    user_id: str
    partnership_id: str
    action: Literal["end_early", "cancel"] = "end_early"


class EndPartnershipResponse(BaseModel):
    """The partnership after it was ended."""

    partnership: PartnershipItem


class EndPartnershipUseCase:
    """Use case for a participant ending or cancelling their partnership."""

    def __init__(self, partnership_service: PartnershipService) -> None:
        """Initialize end partnership use case.

        Args:
            partnership_service: Partnership domain service
        """
        self.partnership_service = partnership_service

    async def execute(self, request: EndPartnershipRequest) -> EndPartnershipResponse:
        """End a partnership before its scheduled end.

        Args:
            request: Caller, partnership and whether to end early or cancel

        Returns:
            The ended partnership

        Raises:
            NotFoundError: If the partnership does not exist
            NotAuthorizedError: If the caller is not a participant
            InvalidStateError: If the partnership is no longer active
        """
        user_id = UserId(UUID(request.user_id))
        partnership_id = PartnershipId(UUID(request.partnership_id))

        with logfire.span(
            "end_partnership.execute",
            user_id=str(user_id),
            partnership_id=str(partnership_id),
            action=request.action,
        ):
            partnership = await self.partnership_service.get_by_id(partnership_id)
            if not partnership.involves(user_id):
                raise NotAuthorizedError("end this partnership", str(user_id))

            if request.action == "cancel":
                ended = await self.partnership_service.cancel(partnership_id)
            else:
                ended = await self.partnership_service.end_early(partnership_id)
            return EndPartnershipResponse(
                partnership=PartnershipItem.from_entity(ended, user_id)
            )
