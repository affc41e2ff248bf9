"""Change partnership status use case."""

from typing import Literal
from uuid import UUID

import logfire
from pydantic import BaseModel

from pact.application.usecase.base import BaseUseCase
from pact.application.usecase.partnership.items import PartnershipItem
from pact.domain.service import PartnershipService, UserService
from pact.domain.value import PartnershipId, UserId


class ChangePartnershipStatusRequest(BaseModel):
    """Change partnership status request."""

    admin_id: str
    partnership_id: str
    action: Literal["complete", "end_early", "cancel"]


class ChangePartnershipStatusResponse(BaseModel):
    """The partnership after the transition."""

    partnership: PartnershipItem


class ChangePartnershipStatusUseCase(BaseUseCase):
    """Use case for an administrator closing a partnership."""

    def __init__(
        self, partnership_service: PartnershipService, user_service: UserService
    ) -> None:
        self.partnership_service = partnership_service
        self.user_service = user_service

    async def execute(
        self, request: ChangePartnershipStatusRequest
    ) -> ChangePartnershipStatusResponse:
        admin_id = UserId(UUID(request.admin_id))
        partnership_id = PartnershipId(UUID(request.partnership_id))

        with logfire.span(
            "change_partnership_status.execute",
            partnership_id=str(partnership_id),
            action=request.action,
        ):
            await self.user_service.require_admin(admin_id, "change partnerships")

            if request.action == "complete":
                updated = await self.partnership_service.complete(partnership_id)
            elif request.action == "end_early":
                updated = await self.partnership_service.end_early(partnership_id)
            else:
                updated = await self.partnership_service.cancel(partnership_id)

            return ChangePartnershipStatusResponse(
                partnership=PartnershipItem.from_entity(updated)
            )
