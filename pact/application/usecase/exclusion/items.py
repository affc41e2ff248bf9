"""Exclusion response item."""

from datetime import datetime

from pydantic import BaseModel

from pact.domain.model import Exclusion


class ExclusionItem(BaseModel):
    """Exclusion as shown to its owner."""

    exclusion_id: str
    excluded_id: str
    reason: str | None
    created_at: datetime

    @classmethod
    def from_entity(cls, exclusion: Exclusion) -> "ExclusionItem":
        return cls(
            exclusion_id=str(exclusion.id),
            excluded_id=str(exclusion.excluded_id),
            reason=exclusion.reason,
            created_at=exclusion.created_at,
        )
