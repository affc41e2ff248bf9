"""Exclusion entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from pact.domain.model.common import DomainModel, utc_now
from pact.domain.value import ExclusionId, UserId


class Exclusion(DomainModel):
    """One-directional "never match me with this user" record.

    Business rules:
    - owner_id excludes excluded_id; the reverse is not implied
    - Created by the owner, deleted by the owner, never edited
    - Never expires
    """

    id: ExclusionId
    owner_id: UserId
    excluded_id: UserId
    reason: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
