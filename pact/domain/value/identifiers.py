"""Strongly typed identifiers for Pact domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PartnershipId = NewType("PartnershipId", UUID)
ExclusionId = NewType("ExclusionId", UUID)
ReportId = NewType("ReportId", UUID)
