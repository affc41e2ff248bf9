"""Domain value objects for Pact."""

from pact.domain.value.identifiers import (
    ExclusionId,
    PartnershipId,
    ReportId,
    UserId,
)
from pact.domain.value.types import (
    ContactPreference,
    Gender,
    InviteCodeValue,
    InviteRejection,
    InviteVerification,
    PartnershipStatus,
    ReportStatus,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "PartnershipId",
    "ExclusionId",
    "ReportId",
    # Types
    "Gender",
    "ContactPreference",
    "PartnershipStatus",
    "ReportStatus",
    "InviteRejection",
    "InviteVerification",
    "Username",
    "InviteCodeValue",
]
