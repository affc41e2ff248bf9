"""Domain value objects for Pact.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and the two lifecycle state machines.
"""

import re
from enum import Enum

from pydantic import field_validator

from pact.domain.value.common import RootValueObject, ValueObject


class Gender(str, Enum):
    """Compatibility category used to bucket users for matching.

    PREFER_NOT_TO_SAY is the flexible category: those users are only ever
    matched with each other.
    """

    MALE = "male"
    FEMALE = "female"
    NON_BINARY = "non_binary"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class ContactPreference(str, Enum):
    """How a user prefers to be reached by their partner."""

    TEXT = "text"
    EMAIL = "email"
    APP_ONLY = "app_only"


class PartnershipStatus(str, Enum):
    """Status of a partnership.

    ACTIVE is the only non-terminal state.
    """

    ACTIVE = "active"
    COMPLETED = "completed"
    ENDED_EARLY = "ended_early"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self is not PartnershipStatus.ACTIVE

    def can_transition_to(self, target: "PartnershipStatus") -> bool:
        """Return True if ``self -> target`` is a legal edge."""
        return target in _PARTNERSHIP_TRANSITIONS[self]


_PARTNERSHIP_TRANSITIONS: dict[PartnershipStatus, frozenset[PartnershipStatus]] = {
    PartnershipStatus.ACTIVE: frozenset(
        {
            PartnershipStatus.COMPLETED,
            PartnershipStatus.ENDED_EARLY,
            PartnershipStatus.CANCELLED,
        }
    ),
    PartnershipStatus.COMPLETED: frozenset(),
    PartnershipStatus.ENDED_EARLY: frozenset(),
    PartnershipStatus.CANCELLED: frozenset(),
}


class ReportStatus(str, Enum):
    """Review status of a safety report.

    pending -> investigating | dismissed
    investigating -> resolved | dismissed
    """

    PENDING = "pending"
    INVESTIGATING = "investigating"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"

    @property
    def is_terminal(self) -> bool:
        return not _REPORT_TRANSITIONS[self]

    def can_transition_to(self, target: "ReportStatus") -> bool:
        """Return True if ``self -> target`` is a legal edge."""
        return target in _REPORT_TRANSITIONS[self]


_REPORT_TRANSITIONS: dict[ReportStatus, frozenset[ReportStatus]] = {
    ReportStatus.PENDING: frozenset(
        {ReportStatus.INVESTIGATING, ReportStatus.DISMISSED}
    ),
    ReportStatus.INVESTIGATING: frozenset(
        {ReportStatus.RESOLVED, ReportStatus.DISMISSED}
    ),
    ReportStatus.RESOLVED: frozenset(),
    ReportStatus.DISMISSED: frozenset(),
}


class InviteRejection(str, Enum):
    """Why an invite code cannot be used."""

    NOT_FOUND = "not_found"
    DEACTIVATED = "deactivated"
    EXPIRED = "expired"
    EXHAUSTED = "exhausted"


class Username(RootValueObject[str]):
    """Unique login name of a user.

    3-30 characters: letters, digits, underscores, dots and hyphens.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_.-]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters of letters, digits, '_', '.' or '-'"
            )
        return v


class InviteCodeValue(RootValueObject[str]):
    """Registration token handed out by administrators.

    Codes are case-insensitive and stored upper-cased, 4-20 alphanumerics.
    """

    @field_validator("root")
    @classmethod
    def validate_code_format(cls, v: str) -> str:
        """Normalize to upper case and validate format."""
        normalized = v.strip().upper()
        if not re.match(r"^[A-Z0-9]{4,20}$", normalized):
            raise ValueError("Invite code must be 4-20 letters or digits")
        return normalized


class InviteVerification(ValueObject):
    """Outcome of checking an invite code without consuming it."""

    valid: bool
    reason: InviteRejection | None = None
