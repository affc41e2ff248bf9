"""In-memory repository implementations for testing."""

from .exclusion import InMemoryExclusionRepository
from .invite_code import InMemoryInviteCodeRepository
from .lock import InMemoryRunLock
from .partnership import InMemoryPartnershipRepository
from .report import InMemoryReportRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryExclusionRepository",
    "InMemoryInviteCodeRepository",
    "InMemoryPartnershipRepository",
    "InMemoryReportRepository",
    "InMemoryRunLock",
    "InMemoryUserRepository",
]
