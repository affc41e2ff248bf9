"""PostgreSQL repository implementations."""

from pact.persistence.repository.exclusion import PostgresExclusionRepository
from pact.persistence.repository.invite_code import PostgresInviteCodeRepository
from pact.persistence.repository.lock import PostgresRunLock
from pact.persistence.repository.partnership import PostgresPartnershipRepository
from pact.persistence.repository.report import PostgresReportRepository
from pact.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresExclusionRepository",
    "PostgresPartnershipRepository",
    "PostgresInviteCodeRepository",
    "PostgresReportRepository",
    "PostgresRunLock",
]
