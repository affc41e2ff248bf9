"""Repository interfaces for the Pact domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from pact.domain.repository.exclusion import ExclusionRepository
from pact.domain.repository.invite_code import InviteCodeRepository
from pact.domain.repository.lock import RunLock
from pact.domain.repository.partnership import PartnershipRepository
from pact.domain.repository.report import ReportRepository
from pact.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ExclusionRepository",
    "PartnershipRepository",
    "InviteCodeRepository",
    "ReportRepository",
    "RunLock",
]
