"""Domain model entities for Pact."""

from pact.domain.model.exclusion import Exclusion
from pact.domain.model.invite_code import InviteCode
from pact.domain.model.partnership import Partnership
from pact.domain.model.report import Report
from pact.domain.model.user import User

__all__ = [
    "User",
    "Exclusion",
    "Partnership",
    "InviteCode",
    "Report",
]
