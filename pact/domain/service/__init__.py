"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .exclusion_service import ExclusionService
from .invite_service import InviteService
from .jwt_service import JWTService
from .matching_service import (
    MatchingResult,
    MatchingService,
    add_months,
    bucket_by_category,
    pair_consecutive,
    shuffle,
)
from .partnership_service import PartnershipService
from .report_service import ReportService
from .user_service import UserService

__all__ = [
    "AuthService",
    "ExclusionService",
    "InviteService",
    "JWTService",
    "MatchingResult",
    "MatchingService",
    "PartnershipService",
    "ReportService",
    "Service",
    "UserService",
    "add_months",
    "bucket_by_category",
    "pair_consecutive",
    "shuffle",
]
