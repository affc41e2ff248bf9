"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from pact.domain.model import Exclusion, InviteCode, Partnership, Report, User
from pact.domain.value import (
    ContactPreference,
    ExclusionId,
    Gender,
    InviteCodeValue,
    PartnershipId,
    PartnershipStatus,
    ReportId,
    ReportStatus,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        name=row["name"],
        gender=Gender(row["gender"]),
        contact_preference=ContactPreference(row["contact_preference"]),
        timezone=row.get("timezone"),
        is_active=row["is_active"],
        is_admin=row["is_admin"],
        password_hash=row.get("password_hash"),
        created_at=row["created_at"],
        last_login_at=row.get("last_login_at"),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "username": user.username.root,
        "name": user.name,
        "gender": user.gender.value,
        "contact_preference": user.contact_preference.value,
        "timezone": user.timezone,
        "is_active": user.is_active,
        "is_admin": user.is_admin,
        "password_hash": user.password_hash,
        "created_at": user.created_at,
        "last_login_at": user.last_login_at,
    }


def row_to_partnership(row: Dict[str, Any]) -> Partnership:
    """Convert database row to Partnership domain model."""
    return Partnership(
        id=PartnershipId(_uuid(row["id"])),
        user_a_id=UserId(_uuid(row["user_a_id"])),
        user_b_id=UserId(_uuid(row["user_b_id"])),
        start_date=row["start_date"],
        end_date=row["end_date"],
        status=PartnershipStatus(row["status"]),
        created_at=row["created_at"],
    )


def partnership_to_dict(partnership: Partnership) -> Dict[str, Any]:
    """Convert Partnership domain model to database dict."""
    return {
        "id": partnership.id,
        "user_a_id": partnership.user_a_id,
        "user_b_id": partnership.user_b_id,
        "start_date": partnership.start_date,
        "end_date": partnership.end_date,
        "status": partnership.status.value,
        "created_at": partnership.created_at,
    }


def row_to_exclusion(row: Dict[str, Any]) -> Exclusion:
    """Convert database row to Exclusion domain model."""
    return Exclusion(
        id=ExclusionId(_uuid(row["id"])),
        owner_id=UserId(_uuid(row["owner_id"])),
        excluded_id=UserId(_uuid(row["excluded_id"])),
        reason=row.get("reason"),
        created_at=row["created_at"],
    )


def exclusion_to_dict(exclusion: Exclusion) -> Dict[str, Any]:
    """Convert Exclusion domain model to database dict."""
    return exclusion.model_dump()


def row_to_invite_code(row: Dict[str, Any]) -> InviteCode:
    """Convert database row to InviteCode domain model."""
    used_by = _optional_uuid(row.get("used_by"))
    return InviteCode(
        code=InviteCodeValue(row["code"]),
        created_by=UserId(_uuid(row["created_by"])),
        used_by=UserId(used_by) if used_by else None,
        is_active=row["is_active"],
        max_uses=row["max_uses"],
        current_uses=row["current_uses"],
        expires_at=row.get("expires_at"),
        created_at=row["created_at"],
        used_at=row.get("used_at"),
        revoked_at=row.get("revoked_at"),
        version=row["version"],
    )


def invite_code_to_dict(invite_code: InviteCode) -> Dict[str, Any]:
    """Convert InviteCode domain model to database dict."""
    data = invite_code.model_dump()
    data["code"] = invite_code.code.root
    return data


def row_to_report(row: Dict[str, Any]) -> Report:
    """Convert database row to Report domain model."""
    partnership_id = _optional_uuid(row.get("partnership_id"))
    return Report(
        id=ReportId(_uuid(row["id"])),
        reporter_id=UserId(_uuid(row["reporter_id"])),
        reported_id=UserId(_uuid(row["reported_id"])),
        partnership_id=PartnershipId(partnership_id) if partnership_id else None,
        reason=row["reason"],
        description=row.get("description"),
        status=ReportStatus(row["status"]),
        created_at=row["created_at"],
    )


def report_to_dict(report: Report) -> Dict[str, Any]:
    """Convert Report domain model to database dict."""
    data = report.model_dump()
    data["status"] = report.status.value
    return data
