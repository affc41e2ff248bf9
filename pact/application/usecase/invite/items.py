"""Invite code response item."""

from datetime import datetime

from pydantic import BaseModel

from pact.domain.model import InviteCode


class InviteCodeItem(BaseModel):
    """Invite code as shown to administrators."""

    code: str
    created_by: str
    used_by: str | None
    is_active: bool
    max_uses: int
    current_uses: int
    expires_at: datetime | None
    created_at: datetime
    used_at: datetime | None
    revoked_at: datetime | None

    @classmethod
    def from_entity(cls, invite_code: InviteCode) -> "InviteCodeItem":
        return cls(
            code=invite_code.code.root,
            created_by=str(invite_code.created_by),
            used_by=str(invite_code.used_by) if invite_code.used_by else None,
            is_active=invite_code.is_active,
            max_uses=invite_code.max_uses,
            current_uses=invite_code.current_uses,
            expires_at=invite_code.expires_at,
            created_at=invite_code.created_at,
            used_at=invite_code.used_at,
            revoked_at=invite_code.revoked_at,
        )
