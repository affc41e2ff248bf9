"""User read model.

Users are owned by the account subsystem. The matching core only reads
the activity flag, the compatibility category and the admin flag. The
password hash never leaves the domain and persistence layers.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from pact.domain.model.common import DomainModel, utc_now
from pact.domain.value import ContactPreference, Gender, UserId, Username


class User(DomainModel):
    """A participant who can be paired into partnerships."""

    id: UserId
    username: Username
    name: str = Field(min_length=1, max_length=100)
    gender: Gender
    contact_preference: ContactPreference = ContactPreference.APP_ONLY
    timezone: Optional[str] = Field(default=None, max_length=64)
    is_active: bool = True  # Only active users enter the matching pool
    is_admin: bool = False
    password_hash: Optional[str] = Field(default=None, repr=False)
    created_at: datetime = Field(default_factory=utc_now)
    last_login_at: Optional[datetime] = None
