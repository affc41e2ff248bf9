"""Test configuration and fixtures."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire
import pytest

from pact.domain.model import User
from pact.domain.value import Gender, UserId, Username

# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(autouse=True)
def cheap_password_hashing(monkeypatch):
    """Minimum bcrypt cost so tests that hash passwords stay fast."""
    monkeypatch.setenv("AUTH__PASSWORD_HASH_ROUNDS", "4")


def make_user(
    gender: Gender = Gender.FEMALE,
    username: str | None = None,
    is_active: bool = True,
    is_admin: bool = False,
    password_hash: str | None = None,
) -> User:
    """Build a user with a unique username unless one is given."""
    user_id = UserId(uuid4())
    return User(
        id=user_id,
        username=Username(username or f"user_{user_id.hex[:8]}"),
        name="Test User",
        gender=gender,
        is_active=is_active,
        is_admin=is_admin,
        password_hash=password_hash,
    )


def at(year: int, month: int, day: int) -> datetime:
    """Midnight UTC on the given date."""
    return datetime(year, month, day, tzinfo=timezone.utc)
