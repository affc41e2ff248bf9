"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from pact.domain.error import (
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from pact.domain.repository import UserRepository
from pact.domain.service import UserService
from pact.domain.value import Gender, UserId, Username
from tests.conftest import at, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestUserService:
    """Tests for UserService."""

    @pytest.mark.asyncio
    async def test_create_and_fetch_user(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = make_user(username="alice")

        await user_service.create_user(user)

        assert (await user_service.get_by_id(user.id)).username == Username("alice")
        assert (await user_service.get_by_username(Username("alice"))).id == user.id

    @pytest.mark.asyncio
    async def test_duplicate_username_raises_conflict(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.create_user(make_user(username="alice"))

        with pytest.raises(ConflictError) as exc_info:
            await user_service.create_user(make_user(username="alice"))

        assert exc_info.value.reason == "username_taken"

    @pytest.mark.asyncio
    async def test_get_unknown_user_raises_not_found(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_require_admin(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        admin = make_user(is_admin=True)
        member = make_user()
        await user_repo.save(admin)
        await user_repo.save(member)

        assert (await user_service.require_admin(admin.id, "run matching")) == admin
        with pytest.raises(NotAuthorizedError):
            await user_service.require_admin(member.id, "run matching")

    @pytest.mark.asyncio
    async def test_list_and_count_active(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        active = make_user()
        await user_repo.save(active)
        await user_repo.save(make_user(is_active=False))

        assert [u.id for u in await user_service.list_active()] == [active.id]
        assert await user_service.count_active() == 1


class TestProfileAndAdmin:
    """Tests for profile edits, promotion and login stamps."""

    @pytest.mark.asyncio
    async def test_update_profile_changes_only_given_fields(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.create_user(make_user(gender=Gender.FEMALE))

        updated = await user_service.update_profile(
            user.id, gender=Gender.NON_BINARY, timezone="Europe/Dublin"
        )

        assert updated.gender == Gender.NON_BINARY
        assert updated.timezone == "Europe/Dublin"
        assert updated.name == user.name
        assert (await user_service.get_by_id(user.id)).gender == Gender.NON_BINARY

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "changes", [{"name": "   "}, {"name": "x" * 101}, {"timezone": "x" * 65}]
    )
    async def test_update_profile_rejects_invalid_values(self, unit_env, changes):
        user_service = await unit_env.get(UserService)
        user = await user_service.create_user(make_user())

        with pytest.raises(ValidationError):
            await user_service.update_profile(user.id, **changes)

        assert (await user_service.get_by_id(user.id)) == user

    @pytest.mark.asyncio
    async def test_update_profile_keeps_password(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.create_user(make_user(password_hash="$2b$04$hash"))

        updated = await user_service.update_profile(user.id, name="Renamed")

        assert updated.password_hash == "$2b$04$hash"

    @pytest.mark.asyncio
    async def test_grant_admin(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.create_user(make_user())

        promoted = await user_service.grant_admin(user.id)

        assert promoted.is_admin
        assert (await user_service.require_admin(user.id, "run matching")).is_admin

    @pytest.mark.asyncio
    async def test_record_login(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.create_user(make_user())

        stamped = await user_service.record_login(user, at(2025, 3, 1))

        assert stamped.last_login_at == at(2025, 3, 1)
        assert (await user_service.get_by_id(user.id)).last_login_at == at(2025, 3, 1)
