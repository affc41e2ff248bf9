"""Unit tests for AuthService."""

import pytest

from pact.config import AuthSettings
from pact.domain.error import AuthenticationError, ValidationError
from pact.domain.repository import UserRepository
from pact.domain.service import AuthService, UserService
from pact.util.password import hash_password
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def saved_user(env, password: str | None = "correct horse", **kwargs):
    user = make_user(
        password_hash=hash_password(password, rounds=4) if password else None,
        **kwargs,
    )
    await (await env.get(UserRepository)).save(user)
    return user


class TestAuthenticate:
    """Tests for authenticate method."""

    @pytest.mark.asyncio
    async def test_correct_password(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        user = await saved_user(unit_env, username="alice")

        assert (await auth_service.authenticate("alice", "correct horse")).id == user.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username,password",
        [
            ("alice", "wrong horse"),
            ("nobody", "correct horse"),
            ("not valid!", "correct horse"),
        ],
    )
    async def test_bad_credentials_share_one_message(
        self, unit_env, username, password
    ):
        auth_service = await unit_env.get(AuthService)
        await saved_user(unit_env, username="alice")

        with pytest.raises(AuthenticationError, match="Invalid username or password"):
            await auth_service.authenticate(username, password)

    @pytest.mark.asyncio
    async def test_account_without_password_cannot_log_in(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        await saved_user(unit_env, password=None, username="legacy")

        with pytest.raises(AuthenticationError):
            await auth_service.authenticate("legacy", "")

    @pytest.mark.asyncio
    async def test_deactivated_account_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        await saved_user(unit_env, username="gone", is_active=False)

        with pytest.raises(AuthenticationError, match="deactivated"):
            await auth_service.authenticate("gone", "correct horse")


class TestHashPassword:
    """Tests for the password policy."""

    @pytest.mark.asyncio
    async def test_short_password_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(ValidationError):
            auth_service.hash_password("short")

    @pytest.mark.asyncio
    async def test_uses_configured_cost(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        hashed = auth_service.hash_password("correct horse")

        assert hashed.split("$")[2] == "04"


class TestCheckSetupToken:
    """Tests for the administrator bootstrap guard."""

    def _service(self, token: str | None) -> AuthService:
        return AuthService(
            user_service=UserService(user_repository=None),
            auth_settings=AuthSettings(admin_setup_token=token),
        )

    def test_disabled_when_unset(self):
        with pytest.raises(AuthenticationError, match="disabled"):
            self._service(None).check_setup_token("anything")

    @pytest.mark.parametrize("given", [None, "", "wrong", "s3cret "])
    def test_wrong_token_rejected(self, given):
        with pytest.raises(AuthenticationError, match="Invalid admin setup token"):
            self._service("s3cret").check_setup_token(given)

    def test_matching_token_accepted(self):
        self._service("s3cret").check_setup_token("s3cret")
