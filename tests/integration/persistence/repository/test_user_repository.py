"""Integration tests for PostgresUserRepository.

Require a migrated PostgreSQL database at DATABASE__URL.
"""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from pact.application.usecase.account import (
    RegisterUserRequest,
    RegisterUserUseCase,
)
from pact.domain.error import ConflictError
from pact.domain.repository import UserRepository
from pact.domain.service import InviteService
from pact.domain.value import Gender
from tests.conftest import make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


class TestUserRepositoryIntegration:
    """Integration tests for username uniqueness."""

    @pytest.mark.asyncio
    async def test_duplicate_username_raises_and_session_survives(
        self, integration_env
    ):
        repo = await integration_env.get(UserRepository)
        first = make_user(username=f"dup_{uuid4().hex[:8]}")
        await repo.save(first)

        with pytest.raises(IntegrityError):
            await repo.save(make_user(username=first.username.root))

        assert await repo.find_by_id(first.id) is not None

    @pytest.mark.asyncio
    async def test_username_race_during_registration_releases_code(
        self, integration_env, monkeypatch
    ):
        user_repo = await integration_env.get(UserRepository)
        invite_service = await integration_env.get(InviteService)
        use_case = await integration_env.get(RegisterUserUseCase)
        admin = make_user(is_admin=True)
        await user_repo.save(admin)
        invite_code = await invite_service.issue(admin.id, max_uses=1)

        # Another registration takes the name after the availability check
        username = f"race_{uuid4().hex[:8]}"
        await user_repo.save(make_user(username=username))

        async def name_looks_free(_username):
            return None

        monkeypatch.setattr(user_repo, "find_by_username", name_looks_free)

        with pytest.raises(ConflictError) as exc_info:
            await use_case.execute(
                RegisterUserRequest(
                    username=username,
                    name="Racer",
                    gender=Gender.FEMALE,
                    invite_code=invite_code.code.root,
                    password="correct horse",
                )
            )

        assert exc_info.value.reason == "username_taken"
        released = await invite_service.get(invite_code.code.root)
        assert released.current_uses == 0
        assert released.is_active
        assert released.used_by is None
