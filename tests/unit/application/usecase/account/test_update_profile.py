"""Unit tests for UpdateProfileUseCase."""

from uuid import uuid4

import pytest

from pact.application.usecase.account import (
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from pact.domain.error import NotFoundError
from pact.domain.repository import UserRepository
from pact.domain.value import ContactPreference, Gender
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateProfileUseCase:
    """Tests for UpdateProfileUseCase."""

    @pytest.mark.asyncio
    async def test_gender_change_moves_matching_bucket(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        user = make_user(gender=Gender.MALE)
        await user_repo.save(user)
        use_case = await unit_env.get(UpdateProfileUseCase)

        response = await use_case.execute(
            UpdateProfileRequest(
                user_id=str(user.id),
                gender=Gender.PREFER_NOT_TO_SAY,
                contact_preference=ContactPreference.EMAIL,
            )
        )

        assert response.gender == Gender.PREFER_NOT_TO_SAY
        assert response.contact_preference == ContactPreference.EMAIL
        assert response.username == user.username.root
        stored = await user_repo.find_by_id(user.id)
        assert stored.gender == Gender.PREFER_NOT_TO_SAY

    @pytest.mark.asyncio
    async def test_empty_update_is_a_no_op(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        user = make_user()
        await user_repo.save(user)
        use_case = await unit_env.get(UpdateProfileUseCase)

        response = await use_case.execute(UpdateProfileRequest(user_id=str(user.id)))

        assert response.name == user.name
        assert await user_repo.find_by_id(user.id) == user

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        use_case = await unit_env.get(UpdateProfileUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateProfileRequest(user_id=str(uuid4()), name="Ghost")
            )
