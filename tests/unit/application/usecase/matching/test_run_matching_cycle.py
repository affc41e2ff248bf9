"""Unit tests for RunMatchingCycleUseCase."""

import pytest

from pact.application.usecase.matching import RunMatchingCycleUseCase
from pact.application.usecase.matching.run_matching_cycle import (
    RunMatchingCycleRequest,
)
from pact.domain.error import NotAuthorizedError
from pact.domain.repository import UserRepository
from pact.domain.value import Gender
from tests.conftest import at, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRunMatchingCycleUseCase:
    """Tests for RunMatchingCycleUseCase."""

    @pytest.mark.asyncio
    async def test_admin_runs_cycle(self, unit_env):
        """The admin is an active user too, so they can be matched."""
        user_repo = await unit_env.get(UserRepository)
        admin = make_user(gender=Gender.MALE, is_admin=True)
        member = make_user(gender=Gender.MALE)
        loner = make_user(gender=Gender.FEMALE)
        for user in (admin, member, loner):
            await user_repo.save(user)
        use_case = await unit_env.get(RunMatchingCycleUseCase)

        response = await use_case.execute(
            RunMatchingCycleRequest(admin_id=str(admin.id), current_date=at(2025, 1, 31))
        )

        assert len(response.partnerships) == 1
        partnership = response.partnerships[0]
        assert {partnership.user_a_id, partnership.user_b_id} == {
            str(admin.id),
            str(member.id),
        }
        assert partnership.end_date == at(2025, 2, 28)
        assert response.unmatched == [str(loner.id)]

    @pytest.mark.asyncio
    async def test_member_cannot_run_cycle(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        member = make_user()
        await user_repo.save(member)
        use_case = await unit_env.get(RunMatchingCycleUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(RunMatchingCycleRequest(admin_id=str(member.id)))
