"""Unit tests for ExclusionService."""

from uuid import uuid4

import pytest

from pact.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from pact.domain.service import ExclusionService
from pact.domain.value import ExclusionId, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


def new_user_id() -> UserId:
    return UserId(uuid4())


class TestExclusionService:
    """Tests for ExclusionService."""

    @pytest.mark.asyncio
    async def test_exclusion_is_directional(self, unit_env):
        """Excluding someone should not make them exclude you."""
        exclusion_service = await unit_env.get(ExclusionService)
        owner, other = new_user_id(), new_user_id()

        exclusion = await exclusion_service.add_exclusion(owner, other, "  ex  ")

        assert exclusion.reason == "ex"
        assert await exclusion_service.is_excluded(owner, other)
        assert not await exclusion_service.is_excluded(other, owner)
        assert await exclusion_service.either_excludes(other, owner)

    @pytest.mark.asyncio
    async def test_either_excludes_false_without_records(self, unit_env):
        exclusion_service = await unit_env.get(ExclusionService)

        assert not await exclusion_service.either_excludes(
            new_user_id(), new_user_id()
        )

    @pytest.mark.asyncio
    async def test_self_exclusion_rejected(self, unit_env):
        exclusion_service = await unit_env.get(ExclusionService)
        user_id = new_user_id()

        with pytest.raises(ValidationError):
            await exclusion_service.add_exclusion(user_id, user_id)

    @pytest.mark.asyncio
    async def test_store_keeps_duplicates(self, unit_env):
        exclusion_service = await unit_env.get(ExclusionService)
        owner, other = new_user_id(), new_user_id()

        await exclusion_service.add_exclusion(owner, other)
        await exclusion_service.add_exclusion(owner, other)

        assert len(await exclusion_service.list_for_owner(owner)) == 2

    @pytest.mark.asyncio
    async def test_remove_by_owner(self, unit_env):
        exclusion_service = await unit_env.get(ExclusionService)
        owner, other = new_user_id(), new_user_id()
        exclusion = await exclusion_service.add_exclusion(owner, other)

        await exclusion_service.remove_exclusion(exclusion.id, owner_id=owner)

        assert not await exclusion_service.is_excluded(owner, other)
        assert await exclusion_service.list_for_owner(owner) == []

    @pytest.mark.asyncio
    async def test_remove_by_non_owner_rejected(self, unit_env):
        exclusion_service = await unit_env.get(ExclusionService)
        owner, other = new_user_id(), new_user_id()
        exclusion = await exclusion_service.add_exclusion(owner, other)

        with pytest.raises(NotAuthorizedError):
            await exclusion_service.remove_exclusion(exclusion.id, owner_id=other)

        assert await exclusion_service.is_excluded(owner, other)

    @pytest.mark.asyncio
    async def test_remove_unknown_exclusion_raises_not_found(self, unit_env):
        exclusion_service = await unit_env.get(ExclusionService)

        with pytest.raises(NotFoundError):
            await exclusion_service.remove_exclusion(ExclusionId(uuid4()))
