"""Integration tests for PostgresPartnershipRepository.

Require a migrated PostgreSQL database at DATABASE__URL.
"""

from uuid import uuid4

import pytest

from pact.domain.model import Partnership
from pact.domain.repository import PartnershipRepository, UserRepository
from pact.domain.value import PartnershipId, PartnershipStatus
from pact.persistence.repository.partnership import advisory_lock_key
from tests.conftest import at, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


async def saved_users(env, count: int):
    user_repo = await env.get(UserRepository)
    users = [make_user() for _ in range(count)]
    for user in users:
        await user_repo.save(user)
    return users


def new_partnership(user_a, user_b) -> Partnership:
    return Partnership(
        id=PartnershipId(uuid4()),
        user_a_id=user_a.id,
        user_b_id=user_b.id,
        start_date=at(2025, 3, 1),
        end_date=at(2025, 4, 1),
    )


class TestPartnershipRepositoryIntegration:
    """Integration tests for the guarded insert and conditional updates."""

    @pytest.mark.asyncio
    async def test_create_if_available_refuses_booked_user(self, integration_env):
        repo = await integration_env.get(PartnershipRepository)
        user_a, user_b, user_c = await saved_users(integration_env, 3)

        first = await repo.create_if_available(new_partnership(user_a, user_b))
        second = await repo.create_if_available(new_partnership(user_c, user_b))

        assert first is not None
        assert second is None
        assert (await repo.find_active_for_user(user_b.id)).id == first.id
        assert user_c.id not in await repo.find_active_user_ids()

    @pytest.mark.asyncio
    async def test_refused_insert_leaves_session_usable(self, integration_env):
        """A refused pair must not poison the rest of the transaction."""
        repo = await integration_env.get(PartnershipRepository)
        user_a, user_b, user_c, user_d = await saved_users(integration_env, 4)
        await repo.create_if_available(new_partnership(user_a, user_b))

        assert await repo.create_if_available(new_partnership(user_a, user_c)) is None
        assert await repo.create_if_available(new_partnership(user_c, user_d))

    @pytest.mark.asyncio
    async def test_update_status_only_from_expected(self, integration_env):
        repo = await integration_env.get(PartnershipRepository)
        user_a, user_b = await saved_users(integration_env, 2)
        partnership = await repo.create_if_available(new_partnership(user_a, user_b))

        completed = await repo.update_status(
            partnership.id, PartnershipStatus.ACTIVE, PartnershipStatus.COMPLETED
        )
        stale = await repo.update_status(
            partnership.id, PartnershipStatus.ACTIVE, PartnershipStatus.CANCELLED
        )

        assert completed.status == PartnershipStatus.COMPLETED
        assert stale is None
        assert (await repo.find_by_id(partnership.id)).status == (
            PartnershipStatus.COMPLETED
        )

    @pytest.mark.asyncio
    async def test_history_newest_first(self, integration_env):
        repo = await integration_env.get(PartnershipRepository)
        user_a, user_b, user_c = await saved_users(integration_env, 3)
        first = await repo.create_if_available(new_partnership(user_a, user_b))
        await repo.update_status(
            first.id, PartnershipStatus.ACTIVE, PartnershipStatus.COMPLETED
        )
        second = await repo.create_if_available(new_partnership(user_a, user_c))

        history = await repo.find_for_user(user_a.id)

        assert [p.id for p in history] == [second.id, first.id]


def test_advisory_lock_key_fits_bigint():
    key = advisory_lock_key(uuid4())
    assert -(2**63) <= key < 2**63
