"""Unit tests for PartnershipService."""

from uuid import uuid4

import pytest

from pact.domain.error import (
    ConflictError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from pact.domain.service import PartnershipService
from pact.domain.value import PartnershipId, PartnershipStatus, UserId
from tests.conftest import at
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

START = at(2025, 3, 1)
END = at(2025, 4, 1)


def new_user_id() -> UserId:
    return UserId(uuid4())


class TestCreate:
    """Tests for create method."""

    @pytest.mark.asyncio
    async def test_create_partnership_success(self, unit_env):
        """A new partnership should be active with the given dates."""
        partnership_service = await unit_env.get(PartnershipService)
        user_a, user_b = new_user_id(), new_user_id()

        partnership = await partnership_service.create(user_a, user_b, START, END)

        assert partnership.status == PartnershipStatus.ACTIVE
        assert partnership.user_a_id == user_a
        assert partnership.user_b_id == user_b
        assert partnership.start_date == START
        assert partnership.end_date == END
        assert await partnership_service.get_active_for_user(user_b) == partnership

    @pytest.mark.asyncio
    async def test_create_rejects_user_already_partnered(self, unit_env):
        """A user should never be in two active partnerships."""
        partnership_service = await unit_env.get(PartnershipService)
        user_a, user_b, user_c = new_user_id(), new_user_id(), new_user_id()
        await partnership_service.create(user_a, user_b, START, END)

        with pytest.raises(ConflictError) as exc_info:
            await partnership_service.create(user_c, user_b, START, END)

        assert exc_info.value.reason == "already_partnered"
        assert await partnership_service.count_active() == 1

    @pytest.mark.asyncio
    async def test_create_rejects_same_user_twice(self, unit_env):
        partnership_service = await unit_env.get(PartnershipService)
        user_id = new_user_id()

        with pytest.raises(ValidationError):
            await partnership_service.create(user_id, user_id, START, END)

    @pytest.mark.asyncio
    async def test_create_rejects_inverted_dates(self, unit_env):
        partnership_service = await unit_env.get(PartnershipService)

        with pytest.raises(ValidationError):
            await partnership_service.create(new_user_id(), new_user_id(), END, START)

    @pytest.mark.asyncio
    async def test_user_can_be_partnered_again_after_completion(self, unit_env):
        partnership_service = await unit_env.get(PartnershipService)
        user_a, user_b, user_c = new_user_id(), new_user_id(), new_user_id()
        first = await partnership_service.create(user_a, user_b, START, END)
        await partnership_service.complete(first.id)

        second = await partnership_service.create(user_a, user_c, END, at(2025, 5, 1))

        assert second.status == PartnershipStatus.ACTIVE


class TestTransitions:
    """Tests for complete, end_early and cancel."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "action,expected",
        [
            ("complete", PartnershipStatus.COMPLETED),
            ("end_early", PartnershipStatus.ENDED_EARLY),
            ("cancel", PartnershipStatus.CANCELLED),
        ],
    )
    async def test_active_partnership_can_move_to_terminal_status(
        self, unit_env, action, expected
    ):
        partnership_service = await unit_env.get(PartnershipService)
        user_a = new_user_id()
        partnership = await partnership_service.create(
            user_a, new_user_id(), START, END
        )

        updated = await getattr(partnership_service, action)(partnership.id)

        assert updated.status == expected
        assert await partnership_service.get_active_for_user(user_a) is None

    @pytest.mark.asyncio
    async def test_terminal_partnership_cannot_change(self, unit_env):
        """Terminal statuses should reject every further transition."""
        partnership_service = await unit_env.get(PartnershipService)
        partnership = await partnership_service.create(
            new_user_id(), new_user_id(), START, END
        )
        await partnership_service.end_early(partnership.id)

        with pytest.raises(InvalidStateError) as exc_info:
            await partnership_service.complete(partnership.id)

        assert exc_info.value.current == "ended_early"
        assert exc_info.value.target == "completed"
        stored = await partnership_service.get_by_id(partnership.id)
        assert stored.status == PartnershipStatus.ENDED_EARLY

    @pytest.mark.asyncio
    async def test_transition_unknown_partnership_raises_not_found(self, unit_env):
        partnership_service = await unit_env.get(PartnershipService)

        with pytest.raises(NotFoundError):
            await partnership_service.cancel(PartnershipId(uuid4()))


class TestQueries:
    """Tests for history, listing and the expiry sweep."""

    @pytest.mark.asyncio
    async def test_history_is_newest_first(self, unit_env):
        partnership_service = await unit_env.get(PartnershipService)
        user_id = new_user_id()
        first = await partnership_service.create(user_id, new_user_id(), START, END)
        await partnership_service.complete(first.id)
        second = await partnership_service.create(
            user_id, new_user_id(), END, at(2025, 5, 1)
        )

        history = await partnership_service.get_history_for_user(user_id)

        assert [p.id for p in history] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_history_empty_for_unknown_user(self, unit_env):
        partnership_service = await unit_env.get(PartnershipService)

        assert await partnership_service.get_history_for_user(new_user_id()) == []

    @pytest.mark.asyncio
    async def test_complete_expired_only_touches_ended_partnerships(self, unit_env):
        partnership_service = await unit_env.get(PartnershipService)
        expired = await partnership_service.create(
            new_user_id(), new_user_id(), at(2025, 1, 1), at(2025, 2, 1)
        )
        running = await partnership_service.create(
            new_user_id(), new_user_id(), at(2025, 2, 1), at(2025, 3, 1)
        )

        completed = await partnership_service.complete_expired(now=at(2025, 2, 15))

        assert [p.id for p in completed] == [expired.id]
        assert (
            await partnership_service.get_by_id(running.id)
        ).status == PartnershipStatus.ACTIVE
        assert await partnership_service.count_active() == 1
