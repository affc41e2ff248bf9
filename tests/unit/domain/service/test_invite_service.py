"""Unit tests for InviteService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from pact.config import InvitationSettings
from pact.domain.error import ConflictError, NotFoundError, ValidationError
from pact.domain.model.common import utc_now
from pact.domain.repository import InviteCodeRepository
from pact.domain.service import InviteService
from pact.domain.value import InviteRejection, UserId
from pact.persistence.repository.inmemory import InMemoryInviteCodeRepository
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

ADMIN_ID = UserId(uuid4())


def new_user_id() -> UserId:
    return UserId(uuid4())


class TestIssue:
    """Tests for issue method."""

    @pytest.mark.asyncio
    async def test_issue_generates_code_from_alphabet(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        settings = InvitationSettings()

        invite_code = await invite_service.issue(ADMIN_ID)

        assert len(invite_code.code.root) == settings.code_length
        assert set(invite_code.code.root) <= set(settings.code_alphabet)
        assert invite_code.is_active
        assert invite_code.current_uses == 0
        assert invite_code.max_uses == settings.default_max_uses
        assert invite_code.created_by == ADMIN_ID

    @pytest.mark.asyncio
    async def test_issue_custom_code_is_upper_cased(self, unit_env):
        invite_service = await unit_env.get(InviteService)

        invite_code = await invite_service.issue(ADMIN_ID, max_uses=5, code="weekly27")

        assert invite_code.code.root == "WEEKLY27"
        assert (await invite_service.get("Weekly27")).max_uses == 5

    @pytest.mark.asyncio
    async def test_issue_duplicate_custom_code_raises_conflict(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        await invite_service.issue(ADMIN_ID, code="SUMMER25")

        with pytest.raises(ConflictError) as exc_info:
            await invite_service.issue(ADMIN_ID, code="summer25")

        assert exc_info.value.reason == "duplicate_code"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"code": "ab"},
            {"code": "has space"},
            {"max_uses": 0},
            {"expires_at": utc_now() - timedelta(days=1)},
            {"expires_at": datetime(2099, 1, 1)},
            {"code": "WELC0ME1"},
            {"code": "OIOI2345"},
        ],
    )
    async def test_issue_rejects_invalid_input(self, unit_env, kwargs):
        invite_service = await unit_env.get(InviteService)

        with pytest.raises(ValidationError):
            await invite_service.issue(ADMIN_ID, **kwargs)

    @pytest.mark.asyncio
    async def test_issue_gives_up_after_repeated_collisions(
        self, unit_env, monkeypatch
    ):
        """Collisions on every draw should end in a conflict."""
        invite_service = await unit_env.get(InviteService)
        monkeypatch.setattr(
            "pact.domain.service.invite_service.generate_code",
            lambda length, alphabet: "SAMECODE",
        )
        await invite_service.issue(ADMIN_ID)

        with pytest.raises(ConflictError) as exc_info:
            await invite_service.issue(ADMIN_ID)

        assert exc_info.value.reason == "generation_failed"


class TestVerify:
    """Tests for verify method."""

    @pytest.mark.asyncio
    async def test_verify_usable_code(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        invite_code = await invite_service.issue(ADMIN_ID)

        verification = await invite_service.verify(invite_code.code.root.lower())

        assert verification.valid
        assert verification.reason is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw", ["NOPE1234", "!!", ""])
    async def test_verify_unknown_or_malformed_code(self, unit_env, raw):
        invite_service = await unit_env.get(InviteService)

        verification = await invite_service.verify(raw)

        assert not verification.valid
        assert verification.reason == InviteRejection.NOT_FOUND

    @pytest.mark.asyncio
    async def test_verify_expired_code(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        expires_at = utc_now() + timedelta(hours=1)
        invite_code = await invite_service.issue(ADMIN_ID, expires_at=expires_at)

        verification = await invite_service.verify(
            invite_code.code.root, now=expires_at + timedelta(seconds=1)
        )

        assert verification.reason == InviteRejection.EXPIRED

    @pytest.mark.asyncio
    async def test_verify_deactivated_code(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        invite_code = await invite_service.issue(ADMIN_ID)
        await invite_service.deactivate(invite_code.code.root)

        verification = await invite_service.verify(invite_code.code.root)

        assert verification.reason == InviteRejection.DEACTIVATED

    @pytest.mark.asyncio
    async def test_verify_does_not_consume(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        invite_code = await invite_service.issue(ADMIN_ID)

        await invite_service.verify(invite_code.code.root)

        assert (await invite_service.get(invite_code.code.root)).current_uses == 0


class TestConsume:
    """Tests for consume method."""

    @pytest.mark.asyncio
    async def test_multi_use_code_exhausts_after_max_uses(self, unit_env):
        """Consuming up to max_uses should deactivate the code."""
        # Arrange
        invite_service = await unit_env.get(InviteService)
        invite_code = await invite_service.issue(ADMIN_ID, max_uses=2)
        code = invite_code.code.root
        first_user, second_user = new_user_id(), new_user_id()

        # Act
        after_first = await invite_service.consume(code, first_user)
        after_second = await invite_service.consume(code, second_user)

        # Assert
        assert after_first.current_uses == 1
        assert after_first.is_active
        assert after_second.current_uses == 2
        assert not after_second.is_active
        assert after_second.used_by == second_user
        assert after_second.used_at is not None

        with pytest.raises(ConflictError) as exc_info:
            await invite_service.consume(code, new_user_id())
        assert exc_info.value.reason == "exhausted"

        verification = await invite_service.verify(code)
        assert verification.reason == InviteRejection.EXHAUSTED

    @pytest.mark.asyncio
    async def test_consume_unknown_code_raises_not_found(self, unit_env):
        invite_service = await unit_env.get(InviteService)

        with pytest.raises(NotFoundError):
            await invite_service.consume("MISSING1", new_user_id())

    @pytest.mark.asyncio
    async def test_consume_deactivated_code_raises_conflict(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        invite_code = await invite_service.issue(ADMIN_ID, max_uses=3)
        await invite_service.deactivate(invite_code.code.root)

        with pytest.raises(ConflictError) as exc_info:
            await invite_service.consume(invite_code.code.root, new_user_id())

        assert exc_info.value.reason == "deactivated"

    @pytest.mark.asyncio
    async def test_consume_gives_up_under_persistent_contention(self, unit_env):
        """Losing every compare-and-swap should end in a conflict."""

        class AlwaysStaleRepository(InMemoryInviteCodeRepository):
            async def compare_and_swap(self, invite_code, expected_version):
                return False

        repository = AlwaysStaleRepository()
        invite_service = InviteService(repository, InvitationSettings())
        invite_code = await invite_service.issue(ADMIN_ID)

        with pytest.raises(ConflictError) as exc_info:
            await invite_service.consume(invite_code.code.root, new_user_id())

        assert exc_info.value.reason == "contention"
        assert (await repository.find_by_code(invite_code.code)).current_uses == 0

    @pytest.mark.asyncio
    async def test_consume_retries_after_losing_one_race(self, unit_env):
        """A single lost race should be retried against the fresh state."""
        invite_service = await unit_env.get(InviteService)
        repository = await unit_env.get(InviteCodeRepository)
        invite_code = await invite_service.issue(ADMIN_ID, max_uses=2)
        rival = new_user_id()
        original_cas = repository.compare_and_swap
        raced = False

        async def racing_cas(updated, expected_version):
            nonlocal raced
            if not raced:
                raced = True
                # Another registration sneaks in first
                await invite_service.consume(invite_code.code.root, rival)
            return await original_cas(updated, expected_version)

        repository.compare_and_swap = racing_cas

        result = await invite_service.consume(invite_code.code.root, new_user_id())

        assert result.current_uses == 2
        assert not result.is_active


class TestReleaseAndDeactivate:
    """Tests for release and deactivate methods."""

    @pytest.mark.asyncio
    async def test_release_restores_consumed_use(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        invite_code = await invite_service.issue(ADMIN_ID)
        user_id = new_user_id()
        await invite_service.consume(invite_code.code.root, user_id)

        released = await invite_service.release(invite_code.code.root, user_id)

        assert released.current_uses == 0
        assert released.is_active
        assert released.used_by is None
        assert released.used_at is None

    @pytest.mark.asyncio
    async def test_release_keeps_revoked_code_inactive(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        invite_code = await invite_service.issue(ADMIN_ID, max_uses=2)
        user_id = new_user_id()
        await invite_service.consume(invite_code.code.root, user_id)
        await invite_service.deactivate(invite_code.code.root)

        released = await invite_service.release(invite_code.code.root, user_id)

        assert released.current_uses == 0
        assert not released.is_active

    @pytest.mark.asyncio
    async def test_deactivate_is_idempotent(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        invite_code = await invite_service.issue(ADMIN_ID)

        first = await invite_service.deactivate(invite_code.code.root)
        second = await invite_service.deactivate(invite_code.code.root)

        assert not first.is_active
        assert first.revoked_at is not None
        assert second.revoked_at == first.revoked_at

    @pytest.mark.asyncio
    async def test_deactivate_unknown_code_raises_not_found(self, unit_env):
        invite_service = await unit_env.get(InviteService)

        with pytest.raises(NotFoundError):
            await invite_service.deactivate("MISSING1")

    @pytest.mark.asyncio
    async def test_list_all_newest_first(self, unit_env):
        invite_service = await unit_env.get(InviteService)
        first = await invite_service.issue(ADMIN_ID, code="ALPHA234")
        second = await invite_service.issue(ADMIN_ID, code="DELTA234")

        codes = await invite_service.list_all()

        assert [c.code for c in codes] == [second.code, first.code]
