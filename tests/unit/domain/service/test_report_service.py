"""Unit tests for ReportService."""

from uuid import uuid4

import pytest

from pact.domain.error import InvalidStateError, NotFoundError, ValidationError
from pact.domain.service import PartnershipService, ReportService
from pact.domain.value import PartnershipId, ReportId, ReportStatus, UserId
from tests.conftest import at
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


def new_user_id() -> UserId:
    return UserId(uuid4())


class TestFile:
    """Tests for file method."""

    @pytest.mark.asyncio
    async def test_file_report_starts_pending(self, unit_env):
        report_service = await unit_env.get(ReportService)
        reporter, reported = new_user_id(), new_user_id()

        report = await report_service.file(
            reporter, reported, "  Missed every check-in  ", description="Details"
        )

        assert report.status == ReportStatus.PENDING
        assert report.reason == "Missed every check-in"
        assert report.reporter_id == reporter
        assert report.reported_id == reported
        assert await report_service.count_pending() == 1

    @pytest.mark.asyncio
    async def test_file_report_about_partnership(self, unit_env):
        report_service = await unit_env.get(ReportService)
        partnership_service = await unit_env.get(PartnershipService)
        reporter, reported = new_user_id(), new_user_id()
        partnership = await partnership_service.create(
            reporter, reported, at(2025, 3, 1), at(2025, 4, 1)
        )

        report = await report_service.file(
            reporter, reported, "Rude", partnership_id=partnership.id
        )

        assert report.partnership_id == partnership.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("reason", ["", "   ", "x" * 201])
    async def test_file_rejects_bad_reason(self, unit_env, reason):
        report_service = await unit_env.get(ReportService)

        with pytest.raises(ValidationError):
            await report_service.file(new_user_id(), new_user_id(), reason)

    @pytest.mark.asyncio
    async def test_file_rejects_self_report(self, unit_env):
        report_service = await unit_env.get(ReportService)
        user_id = new_user_id()

        with pytest.raises(ValidationError):
            await report_service.file(user_id, user_id, "Spam")

    @pytest.mark.asyncio
    async def test_file_rejects_unknown_partnership(self, unit_env):
        report_service = await unit_env.get(ReportService)

        with pytest.raises(NotFoundError):
            await report_service.file(
                new_user_id(),
                new_user_id(),
                "Spam",
                partnership_id=PartnershipId(uuid4()),
            )


class TestTransition:
    """Tests for the review workflow."""

    @pytest.mark.asyncio
    async def test_report_reviewed_to_resolution(self, unit_env):
        """pending -> investigating -> resolved, then frozen."""
        # Arrange
        report_service = await unit_env.get(ReportService)
        report = await report_service.file(new_user_id(), new_user_id(), "Harassment")

        # Act
        investigating = await report_service.transition(
            report.id, ReportStatus.INVESTIGATING
        )
        resolved = await report_service.transition(report.id, ReportStatus.RESOLVED)

        # Assert
        assert investigating.status == ReportStatus.INVESTIGATING
        assert resolved.status == ReportStatus.RESOLVED
        assert await report_service.count_pending() == 0

        with pytest.raises(InvalidStateError):
            await report_service.transition(report.id, ReportStatus.DISMISSED)

    @pytest.mark.asyncio
    async def test_pending_report_can_be_dismissed(self, unit_env):
        report_service = await unit_env.get(ReportService)
        report = await report_service.file(new_user_id(), new_user_id(), "Spam")

        dismissed = await report_service.transition(report.id, ReportStatus.DISMISSED)

        assert dismissed.status == ReportStatus.DISMISSED

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "target", [ReportStatus.RESOLVED, ReportStatus.PENDING]
    )
    async def test_pending_report_rejects_illegal_targets(self, unit_env, target):
        report_service = await unit_env.get(ReportService)
        report = await report_service.file(new_user_id(), new_user_id(), "Spam")

        with pytest.raises(InvalidStateError):
            await report_service.transition(report.id, target)

        assert (await report_service.get_by_id(report.id)).status == (
            ReportStatus.PENDING
        )

    @pytest.mark.asyncio
    async def test_transition_unknown_report_raises_not_found(self, unit_env):
        report_service = await unit_env.get(ReportService)

        with pytest.raises(NotFoundError):
            await report_service.transition(
                ReportId(uuid4()), ReportStatus.INVESTIGATING
            )

    @pytest.mark.asyncio
    async def test_list_all_filters_by_status(self, unit_env):
        report_service = await unit_env.get(ReportService)
        pending = await report_service.file(new_user_id(), new_user_id(), "One")
        dismissed = await report_service.file(new_user_id(), new_user_id(), "Two")
        await report_service.transition(dismissed.id, ReportStatus.DISMISSED)

        only_pending = await report_service.list_all(ReportStatus.PENDING)
        everything = await report_service.list_all()

        assert [r.id for r in only_pending] == [pending.id]
        assert [r.id for r in everything] == [dismissed.id, pending.id]
