"""Unit tests for the report use cases."""

from uuid import uuid4

import pytest

from pact.application.usecase.report import (
    FileReportUseCase,
    ListReportsUseCase,
    TransitionReportUseCase,
)
from pact.application.usecase.report.file_report import FileReportRequest
from pact.application.usecase.report.list_reports import ListReportsRequest
from pact.application.usecase.report.transition_report import (
    TransitionReportRequest,
)
from pact.domain.error import InvalidStateError, NotAuthorizedError, NotFoundError
from pact.domain.repository import UserRepository
from pact.domain.value import ReportStatus
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestReportUseCases:
    """Filing and reviewing reports."""

    @pytest.mark.asyncio
    async def test_file_and_review(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        admin, reporter, reported = (
            make_user(is_admin=True),
            make_user(),
            make_user(),
        )
        for user in (admin, reporter, reported):
            await user_repo.save(user)
        file_report = await unit_env.get(FileReportUseCase)
        list_reports = await unit_env.get(ListReportsUseCase)
        transition = await unit_env.get(TransitionReportUseCase)

        # Act
        filed = await file_report.execute(
            FileReportRequest(
                reporter_id=str(reporter.id),
                reported_id=str(reported.id),
                reason="Inappropriate messages",
            )
        )
        pending = await list_reports.execute(
            ListReportsRequest(admin_id=str(admin.id), status=ReportStatus.PENDING)
        )
        reviewed = await transition.execute(
            TransitionReportRequest(
                admin_id=str(admin.id),
                report_id=filed.report.report_id,
                status=ReportStatus.INVESTIGATING,
            )
        )

        # Assert
        assert filed.report.status == ReportStatus.PENDING
        assert [r.report_id for r in pending.reports] == [filed.report.report_id]
        assert reviewed.report.status == ReportStatus.INVESTIGATING

        with pytest.raises(InvalidStateError):
            await transition.execute(
                TransitionReportRequest(
                    admin_id=str(admin.id),
                    report_id=filed.report.report_id,
                    status=ReportStatus.PENDING,
                )
            )

    @pytest.mark.asyncio
    async def test_reporting_unknown_user_fails(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        reporter = make_user()
        await user_repo.save(reporter)
        file_report = await unit_env.get(FileReportUseCase)

        with pytest.raises(NotFoundError):
            await file_report.execute(
                FileReportRequest(
                    reporter_id=str(reporter.id),
                    reported_id=str(uuid4()),
                    reason="Spam",
                )
            )

    @pytest.mark.asyncio
    async def test_member_cannot_list_reports(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        member = make_user()
        await user_repo.save(member)
        list_reports = await unit_env.get(ListReportsUseCase)

        with pytest.raises(NotAuthorizedError):
            await list_reports.execute(ListReportsRequest(admin_id=str(member.id)))
