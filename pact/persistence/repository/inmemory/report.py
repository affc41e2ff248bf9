"""In-memory report repository for testing."""

from pact.domain.model.report import Report
from pact.domain.repository.report import ReportRepository
from pact.domain.value import ReportId, ReportStatus


class InMemoryReportRepository(ReportRepository):
    """In-memory implementation of ReportRepository for testing."""

    def __init__(self) -> None:
        self._reports: dict[ReportId, Report] = {}

    async def save(self, report: Report) -> Report:
        """Store a report."""
        self._reports[report.id] = report
        return report

    async def find_by_id(self, report_id: ReportId) -> Report | None:
        """Find a report by ID."""
        return self._reports.get(report_id)

    async def find_all(self, status: ReportStatus | None = None) -> list[Report]:
        """List reports newest first."""
        reports = [
            r for r in self._reports.values() if status is None or r.status == status
        ]
        return sorted(reversed(reports), key=lambda r: r.created_at, reverse=True)

    async def count_by_status(self, status: ReportStatus) -> int:
        """Count reports with a status."""
        return sum(1 for r in self._reports.values() if r.status == status)

    async def update_status(
        self, report_id: ReportId, expected: ReportStatus, new_status: ReportStatus
    ) -> Report | None:
        """Change status if it still equals ``expected``."""
        current = self._reports.get(report_id)
        if current is None or current.status != expected:
            return None
        updated = current.model_copy(update={"status": new_status})
        self._reports[report_id] = updated
        return updated
