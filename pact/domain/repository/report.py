"""Report repository interface."""

from abc import ABC, abstractmethod

from pact.domain.model.report import Report
from pact.domain.value import ReportId, ReportStatus


class ReportRepository(ABC):
    """Repository for Report entity."""

    @abstractmethod
    async def save(self, report: Report) -> Report:
        """Persist a newly filed report.

        Args:
            report: The report to store

        Returns:
            The stored report
        """
        pass

    @abstractmethod
    async def find_by_id(self, report_id: ReportId) -> Report | None:
        """Find a report by ID.

        Args:
            report_id: The report's unique identifier

        Returns:
            The report if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, status: ReportStatus | None = None) -> list[Report]:
        """List reports newest first, optionally filtered by status.

        Args:
            status: Optional status filter

        Returns:
            List of reports
        """
        pass

    @abstractmethod
    async def count_by_status(self, status: ReportStatus) -> int:
        """Count reports holding the given status."""
        pass

    @abstractmethod
    async def update_status(
        self, report_id: ReportId, expected: ReportStatus, new_status: ReportStatus
    ) -> Report | None:
        """Atomically change status if the current status equals ``expected``.

        Args:
            report_id: The report to update
            expected: Status the row must currently hold
            new_status: Status to write

        Returns:
            The updated report, or None if missing or the status did not match
        """
        pass
