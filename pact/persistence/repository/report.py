"""PostgreSQL implementation of Report repository."""

from sqlalchemy import desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pact.domain.model import Report
from pact.domain.repository import ReportRepository
from pact.domain.value import ReportId, ReportStatus
from pact.persistence.mappers import report_to_dict, row_to_report
from pact.persistence.tables import reports_table


class PostgresReportRepository(ReportRepository):
    """PostgreSQL implementation of ReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, report: Report) -> Report:
        await self.session.execute(insert(reports_table).values(**report_to_dict(report)))
        await self.session.flush()
        return report

    async def find_by_id(self, report_id: ReportId) -> Report | None:
        stmt = select(reports_table).where(reports_table.c.id == report_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_report(dict(row)) if row else None

    async def find_all(self, status: ReportStatus | None = None) -> list[Report]:
        stmt = select(reports_table).order_by(desc(reports_table.c.created_at))
        if status is not None:
            stmt = stmt.where(reports_table.c.status == status.value)
        result = await self.session.execute(stmt)
        return [row_to_report(dict(row)) for row in result.mappings().all()]

    async def count_by_status(self, status: ReportStatus) -> int:
        stmt = (
            select(func.count())
            .select_from(reports_table)
            .where(reports_table.c.status == status.value)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def update_status(
        self, report_id: ReportId, expected: ReportStatus, new_status: ReportStatus
    ) -> Report | None:
        stmt = (
            update(reports_table)
            .where(reports_table.c.id == report_id)
            .where(reports_table.c.status == expected.value)
            .values(status=new_status.value)
            .returning(reports_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_report(dict(row)) if row else None
