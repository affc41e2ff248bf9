"""Report use cases."""

from pact.application.usecase.report.file_report import (
    FileReportRequest,
    FileReportResponse,
    FileReportUseCase,
)
from pact.application.usecase.report.items import ReportItem
from pact.application.usecase.report.list_reports import (
    ListReportsRequest,
    ListReportsResponse,
    ListReportsUseCase,
)
from pact.application.usecase.report.transition_report import (
    TransitionReportRequest,
    TransitionReportResponse,
    TransitionReportUseCase,
)

__all__ = [
    "FileReportRequest",
    "FileReportResponse",
    "FileReportUseCase",
    "ListReportsRequest",
    "ListReportsResponse",
    "ListReportsUseCase",
    "ReportItem",
    "TransitionReportRequest",
    "TransitionReportResponse",
    "TransitionReportUseCase",
]
