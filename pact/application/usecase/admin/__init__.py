"""Admin use cases."""

from pact.application.usecase.admin.bootstrap_admin import (
    BootstrapAdminRequest,
    BootstrapAdminResponse,
    BootstrapAdminUseCase,
)
from pact.application.usecase.admin.get_stats import (
    GetStatsRequest,
    GetStatsResponse,
    GetStatsUseCase,
)

__all__ = [
    "BootstrapAdminRequest",
    "BootstrapAdminResponse",
    "BootstrapAdminUseCase",
    "GetStatsRequest",
    "GetStatsResponse",
    "GetStatsUseCase",
]
