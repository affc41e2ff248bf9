"""Partnership use cases."""

from pact.application.usecase.partnership.change_partnership_status import (
    ChangePartnershipStatusRequest,
    ChangePartnershipStatusResponse,
    ChangePartnershipStatusUseCase,
)
from pact.application.usecase.partnership.complete_expired_partnerships import (
    CompleteExpiredPartnershipsRequest,
    CompleteExpiredPartnershipsResponse,
    CompleteExpiredPartnershipsUseCase,
)
from pact.application.usecase.partnership.end_partnership import (
    EndPartnershipRequest,
    EndPartnershipResponse,
    EndPartnershipUseCase,
)
from pact.application.usecase.partnership.get_current_partnership import (
    GetCurrentPartnershipRequest,
    GetCurrentPartnershipResponse,
    GetCurrentPartnershipUseCase,
)
from pact.application.usecase.partnership.get_partnership_history import (
    GetPartnershipHistoryRequest,
    GetPartnershipHistoryResponse,
    GetPartnershipHistoryUseCase,
)
from pact.application.usecase.partnership.items import PartnershipItem
from pact.application.usecase.partnership.list_partnerships import (
    ListPartnershipsRequest,
    ListPartnershipsResponse,
    ListPartnershipsUseCase,
)

__all__ = [
    "ChangePartnershipStatusRequest",
    "ChangePartnershipStatusResponse",
    "ChangePartnershipStatusUseCase",
    "CompleteExpiredPartnershipsRequest",
    "CompleteExpiredPartnershipsResponse",
    "CompleteExpiredPartnershipsUseCase",
    "EndPartnershipRequest",
    "EndPartnershipResponse",
    "EndPartnershipUseCase",
    "GetCurrentPartnershipRequest",
    "GetCurrentPartnershipResponse",
    "GetCurrentPartnershipUseCase",
    "GetPartnershipHistoryRequest",
    "GetPartnershipHistoryResponse",
    "GetPartnershipHistoryUseCase",
    "ListPartnershipsRequest",
    "ListPartnershipsResponse",
    "ListPartnershipsUseCase",
    "PartnershipItem",
]
